# Standard library imports
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3001/api"

# Set by the hosting page after the build; wins over the build-time value
OVERRIDE_ENV_VAR = "API_URL_OVERRIDE"
BUILD_ENV_VAR = "MARKETPLACE_API_URL"


class ApiUrlSource:
    OVERRIDE = "override"
    ENVIRONMENT = "environment"
    DEFAULT = "default"


def _select(runtime_override: Optional[str], build_env_url: Optional[str]) -> Tuple[str, str]:
    if runtime_override and runtime_override.strip():
        return runtime_override.strip(), ApiUrlSource.OVERRIDE
    if build_env_url and build_env_url.strip():
        return build_env_url.strip(), ApiUrlSource.ENVIRONMENT
    return DEFAULT_API_URL, ApiUrlSource.DEFAULT


def resolve_api_url(runtime_override: Optional[str], build_env_url: Optional[str]) -> str:
    """
    Pick the API base URL: runtime override, then build-time value, then the
    local default. Blank strings count as absent.
    """
    return _select(runtime_override, build_env_url)[0]


@dataclass(frozen=True)
class ClientConfig:
    """
    Front-end configuration, built once at startup and passed to call sites.
    
    Attributes:
        api_url: Base URL of the HTTP API, including the /api prefix
        source: Which input the URL came from (override, environment, default)
    """
    api_url: str
    source: str = ApiUrlSource.DEFAULT

    @classmethod
    def from_environment(
        cls,
        runtime_override: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ClientConfig":
        """
        Resolve the configuration a single time.
        
        Args:
            runtime_override: Explicit override (takes precedence over everything)
            environ: Mapping to read variables from, defaults to os.environ
        """
        env = os.environ if environ is None else environ
        override = runtime_override or env.get(OVERRIDE_ENV_VAR)
        api_url, source = _select(override, env.get(BUILD_ENV_VAR))
        logger.info(f"Using API URL {api_url} (source: {source})")
        return cls(api_url=api_url.rstrip("/"), source=source)

    @property
    def server_origin(self) -> str:
        """API URL without its trailing /api segment, used for static files"""
        if self.api_url.endswith("/api"):
            return self.api_url[: -len("/api")]
        return self.api_url

    def endpoint(self, path: str) -> str:
        return f"{self.api_url}/{path.lstrip('/')}"
