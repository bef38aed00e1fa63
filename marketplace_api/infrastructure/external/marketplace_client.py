# Standard library imports
import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar

# External package imports
import httpx

# Local application imports
from ..http_client_factory import get_shared_http_client
from ...presentation.client_config import ClientConfig
from ...presentation.session import UserSession

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Outcome of an API call; failures carry a message instead of raising"""
    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def success(cls, value: T, status_code: Optional[int] = None) -> "ApiResult[T]":
        return cls(ok=True, value=value, status_code=status_code)

    @classmethod
    def failure(cls, error: str, status_code: Optional[int] = None) -> "ApiResult[T]":
        return cls(ok=False, error=error, status_code=status_code)


class MarketplaceClient:
    """
    HTTP client for the marketplace users API.
    
    Transport errors and non-2xx answers are returned as failed ApiResult
    values so the caller decides how to show them. Task cancellation is not
    caught and propagates to the caller.
    """
    
    def __init__(
        self,
        config: ClientConfig,
        session: UserSession,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Args:
            config: Resolved client configuration (API base URL)
            session: Signed-in user; required for the favorites endpoints
            http_client: AsyncClient to use, defaults to the shared pooled client
        """
        self.config = config
        self.session = session
        self.http_client = http_client if http_client is not None else get_shared_http_client()
    
    async def login(self, email: str, password: str) -> ApiResult[Dict[str, Any]]:
        """POST /users/login, returns the {user, token} body"""
        return await self._request("POST", "users/login", json={"email": email, "password": password}, auth=False)
    
    async def list_favorites(self) -> ApiResult[List[Dict[str, Any]]]:
        """GET /users/{id}/favoritos for the session user"""
        return await self._request("GET", f"users/{self.session.user_id}/favoritos")
    
    async def add_favorite(self, product_id: str) -> ApiResult[Dict[str, Any]]:
        """POST /users/{id}/favoritos with {productId}"""
        return await self._request(
            "POST",
            f"users/{self.session.user_id}/favoritos",
            json={"productId": product_id},
        )
    
    async def remove_favorite(self, product_id: str) -> ApiResult[Dict[str, Any]]:
        """DELETE /users/{id}/favoritos/{productId}"""
        return await self._request("DELETE", f"users/{self.session.user_id}/favoritos/{product_id}")
    
    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        auth: bool = True,
    ) -> ApiResult[Any]:
        if auth and not self.session.is_authenticated:
            return ApiResult.failure("Not signed in")
        
        headers = self.session.authorization_header() if auth else {}
        url = self.config.endpoint(path)
        
        try:
            response = await self.http_client.request(method, url, json=json, headers=headers)
        except httpx.TimeoutException:
            logger.warning(f"Timeout calling {method} {url}")
            return ApiResult.failure("Request timed out")
        except httpx.HTTPError as e:
            logger.warning(f"HTTP error calling {method} {url}: {e}")
            return ApiResult.failure(f"Request failed: {e}")
        
        try:
            body = response.json()
        except ValueError:
            body = None
        
        if response.is_error:
            message = body.get("message") if isinstance(body, dict) else None
            logger.debug(f"{method} {url} returned {response.status_code}: {message}")
            return ApiResult.failure(message or response.text or "Request failed", response.status_code)
        
        if body is None:
            return ApiResult.failure("Invalid JSON response", response.status_code)
        
        return ApiResult.success(body, response.status_code)
