# Standard library imports
import os
from typing import Final, List, Optional


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "marketplace")
        
        # JWT Configuration (tokens are valid for 24 hours by default)
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440")
        )
        
        # HTTP Configuration
        self.cors_origins: Final[List[str]] = _split_csv(
            os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000")
        )
        self.uploads_dir: Final[str] = os.getenv("UPLOADS_DIR", "uploads")
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
