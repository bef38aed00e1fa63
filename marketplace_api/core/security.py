# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

# Local application imports
from .config import get_settings


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt
    
    Args:
        plain_password: The plain text password to hash
        
    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: Optional[str], hashed_password: Optional[str]) -> bool:
    """
    Verify a plain password against a bcrypt hash (one-way comparison)
    
    Returns:
        True if passwords match, False otherwise (including malformed hashes)
    """
    if plain_password is None or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


def create_access_token(user_id: str, email: str) -> str:
    """Sign the bearer token issued on registration and login."""
    return create_jwt_token({"id": user_id, "email": email})


def create_jwt_token(payload: Dict[str, Any], expires_minutes: Optional[int] = None) -> str:
    """
    Create a JWT token with expiration
    
    Args:
        payload: Dictionary containing token claims (e.g., id, email)
        expires_minutes: Override for the configured lifetime
        
    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    lifetime = settings.access_token_expire_minutes if expires_minutes is None else expires_minutes
    issued_at = int(time.time())
    expires_at = issued_at + (lifetime * 60)
    
    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": expires_at,
    }
    
    return jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token
    
    Args:
        token: The JWT token string to decode
        
    Returns:
        Dictionary containing decoded token claims
        
    Raises:
        ValueError: If token is invalid, tampered with or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
    except ExpiredSignatureError:
        raise ValueError("Invalid token: token has expired")
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}")
