"""
Exception hierarchy for the marketplace use cases.

Client errors subclass ValueError so code that catches ValueError still treats
them as request problems. The API layer maps each class to its HTTP status.
"""


class MarketplaceError(ValueError):
    """Base exception for request-level errors raised by use cases."""
    pass


# -----------------------------------------------------------------------------
# Validation (400)
# -----------------------------------------------------------------------------


class ValidationError(MarketplaceError):
    """Raised when a request payload is missing or has invalid fields."""
    pass


class DuplicateEmailError(ValidationError):
    """Raised when the email is already registered to another user."""
    pass


class DuplicateFavoriteError(ValidationError):
    """Raised when the product is already in the user's favorites."""
    pass


# -----------------------------------------------------------------------------
# Authentication (401 / 403)
# -----------------------------------------------------------------------------


class AuthenticationError(MarketplaceError):
    """Raised when credentials are missing."""
    pass


class InvalidCredentialsError(AuthenticationError):
    """Raised when the password does not match."""
    pass


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is malformed, tampered with or expired."""
    pass


# -----------------------------------------------------------------------------
# Not found (404)
# -----------------------------------------------------------------------------


class NotFoundError(MarketplaceError):
    """Base class for missing entities."""
    pass


class UserNotFoundError(NotFoundError):
    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class ProductNotFoundError(NotFoundError):
    def __init__(self, message: str = "Product not found"):
        super().__init__(message)
