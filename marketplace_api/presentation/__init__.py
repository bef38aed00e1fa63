"""
Presentation helpers for the catalog front end.

ClientConfig resolves the API base URL once at startup, UserSession carries
the signed-in user explicitly, and ProductCard is the view model behind a
product summary with its favorite toggle.
"""
from .client_config import ClientConfig, resolve_api_url, DEFAULT_API_URL
from .session import UserSession
from .images import resolve_main_image, get_product_image_url, PLACEHOLDER_IMAGE
from .product_card import ProductCard, ProductCardProps, FavoriteStatus

__all__ = [
    "ClientConfig",
    "resolve_api_url",
    "DEFAULT_API_URL",
    "UserSession",
    "resolve_main_image",
    "get_product_image_url",
    "PLACEHOLDER_IMAGE",
    "ProductCard",
    "ProductCardProps",
    "FavoriteStatus",
]
