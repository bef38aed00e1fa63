from .marketplace_client import ApiResult, MarketplaceClient

__all__ = ["ApiResult", "MarketplaceClient"]
