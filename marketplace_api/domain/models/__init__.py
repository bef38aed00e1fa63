from .user import User
from .product import Product
from .donation import DonationStatus

__all__ = ["User", "Product", "DonationStatus"]
