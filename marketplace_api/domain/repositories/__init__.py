from .user_repository import UserRepository
from .product_repository import ProductRepository
from .donation_repository import DonationRepository

__all__ = ["UserRepository", "ProductRepository", "DonationRepository"]
