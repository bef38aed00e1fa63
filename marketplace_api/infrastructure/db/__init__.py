from .mongo_connection import (
    get_database,
    close_database,
    get_user_collection,
    get_product_collection,
    get_donation_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_product_repository import MongoProductRepository
from .mongo_donation_repository import MongoDonationRepository

__all__ = [
    "get_database",
    "close_database",
    "get_user_collection",
    "get_product_collection",
    "get_donation_collection",
    "MongoUserRepository",
    "MongoProductRepository",
    "MongoDonationRepository",
]
