# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    logger.info(f"MongoDB client created for database '{settings.mongo_database_name}'")
    return _mongo_database


def close_database() -> None:
    """Close the MongoDB client (call on application shutdown)."""
    global _mongo_client, _mongo_database
    
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("Closed MongoDB client")
    _mongo_client = None
    _mongo_database = None


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


def get_product_collection() -> AsyncIOMotorCollection:
    """
    Get products collection from MongoDB
    
    Returns:
        MongoDB collection for products
    """
    return get_database()["products"]


def get_donation_collection() -> AsyncIOMotorCollection:
    """
    Get donations collection from MongoDB
    
    Returns:
        MongoDB collection for donations
    """
    return get_database()["donations"]
