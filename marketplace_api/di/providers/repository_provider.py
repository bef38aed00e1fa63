from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.product_repository import ProductRepository
from ...domain.repositories.donation_repository import DonationRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_product_repository import MongoProductRepository
from ...infrastructure.db.mongo_donation_repository import MongoDonationRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )
        
        container.register_singleton(
            ProductRepository,
            MongoProductRepository(product_collection=container.get("product_collection"))
        )
        
        container.register_singleton(
            DonationRepository,
            MongoDonationRepository(donation_collection=container.get("donation_collection"))
        )
