"""Cascading deletion of a user and the records that depend on it."""
import logging

from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.product_repository import ProductRepository
from ...domain.repositories.donation_repository import DonationRepository
from ..dto.user_dto import DeletionSummary

logger = logging.getLogger(__name__)


class UserDeletionService:
    """
    Removes a user together with everything that references it.
    
    Order:
    1. Products owned by the user are deleted
    2. Those products are pulled from every user's favorites
    3. Donations where the user is donor or receiver are deleted
    4. The user document itself is deleted
    
    Steps are sequential document operations without a transaction; a failure
    part way leaves earlier steps applied and is reported as a RuntimeError.
    """
    
    def __init__(
        self,
        user_repository: UserRepository,
        product_repository: ProductRepository,
        donation_repository: DonationRepository,
    ) -> None:
        self.user_repository = user_repository
        self.product_repository = product_repository
        self.donation_repository = donation_repository
    
    async def delete_user_cascade(self, user: User) -> DeletionSummary:
        user_id = user.id or ""
        
        owned_products = await self.product_repository.find_by_owner(user_id)
        product_ids = [product.id for product in owned_products if product.id]
        products_deleted = await self.product_repository.delete_by_owner(user_id)
        favorites_cleaned = await self.user_repository.remove_products_from_all_favorites(product_ids)
        
        donations_deleted = await self.donation_repository.delete_by_user(user.mongo_id or "")
        user_deleted = await self.user_repository.delete_by_id(user_id)
        
        summary = DeletionSummary(
            user_deleted=user_deleted,
            products_deleted=products_deleted,
            favorites_cleaned=favorites_cleaned,
            donations_deleted=donations_deleted,
        )
        logger.info(
            f"Deleted user {user_id}: {products_deleted} product(s), "
            f"{favorites_cleaned} favorite list(s) cleaned, {donations_deleted} donation(s)"
        )
        return summary
