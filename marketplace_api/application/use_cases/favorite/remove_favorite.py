# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.product_repository import ProductRepository
from ...dto.favorite_dto import FavoritesResponse
from ...exceptions import ProductNotFoundError, UserNotFoundError

logger = logging.getLogger(__name__)


class RemoveFavoriteUseCase:
    """Use case for removing a product from a user's favorites (idempotent)"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        product_repository: ProductRepository,
    ) -> None:
        self.user_repository = user_repository
        self.product_repository = product_repository
    
    async def execute(self, user_id: str, product_id: str) -> FavoritesResponse:
        """
        Raises:
            UserNotFoundError: If the user does not exist
            ProductNotFoundError: If the product does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        
        product = await self.product_repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError()
        
        await self.user_repository.remove_favorite(user_id, product.id or "")
        favoritos = await self.user_repository.list_favorites(user_id)
        logger.info(f"User {user_id} removed product {product.id} from favorites")
        return FavoritesResponse(message="Product removed from favorites", favoritos=favoritos)
