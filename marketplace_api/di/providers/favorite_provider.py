from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.product_repository import ProductRepository
from ...application.use_cases.favorite.list_favorites import ListFavoritesUseCase
from ...application.use_cases.favorite.add_favorite import AddFavoriteUseCase
from ...application.use_cases.favorite.remove_favorite import RemoveFavoriteUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class FavoriteProvider:
    """Favorites use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case_class in (ListFavoritesUseCase, AddFavoriteUseCase, RemoveFavoriteUseCase):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(
                    user_repository=container.get(UserRepository),
                    product_repository=container.get(ProductRepository),
                )
            )
