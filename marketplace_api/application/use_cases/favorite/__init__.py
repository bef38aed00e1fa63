from .list_favorites import ListFavoritesUseCase
from .add_favorite import AddFavoriteUseCase
from .remove_favorite import RemoveFavoriteUseCase

__all__ = ["ListFavoritesUseCase", "AddFavoriteUseCase", "RemoveFavoriteUseCase"]
