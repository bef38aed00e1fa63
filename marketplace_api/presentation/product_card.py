"""
Product card view model.

Holds everything a product summary card needs: the resolved cover image,
display labels, and the favorite toggle state kept in sync with the API.
The card owns the asyncio tasks it starts; ``unmount`` cancels them and any
result arriving afterwards is dropped.
"""
# Standard library imports
import asyncio
import enum
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, List, Optional, Set, TypeVar

# Local application imports
from .images import PLACEHOLDER_IMAGE, get_product_image_url, resolve_main_image

if TYPE_CHECKING:
    from ..infrastructure.external.marketplace_client import ApiResult, MarketplaceClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FavoriteStatus(str, enum.Enum):
    UNKNOWN = "unknown"
    NOT_FAVORITE = "not_favorite"
    FAVORITE = "favorite"


@dataclass
class ProductCardProps:
    """Inputs of a product card, as received from the product listing"""
    id: str
    title: str
    description: Optional[str] = None
    categoria: Optional[str] = None
    image: Any = None
    images: List[Any] = field(default_factory=list)
    fecha_publicacion: Optional[Any] = None
    provincia: Optional[str] = None
    owner_name: Optional[str] = None
    owner_id: Optional[str] = None
    condicion: Optional[str] = None
    valor_estimado: Optional[float] = None
    disponible: bool = True
    hide_favorite_button: bool = False
    show_remove_favorite: bool = False
    on_remove_favorite: Optional[Callable[[str], Any]] = None


def _format_date(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    if isinstance(value, (datetime, date)):
        return value.strftime("%d/%m/%Y")
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).strftime("%d/%m/%Y")
    except ValueError:
        return None


class ProductCard:
    """
    View model for one product card.

    Favorite status starts UNKNOWN and becomes FAVORITE or NOT_FAVORITE once
    the favorites list is loaded or a toggle succeeds. ``loading`` is True
    while a toggle is in flight; toggles requested meanwhile are ignored.
    Failed requests leave the status as it was and set ``error``.
    """

    def __init__(
        self,
        props: ProductCardProps,
        client: Optional["MarketplaceClient"] = None,
        server_origin: str = "",
    ) -> None:
        """
        Args:
            props: Product data and display flags
            client: API client bound to the current session; None for anonymous visitors
            server_origin: Origin that serves /uploads, usually ClientConfig.server_origin
        """
        self.props = props
        self.client = client
        self.server_origin = server_origin
        self.favorite_status = FavoriteStatus.UNKNOWN
        self.loading = False
        self.error: Optional[str] = None
        self.mounted = False
        self._image_failed = False
        self._tasks: Set[asyncio.Task] = set()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def can_sync_favorites(self) -> bool:
        return self.client is not None and self.client.session.is_authenticated

    @property
    def is_favorite(self) -> bool:
        return self.favorite_status == FavoriteStatus.FAVORITE

    async def mount(self) -> None:
        """Load the favorite status of this product for the session user"""
        self.mounted = True
        if not self.can_sync_favorites:
            return

        result = await self._run(self.client.list_favorites())
        if result is None:
            return
        if not result.ok:
            logger.warning(f"Could not load favorites for product {self.props.id}: {result.error}")
            self.error = result.error
            return

        favorite_ids = {str(product.get("_id")) for product in result.value or []}
        self.favorite_status = (
            FavoriteStatus.FAVORITE if self.props.id in favorite_ids else FavoriteStatus.NOT_FAVORITE
        )
        self.error = None

    async def unmount(self) -> None:
        """Cancel in-flight requests; their results will be discarded"""
        self.mounted = False
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    async def toggle_favorite(self) -> bool:
        """
        Add or remove this product from favorites.

        Returns:
            True if a request was made and succeeded, False otherwise;
            an unmounted card makes no request
        """
        if self.loading or not self.mounted or not self.can_sync_favorites:
            return False

        removing = self.is_favorite
        self.loading = True
        try:
            if removing:
                result = await self._run(self.client.remove_favorite(self.props.id))
            else:
                result = await self._run(self.client.add_favorite(self.props.id))
        finally:
            self.loading = False

        if result is None:
            return False
        if not result.ok:
            logger.warning(f"Favorite toggle failed for product {self.props.id}: {result.error}")
            self.error = result.error
            return False

        self.favorite_status = FavoriteStatus.NOT_FAVORITE if removing else FavoriteStatus.FAVORITE
        self.error = None
        return True

    def remove_from_favorites(self) -> None:
        """Handler of the explicit 'remove from favorites' button"""
        if self.props.on_remove_favorite is not None:
            self.props.on_remove_favorite(self.props.id)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    @property
    def main_image(self) -> Any:
        return resolve_main_image(self.props.images, self.props.image)

    @property
    def image_src(self) -> str:
        if self._image_failed:
            return PLACEHOLDER_IMAGE
        return get_product_image_url(self.main_image, self.server_origin)

    def on_image_error(self) -> bool:
        """
        Swap the image to the placeholder after a load failure.

        Returns:
            True the first time; later failures (of the placeholder itself) are ignored
        """
        if self._image_failed:
            return False
        self._image_failed = True
        return True

    @property
    def owner_profile_path(self) -> Optional[str]:
        if not self.props.owner_id:
            return None
        return f"/perfil-publico/{self.props.owner_id}"

    def render(self) -> Dict[str, Any]:
        """Plain view of the card for a template"""
        published = _format_date(self.props.fecha_publicacion)
        return {
            "id": self.props.id,
            "title": self.props.title,
            "description": self.props.description,
            "categoria": self.props.categoria,
            "image_src": self.image_src,
            "image_alt": self.props.title,
            "published_label": published or "No date",
            "provincia_label": self.props.provincia or "Unspecified",
            "owner_label": self.props.owner_name or "User",
            "owner_profile_path": self.owner_profile_path,
            "show_favorite_button": not self.props.hide_favorite_button,
            "favorite_active": self.is_favorite,
            "favorite_button_title": "Remove from favorites" if self.is_favorite else "Add to favorites",
            "favorite_loading": self.loading,
            "show_remove_favorite": self.props.show_remove_favorite,
            "error": self.error,
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _run(self, coro: Awaitable["ApiResult[T]"]) -> Optional["ApiResult[T]"]:
        """
        Run a request as a task owned by the card.

        Returns:
            The result, or None if the card was unmounted meanwhile
        """
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        try:
            result = await task
        except asyncio.CancelledError:
            if self.mounted:
                raise
            return None
        finally:
            self._tasks.discard(task)

        if not self.mounted:
            return None
        return result
