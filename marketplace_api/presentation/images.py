"""Product image path resolution."""
from typing import Any, Optional, Sequence

UPLOADS_PREFIX = "/uploads/products/"
PLACEHOLDER_IMAGE = "/images/OIP3.jpg"


def _normalize(reference: Any) -> Any:
    # Non-string references (already-built objects) are passed through untouched
    if not isinstance(reference, str):
        return reference
    if reference.startswith("/uploads") or reference.startswith("uploads"):
        return reference
    return f"{UPLOADS_PREFIX}{reference.lstrip('/')}"


def resolve_main_image(images: Optional[Sequence[Any]], image: Any = None) -> Any:
    """
    Pick the cover image of a product.
    
    Priority is the first element of ``images``, then the legacy single
    ``image``, then None. Bare file names are rewritten under
    /uploads/products/; references already under uploads are kept.
    
    >>> resolve_main_image(["foo.jpg"])
    '/uploads/products/foo.jpg'
    >>> resolve_main_image(["/uploads/products/foo.jpg"])
    '/uploads/products/foo.jpg'
    >>> resolve_main_image(None, None) is None
    True
    """
    if images and isinstance(images, (list, tuple)):
        return _normalize(images[0])
    if image:
        return _normalize(image)
    return None


def get_product_image_url(path: Any, server_origin: str = "") -> str:
    """
    Turn a resolved image path into a URL the browser can load.
    
    Args:
        path: Output of resolve_main_image
        server_origin: Origin serving /uploads (API URL without /api)
        
    Returns:
        The placeholder when there is no image, absolute URLs unchanged,
        otherwise the path joined to ``server_origin``
    """
    if not path or not isinstance(path, str):
        return PLACEHOLDER_IMAGE
    if path.startswith(("http://", "https://", "data:")):
        return path
    if not server_origin:
        return path if path.startswith("/") else f"/{path}"
    return f"{server_origin.rstrip('/')}/{path.lstrip('/')}"
