from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional


@dataclass
class Product:
    """
    Pure domain model for a catalog Product.
    
    Products are owned by a user and can be added to any user's favorites.
    Image references are stored as given (bare file names or /uploads paths).
    """
    id: Optional[str]
    title: str
    owner_id: Optional[str] = None
    owner_name: Optional[str] = None
    description: Optional[str] = None
    categoria: Optional[str] = None
    image: Optional[str] = None
    images: List[Any] = field(default_factory=list)
    provincia: Optional[str] = None
    condicion: Optional[str] = None
    valor_estimado: Optional[float] = None
    disponible: bool = True
    fecha_publicacion: Optional[datetime] = None
