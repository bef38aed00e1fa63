from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FavoriteAddRequest(BaseModel):
    """DTO for adding a product to favorites"""
    model_config = ConfigDict(populate_by_name=True)

    product_id: Optional[str] = Field(default=None, alias="productId")


class FavoritesResponse(BaseModel):
    """DTO returned after a favorites change: message plus current product IDs"""
    message: str
    favoritos: List[str]


class ProductResponse(BaseModel):
    """DTO for a product summary as shown on a product card"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    description: Optional[str] = None
    categoria: Optional[str] = None
    image: Optional[str] = None
    images: List[Any] = Field(default_factory=list)
    provincia: Optional[str] = None
    owner_id: Optional[str] = Field(default=None, alias="ownerId")
    owner_name: Optional[str] = Field(default=None, alias="ownerName")
    condicion: Optional[str] = None
    valor_estimado: Optional[float] = Field(default=None, alias="valorEstimado")
    disponible: bool = True
    fecha_publicacion: Optional[datetime] = Field(default=None, alias="fechaPublicacion")
