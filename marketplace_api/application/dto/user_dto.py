from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    model_config = ConfigDict(populate_by_name=True)

    mongo_id: str = Field(alias="_id")
    id: Optional[str] = None
    email: str
    username: Optional[str] = None
    nombre: Optional[str] = None
    apellido: Optional[str] = None
    imagen: Optional[str] = None
    zona: Optional[str] = None
    ubicacion: Optional[str] = None
    telefono: Optional[str] = None
    mostrar_contacto: bool = Field(default=False, alias="mostrarContacto")
    favoritos: List[str] = Field(default_factory=list)
    transacciones: List[Dict[str, Any]] = Field(default_factory=list)


class UserDetailResponse(UserResponse):
    """User profile with the number of delivered donations"""
    donaciones_count: int = Field(default=0, alias="donacionesCount")


class UserUpdateRequest(BaseModel):
    """
    Partial user update. Only fields present in the request body are applied;
    use ``model_dump(exclude_unset=True)`` to get them.
    """
    model_config = ConfigDict(populate_by_name=True)

    nombre: Optional[str] = None
    apellido: Optional[str] = None
    username: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6, max_length=256)
    imagen: Optional[str] = None
    zona: Optional[str] = None
    telefono: Optional[str] = None
    mostrar_contacto: Optional[bool] = Field(default=None, alias="mostrarContacto")
    transacciones: Optional[List[Dict[str, Any]]] = None

    @field_validator("mostrar_contacto", mode="before")
    @classmethod
    def coerce_mostrar_contacto(cls, value: Any) -> Optional[bool]:
        # Forms send "true"/"false" strings; anything but true/"true" is False
        if value is None:
            return None
        return value is True or value == "true"


class DeletionSummary(BaseModel):
    """Records touched by a cascading user deletion"""
    model_config = ConfigDict(populate_by_name=True)

    user_deleted: bool = Field(alias="userDeleted")
    products_deleted: int = Field(default=0, alias="productsDeleted")
    favorites_cleaned: int = Field(default=0, alias="favoritesCleaned")
    donations_deleted: int = Field(default=0, alias="donationsDeleted")


class DeleteUserResponse(BaseModel):
    """DTO for user deletion response"""
    message: str
    summary: DeletionSummary
