from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from .user_dto import UserResponse


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    id: Optional[str] = None
    nombre: Optional[str] = Field(default=None, max_length=200)
    apellido: Optional[str] = Field(default=None, max_length=200)
    username: Optional[str] = Field(default=None, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6, max_length=256)
    imagen: Optional[str] = None
    # Front end sends the province; stored as both zona and ubicacion
    provincia: Optional[str] = None
    zona: Optional[str] = None
    ubicacion: Optional[str] = None


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=1, max_length=256)


class AuthResponse(BaseModel):
    """DTO returned by register and login: the user plus a bearer token"""
    user: UserResponse
    token: str


class TokenClaims(BaseModel):
    """Claims carried by a verified bearer token"""
    id: str
    email: str
