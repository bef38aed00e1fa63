# Local application imports
from ...domain.models.product import Product
from ...domain.models.user import User
from .favorite_dto import ProductResponse
from .user_dto import UserDetailResponse, UserResponse


def user_to_response(user: User) -> UserResponse:
    """Build the public user DTO; the password hash never leaves the domain model"""
    return UserResponse(
        mongo_id=user.mongo_id or "",
        id=user.id,
        email=user.email,
        username=user.username,
        nombre=user.nombre,
        apellido=user.apellido,
        imagen=user.imagen,
        zona=user.zona,
        ubicacion=user.ubicacion,
        telefono=user.telefono,
        mostrar_contacto=user.mostrar_contacto,
        favoritos=list(user.favoritos),
        transacciones=list(user.transacciones),
    )


def user_to_detail_response(user: User, donaciones_count: int) -> UserDetailResponse:
    """Profile view: soft-deleted transactions removed, delivered donations counted"""
    base = user_to_response(user)
    return UserDetailResponse(
        **base.model_dump(exclude={"transacciones"}),
        transacciones=user.active_transactions(),
        donaciones_count=donaciones_count,
    )


def product_to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id or "",
        title=product.title,
        description=product.description,
        categoria=product.categoria,
        image=product.image,
        images=list(product.images),
        provincia=product.provincia,
        owner_id=product.owner_id,
        owner_name=product.owner_name,
        condicion=product.condicion,
        valor_estimado=product.valor_estimado,
        disponible=product.disponible,
        fecha_publicacion=product.fecha_publicacion,
    )
