# Standard library imports
import logging
from typing import Any, Dict, Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection
from .object_ids import to_object_id

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_all(self) -> List[User]:
        """List every user document"""
        try:
            users = []
            async for document in self.user_collection.find({}):
                users.append(self._document_to_user(document))
            return users
        except Exception as e:
            raise RuntimeError(f"Error listing users: {str(e)}")

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by application-defined ID

        Args:
            user_id: Value of the 'id' field

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.ID: user_id})
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_mongo_id(self, mongo_id: str) -> Optional[User]:
        """
        Find user by MongoDB _id

        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        object_id = to_object_id(mongo_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding user by _id: {str(e)}")

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")

        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with mongo_id set
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)

        try:
            if user.mongo_id:
                object_id = to_object_id(user.mongo_id)
                if object_id is None:
                    raise ValueError(f"Invalid user _id format: {user.mongo_id}")

                # Favorites are only changed through add_favorite/remove_favorite
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": {k: v for k, v in user_dict.items() if k != UserFields.FAVORITOS}}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")

                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
                if document is None:
                    raise RuntimeError(f"User {user.id} was updated but could not be retrieved")
            else:
                result = await self.user_collection.insert_one(user_dict)
                document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
                if document is None:
                    raise RuntimeError("User was created but could not be retrieved")

            return self._document_to_user(document)
        except (ValueError, RuntimeError):
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

    async def delete_by_id(self, user_id: str) -> bool:
        """Delete user by application ID"""
        try:
            result = await self.user_collection.delete_one({UserFields.ID: user_id})
            return result.deleted_count > 0
        except Exception as e:
            raise RuntimeError(f"Error deleting user: {str(e)}")

    async def list_favorites(self, user_id: str) -> List[str]:
        """Favorite product IDs of a user (empty if the user does not exist)"""
        try:
            document = await self.user_collection.find_one(
                {UserFields.ID: user_id},
                {UserFields.FAVORITOS: 1}
            )
        except Exception as e:
            raise RuntimeError(f"Error reading favorites: {str(e)}")

        if document is None:
            return []
        return [str(fav) for fav in document.get(UserFields.FAVORITOS, [])]

    async def add_favorite(self, user_id: str, product_id: str) -> bool:
        """
        Append a product to the user's favorites in a single conditional update.

        The filter only matches while the product is absent, so two concurrent
        adds can never store the same product twice.

        Returns:
            True if the product was added, False if it was already present
        """
        object_id = to_object_id(product_id)
        if object_id is None:
            raise ValueError(f"Invalid product ID format: {product_id}")

        try:
            result = await self.user_collection.update_one(
                {UserFields.ID: user_id, UserFields.FAVORITOS: {"$ne": object_id}},
                {"$push": {UserFields.FAVORITOS: object_id}}
            )
        except Exception as e:
            raise RuntimeError(f"Error adding favorite: {str(e)}")

        return result.modified_count > 0

    async def remove_favorite(self, user_id: str, product_id: str) -> None:
        """Pull a product from the user's favorites (no-op if absent)"""
        object_id = to_object_id(product_id)
        if object_id is None:
            raise ValueError(f"Invalid product ID format: {product_id}")

        try:
            await self.user_collection.update_one(
                {UserFields.ID: user_id},
                {"$pull": {UserFields.FAVORITOS: object_id}}
            )
        except Exception as e:
            raise RuntimeError(f"Error removing favorite: {str(e)}")

    async def remove_products_from_all_favorites(self, product_ids: Iterable[str]) -> int:
        """Pull the given products from every user's favorites"""
        object_ids = [oid for oid in (to_object_id(pid) for pid in product_ids) if oid is not None]
        if not object_ids:
            return 0

        try:
            result = await self.user_collection.update_many(
                {UserFields.FAVORITOS: {"$in": object_ids}},
                {"$pull": {UserFields.FAVORITOS: {"$in": object_ids}}}
            )
        except Exception as e:
            raise RuntimeError(f"Error cleaning favorites: {str(e)}")

        return result.modified_count

    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=document.get(UserFields.ID),
            mongo_id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.PASSWORD, ""),
            username=document.get(UserFields.USERNAME),
            nombre=document.get(UserFields.NOMBRE),
            apellido=document.get(UserFields.APELLIDO),
            imagen=document.get(UserFields.IMAGEN),
            zona=document.get(UserFields.ZONA),
            ubicacion=document.get(UserFields.UBICACION),
            telefono=document.get(UserFields.TELEFONO),
            mostrar_contacto=bool(document.get(UserFields.MOSTRAR_CONTACTO, False)),
            favoritos=[str(fav) for fav in document.get(UserFields.FAVORITOS, [])],
            transacciones=list(document.get(UserFields.TRANSACCIONES, [])),
        )

    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to MongoDB document (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        favoritos = [oid for oid in (to_object_id(fav) for fav in user.favoritos) if oid is not None]

        return {
            UserFields.ID: user.id,
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD: user.hashed_password,
            UserFields.USERNAME: user.username,
            UserFields.NOMBRE: user.nombre,
            UserFields.APELLIDO: user.apellido,
            UserFields.IMAGEN: user.imagen,
            UserFields.ZONA: user.zona,
            UserFields.UBICACION: user.ubicacion,
            UserFields.TELEFONO: user.telefono,
            UserFields.MOSTRAR_CONTACTO: user.mostrar_contacto,
            UserFields.FAVORITOS: favoritos,
            UserFields.TRANSACCIONES: user.transacciones,
        }
