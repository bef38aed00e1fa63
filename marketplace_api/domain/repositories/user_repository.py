from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """List every user"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by application-defined ID"""
        pass
    
    @abstractmethod
    async def find_by_mongo_id(self, mongo_id: str) -> Optional[User]:
        """Find user by storage (_id) identity"""
        pass
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass
    
    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update)"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, user_id: str) -> bool:
        """Delete user by application ID, True if a document was removed"""
        pass
    
    @abstractmethod
    async def list_favorites(self, user_id: str) -> List[str]:
        """Current favorite product IDs of a user, in insertion order"""
        pass
    
    @abstractmethod
    async def add_favorite(self, user_id: str, product_id: str) -> bool:
        """Atomically append a favorite; False if it was already present"""
        pass
    
    @abstractmethod
    async def remove_favorite(self, user_id: str, product_id: str) -> None:
        """Atomically remove a favorite (no-op if absent)"""
        pass
    
    @abstractmethod
    async def remove_products_from_all_favorites(self, product_ids: Iterable[str]) -> int:
        """Pull products from every user's favorites, returns users modified"""
        pass
