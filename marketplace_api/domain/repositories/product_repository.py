from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.product import Product


class ProductRepository(ABC):
    """Repository interface - defines contract for product data access"""
    
    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by storage ID"""
        pass
    
    @abstractmethod
    async def find_by_ids(self, product_ids: List[str]) -> List[Product]:
        """Find products keeping the given order, skipping missing ones"""
        pass
    
    @abstractmethod
    async def find_by_owner(self, owner_id: str) -> List[Product]:
        """Find all products owned by a user"""
        pass
    
    @abstractmethod
    async def delete_by_owner(self, owner_id: str) -> int:
        """Delete all products owned by a user, returns deleted count"""
        pass
