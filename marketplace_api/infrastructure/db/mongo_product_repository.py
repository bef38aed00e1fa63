# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.product_repository import ProductRepository
from ...domain.models.product import Product
from ...domain.constants import ProductFields
from .mongo_connection import get_product_collection
from .object_ids import to_object_id


class MongoProductRepository(ProductRepository):
    """MongoDB implementation of ProductRepository"""
    
    def __init__(self, product_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.product_collection = product_collection if product_collection is not None else get_product_collection()
    
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by MongoDB _id; malformed IDs are treated as not found"""
        object_id = to_object_id(product_id)
        if object_id is None:
            return None
        
        try:
            document = await self.product_collection.find_one({ProductFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding product by ID: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_product(document)
    
    async def find_by_ids(self, product_ids: List[str]) -> List[Product]:
        """Resolve favorite references into products, preserving order"""
        object_ids = [oid for oid in (to_object_id(pid) for pid in product_ids) if oid is not None]
        if not object_ids:
            return []
        
        try:
            by_id: Dict[str, Product] = {}
            async for document in self.product_collection.find({ProductFields.MONGO_ID: {"$in": object_ids}}):
                product = self._document_to_product(document)
                by_id[product.id] = product
        except Exception as e:
            raise RuntimeError(f"Error finding products: {str(e)}")
        
        return [by_id[str(oid)] for oid in object_ids if str(oid) in by_id]
    
    async def find_by_owner(self, owner_id: str) -> List[Product]:
        """Find all products owned by a user"""
        if not owner_id:
            return []
        
        try:
            products = []
            async for document in self.product_collection.find({ProductFields.OWNER_ID: owner_id}):
                products.append(self._document_to_product(document))
            return products
        except Exception as e:
            raise RuntimeError(f"Error listing products for owner: {str(e)}")
    
    async def delete_by_owner(self, owner_id: str) -> int:
        """Delete all products owned by a user"""
        if not owner_id:
            return 0
        
        try:
            result = await self.product_collection.delete_many({ProductFields.OWNER_ID: owner_id})
            return result.deleted_count
        except Exception as e:
            raise RuntimeError(f"Error deleting products for owner: {str(e)}")
    
    def _document_to_product(self, document: Dict[str, Any]) -> Product:
        """Convert MongoDB document to Product domain model"""
        if not document or ProductFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        owner_id = document.get(ProductFields.OWNER_ID)
        return Product(
            id=str(document[ProductFields.MONGO_ID]),
            title=document.get(ProductFields.TITLE, ""),
            owner_id=str(owner_id) if owner_id is not None else None,
            owner_name=document.get(ProductFields.OWNER_NAME),
            description=document.get(ProductFields.DESCRIPTION),
            categoria=document.get(ProductFields.CATEGORIA),
            image=document.get(ProductFields.IMAGE),
            images=list(document.get(ProductFields.IMAGES) or []),
            provincia=document.get(ProductFields.PROVINCIA),
            condicion=document.get(ProductFields.CONDICION),
            valor_estimado=document.get(ProductFields.VALOR_ESTIMADO),
            disponible=bool(document.get(ProductFields.DISPONIBLE, True)),
            fecha_publicacion=document.get(ProductFields.FECHA_PUBLICACION),
        )
