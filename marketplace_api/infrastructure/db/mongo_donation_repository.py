# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.donation_repository import DonationRepository
from ...domain.models.donation import DonationStatus
from ...domain.constants import DonationFields
from .mongo_connection import get_donation_collection
from .object_ids import to_object_id


class MongoDonationRepository(DonationRepository):
    """MongoDB implementation of DonationRepository (donor/receiver hold user _id values)"""
    
    def __init__(self, donation_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.donation_collection = donation_collection if donation_collection is not None else get_donation_collection()
    
    async def count_delivered_by_donor(self, donor_id: str) -> int:
        object_id = to_object_id(donor_id)
        if object_id is None:
            return 0
        
        try:
            return await self.donation_collection.count_documents({
                DonationFields.DONOR: object_id,
                DonationFields.STATUS: DonationStatus.DELIVERED,
            })
        except Exception as e:
            raise RuntimeError(f"Error counting donations: {str(e)}")
    
    async def delete_by_user(self, user_id: str) -> int:
        object_id = to_object_id(user_id)
        if object_id is None:
            return 0
        
        try:
            result = await self.donation_collection.delete_many({
                "$or": [
                    {DonationFields.DONOR: object_id},
                    {DonationFields.RECEIVER: object_id},
                ]
            })
            return result.deleted_count
        except Exception as e:
            raise RuntimeError(f"Error deleting donations: {str(e)}")
