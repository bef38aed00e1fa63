from abc import ABC, abstractmethod


class DonationRepository(ABC):
    """Repository interface - defines contract for donation data access"""
    
    @abstractmethod
    async def count_delivered_by_donor(self, donor_id: str) -> int:
        """Count donations with status 'delivered' made by a donor"""
        pass
    
    @abstractmethod
    async def delete_by_user(self, user_id: str) -> int:
        """Delete donations where the user is donor or receiver"""
        pass
