from .user_deletion_service import UserDeletionService

__all__ = ["UserDeletionService"]
