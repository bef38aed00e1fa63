from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.product_repository import ProductRepository
from ...domain.repositories.donation_repository import DonationRepository
from ...application.services.user_deletion_service import UserDeletionService
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers profile read/update/delete use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the deletion service and all user use cases.
        Use cases are created on-demand via factories.
        """
        container.register_singleton(
            UserDeletionService,
            UserDeletionService(
                user_repository=container.get(UserRepository),
                product_repository=container.get(ProductRepository),
                donation_repository=container.get(DonationRepository),
            )
        )
        
        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(
                user_repository=container.get(UserRepository),
            )
        )
        
        container.register_factory(
            GetUserUseCase,
            lambda: GetUserUseCase(
                user_repository=container.get(UserRepository),
                donation_repository=container.get(DonationRepository),
            )
        )
        
        container.register_factory(
            UpdateUserUseCase,
            lambda: UpdateUserUseCase(
                user_repository=container.get(UserRepository),
            )
        )
        
        container.register_factory(
            DeleteUserUseCase,
            lambda: DeleteUserUseCase(
                user_repository=container.get(UserRepository),
                deletion_service=container.get(UserDeletionService),
            )
        )
