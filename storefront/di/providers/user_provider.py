from typing import TYPE_CHECKING

from ...application.services.user_service import UserService
from ...application.use_cases.user_use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
)
from ...domain.repositories.user_repository import UserRepository
from ...utils.key_lock import KeyedLock

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User provider - registers the user service and its use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        service = UserService(
            user_repository=container.get(UserRepository),
            lock=container.get(KeyedLock),
        )
        container.register_singleton(UserService, service)

        container.register_singleton(GetUserUseCase, GetUserUseCase(service))
        container.register_singleton(CreateUserUseCase, CreateUserUseCase(service))
        container.register_singleton(UpdateUserUseCase, UpdateUserUseCase(service))
        container.register_singleton(DeleteUserUseCase, DeleteUserUseCase(service))
