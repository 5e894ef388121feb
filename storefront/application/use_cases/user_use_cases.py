"""
User Use Cases
==============

Controller-level user operations on top of UserService.
"""
import logging
from typing import Optional

from storefront.application.services.user_service import UserService
from storefront.domain.models.user import User

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Use case for fetching one user."""

    def __init__(self, user_service: UserService):
        self._service = user_service

    def execute(self, user_id: int) -> User:
        return self._service.get_by_id(user_id)


class CreateUserUseCase:
    """Use case for creating a user. All checks live in UserService.save."""

    def __init__(self, user_service: UserService):
        self._service = user_service

    def execute(self, user: User) -> User:
        return self._service.save(user)


class UpdateUserUseCase:
    """
    Use case for updating a user's name and/or email.

    Only non-None values overwrite. Unlike UserService.update_partial, the
    new email is not checked against other users here; the save goes
    through UserService.save, which only re-checks existence for users
    that already have an id.
    """

    def __init__(self, user_service: UserService):
        """
        Initialize use case with service.

        Args:
            user_service: Service holding the user rules
        """
        self._service = user_service

    def execute(self, user_id: int, name: Optional[str] = None, email: Optional[str] = None) -> User:
        """
        Execute the update user use case.

        Raises:
            NotFoundError: If the user does not exist
            InvalidArgumentError: If the resulting name or email is blank
        """
        existing = self._service.get_by_id(user_id)

        if name is not None:
            existing.name = name
        if email is not None:
            existing.email = email

        return self._service.save(existing)


class DeleteUserUseCase:
    """Use case for deleting a user, reporting the outcome as a boolean."""

    def __init__(self, user_service: UserService):
        self._service = user_service

    def execute(self, user_id: int) -> bool:
        try:
            self._service.delete(user_id)
            return True
        except Exception as e:
            logger.warning(f"Delete of user {user_id} failed: {e}")
            return False
