"""
User Service
============

Application service holding the user business rules, including email
uniqueness.
"""
import logging
from typing import Any, List, Mapping, Optional

from storefront.core.exceptions import InvalidArgumentError, NotFoundError
from storefront.domain.constants.user_fields import UserFields
from storefront.domain.models.user import User
from storefront.domain.repositories.user_repository import UserRepository
from storefront.utils.key_lock import KeyedLock

logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


class UserService:
    """
    Application service for user operations.

    Email uniqueness is checked when a user is created and when a partial
    update changes the email. Saving an existing user with a different
    email through ``save`` only checks that the user exists.
    """

    def __init__(self, user_repository: UserRepository, lock: Optional[KeyedLock] = None):
        """
        Initialize service with repository.

        Args:
            user_repository: Repository for user persistence
            lock: Per-key lock registry; a private one is created when omitted
        """
        self._repository = user_repository
        self._lock = lock or KeyedLock()

    @staticmethod
    def _user_key(user_id: int) -> tuple:
        return ("user", user_id)

    @staticmethod
    def _email_key(email: str) -> tuple:
        return ("email", email)

    def get_by_id(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            NotFoundError: If no user has this ID
        """
        user = self._repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User not found with ID: {user_id}")
        return user

    def get_all(self) -> List[User]:
        return self._repository.find_all()

    def search_by_name(self, fragment: str) -> List[User]:
        """List users whose name contains ``fragment``."""
        return self._repository.find_by_name_containing(fragment)

    def save(self, user: User) -> User:
        """
        Validate and persist a user.

        Args:
            user: User to create (no id) or replace (id set)

        Returns:
            Persisted user, with an id assigned on creation

        Raises:
            InvalidArgumentError: If email or name is blank, or on creation
                when the email is already taken
            NotFoundError: If the user has an id that does not exist
        """
        if _is_blank(user.email):
            raise InvalidArgumentError("Email is required")
        if _is_blank(user.name):
            raise InvalidArgumentError("Name is required")

        if not user.is_new():
            with self._lock.hold(self._user_key(user.id)):
                self.get_by_id(user.id)
                return self._repository.save(user)

        with self._lock.hold(self._email_key(user.email)):
            if self._repository.find_by_email(user.email) is not None:
                logger.warning(f"Rejected new user: email {user.email} already in use")
                raise InvalidArgumentError("Email already in use")
            saved = self._repository.save(user)
        logger.info(f"User {saved.id} created")
        return saved

    def delete(self, user_id: int) -> None:
        """
        Delete a user.

        Raises:
            NotFoundError: If no user has this ID
        """
        with self._lock.hold(self._user_key(user_id)):
            self.get_by_id(user_id)
            self._repository.delete_by_id(user_id)
        logger.info(f"User {user_id} deleted")

    def update_partial(self, user_id: int, fields: Mapping[str, Any]) -> User:
        """
        Overwrite only the fields present in ``fields`` ("name", "email").

        Unknown keys are ignored. A new email must not belong to another
        user; re-submitting the user's own email is allowed. Supplied values
        are checked before the user is looked up.

        Raises:
            InvalidArgumentError: If a supplied value is blank or not a string,
                or the email is held by another user
            NotFoundError: If no user has this ID
        """
        if UserFields.NAME in fields and _is_blank(fields[UserFields.NAME]):
            raise InvalidArgumentError("Name is required")
        if UserFields.EMAIL in fields and _is_blank(fields[UserFields.EMAIL]):
            raise InvalidArgumentError("Email is required")

        keys = [self._user_key(user_id)]
        if UserFields.EMAIL in fields:
            keys.append(self._email_key(fields[UserFields.EMAIL]))

        with self._lock.hold(*keys):
            user = self.get_by_id(user_id)

            if UserFields.NAME in fields:
                user.name = fields[UserFields.NAME]

            if UserFields.EMAIL in fields:
                email = fields[UserFields.EMAIL]
                holder = self._repository.find_by_email(email)
                if holder is not None and holder.id != user_id:
                    logger.warning(f"Rejected email change on user {user_id}: {email} held by user {holder.id}")
                    raise InvalidArgumentError("Email already in use by another user")
                user.email = email

            return self._repository.save(user)
