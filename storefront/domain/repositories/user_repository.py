"""
User Repository Interface
=========================

Abstract interface for user data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from storefront.domain.models.user import User


class UserRepository(ABC):
    """Abstract repository for user persistence operations."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find a user by its ID.

        Args:
            user_id: Unique user identifier

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> List[User]:
        """Find all users, ordered by id."""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """
        Find the user holding ``email`` (exact match).

        Args:
            email: Email address

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_name_containing(self, fragment: str) -> List[User]:
        """
        Find users whose name contains ``fragment`` (case-sensitive).

        Args:
            fragment: Substring to look for

        Returns:
            List of matching user entities
        """
        pass

    @abstractmethod
    def save(self, user: User) -> User:
        """
        Create or fully replace a user.

        Args:
            user: User entity; an id is assigned when absent

        Returns:
            Persisted user entity
        """
        pass

    @abstractmethod
    def delete_by_id(self, user_id: int) -> None:
        """Delete a user."""
        pass
