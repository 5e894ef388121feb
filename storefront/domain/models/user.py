"""
User Model
==========

Domain model representing a user account.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class User:
    """
    User domain model.

    ``email`` is unique across all users; UserService enforces that rule.
    """
    name: str
    email: str
    id: Optional[int] = None

    def is_new(self) -> bool:
        """Check if user has not been persisted yet."""
        return self.id is None

    def copy(self) -> "User":
        return replace(self)
