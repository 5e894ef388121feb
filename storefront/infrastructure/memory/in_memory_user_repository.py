"""
In-Memory User Repository
=========================

Dictionary-backed implementation of UserRepository.
"""
import threading
from itertools import count
from typing import Dict, List, Optional

from storefront.domain.models.user import User
from storefront.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Thread-safe in-memory user store. Reads return copies."""

    def __init__(self):
        self._lock = threading.RLock()
        self._items: Dict[int, User] = {}
        self._ids = count(1)

    def find_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._items.get(user_id)
            return user.copy() if user else None

    def find_all(self) -> List[User]:
        with self._lock:
            return [self._items[key].copy() for key in sorted(self._items)]

    def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            for user in self._items.values():
                if user.email == email:
                    return user.copy()
        return None

    def find_by_name_containing(self, fragment: str) -> List[User]:
        return [u for u in self.find_all() if fragment in (u.name or "")]

    def save(self, user: User) -> User:
        stored = user.copy()
        with self._lock:
            if stored.id is None:
                stored.id = next(self._ids)
            self._items[stored.id] = stored
        return stored.copy()

    def delete_by_id(self, user_id: int) -> None:
        with self._lock:
            self._items.pop(user_id, None)
