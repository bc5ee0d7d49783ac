"""In-memory user store with per-user locks."""

from __future__ import annotations

import threading
import uuid
from collections.abc import Callable, Iterator

from fitquest.errors import UserNotFoundError
from fitquest.models import User


def _default_id() -> str:
    return f"user_{uuid.uuid4().hex[:12]}"


class UserStore:
    """Keyed user map for the lifetime of one process (or one test).

    Each user gets a lock; hold it around every read-modify-write of that
    user's Progress. Different users never contend.
    """

    def __init__(self, id_factory: Callable[[], str] = _default_id):
        self._id_factory = id_factory
        self._users: dict[str, User] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def new_id(self) -> str:
        with self._guard:
            while True:
                user_id = self._id_factory()
                if user_id not in self._users:
                    return user_id

    def add(self, user: User) -> User:
        with self._guard:
            if user.user_id in self._users:
                raise ValueError(f"Duplicate user_id={user.user_id!r}")
            self._users[user.user_id] = user
            self._locks[user.user_id] = threading.Lock()
        return user

    def get(self, user_id: str) -> User:
        """Return the user or raise UserNotFoundError."""
        try:
            return self._users[user_id]
        except KeyError:
            raise UserNotFoundError(user_id) from None

    def lock(self, user_id: str) -> threading.Lock:
        try:
            return self._locks[user_id]
        except KeyError:
            raise UserNotFoundError(user_id) from None

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(list(self._users.values()))
