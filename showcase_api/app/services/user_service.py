"""
Business logic for the user directory.

The ``UserService`` keeps users in memory for the lifetime of the
process.  It starts with five seed users, only ever appends, and
forgets everything on restart.  One instance owns the list: reads and
writes go through a lock, and ids come from a monotonic counter that
is advanced in the same critical section as the append, so two
concurrent creates can never receive the same id.
"""

import itertools
import logging
import threading
from typing import Iterable, List, Optional, Tuple

from showcase_api.app.schemas.user import UserCreate, UserList, UserRead


logger = logging.getLogger(__name__)

SEED_USERS: Tuple[Tuple[str, str, str], ...] = (
    ("Alice Johnson", "alice@example.com", "Developer"),
    ("Bob Smith", "bob@example.com", "Designer"),
    ("Charlie Brown", "charlie@example.com", "Manager"),
    ("Diana Prince", "diana@example.com", "Developer"),
    ("Eve Adams", "eve@example.com", "QA Engineer"),
)


class UserService:
    """In-memory, append-only user directory."""

    def __init__(self, seed: Iterable[Tuple[str, str, str]] = SEED_USERS) -> None:
        self._seed = tuple(seed)
        self._lock = threading.Lock()
        self._users: List[UserRead] = []
        self.reset()

    def reset(self) -> None:
        """Drop every created user and restore the seed data."""
        with self._lock:
            self._users = [
                UserRead(id=user_id, name=name, email=email, role=role)
                for user_id, (name, email, role) in enumerate(self._seed, start=1)
            ]
            self._ids = itertools.count(len(self._users) + 1)

    def list_users(self, role: Optional[str] = None) -> UserList:
        """Return users in insertion order, optionally filtered by role.

        The role comparison is case-insensitive and exact.  An empty
        ``role`` counts as no filter.
        """
        with self._lock:
            users = list(self._users)
        if not role:
            return UserList(users=users, total=len(users), filtered=False)
        wanted = role.lower()
        matches = [user for user in users if user.role.lower() == wanted]
        return UserList(users=matches, total=len(matches), filtered=True, filter=role)

    def create_user(self, data: UserCreate) -> UserRead:
        """Append a new user and return it with its assigned id."""
        with self._lock:
            user = UserRead(id=next(self._ids), **data.model_dump())
            self._users.append(user)
        logger.info("Created user %s (%s)", user.id, user.email)
        return user

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
