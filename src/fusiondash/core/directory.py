"""Request-scoped user directory: user id -> display name."""

from __future__ import annotations

import asyncio
import logging

from fusiondash.core.joins import index_by
from fusiondash.core.policies import UNKNOWN_USER
from fusiondash.models.user import User
from fusiondash.storage.base import StorageBackend

logger = logging.getLogger(__name__)


class UserDirectory:
    """Resolves user ids to display names for one page composition.

    The user collection is fetched on first use and at most once per
    instance, even when several composers share the instance concurrently.
    Build a fresh directory per page load; it never refreshes.
    """

    def __init__(self, store: StorageBackend, *, unknown_name: str = UNKNOWN_USER) -> None:
        self._store = store
        self._unknown_name = unknown_name
        self._users: dict[str, User] | None = None
        self._lock = asyncio.Lock()

    @classmethod
    async def build(
        cls, store: StorageBackend, *, unknown_name: str = UNKNOWN_USER
    ) -> UserDirectory:
        """Create a directory and fetch the user collection up front."""
        directory = cls(store, unknown_name=unknown_name)
        await directory.load()
        return directory

    @property
    def loaded(self) -> bool:
        return self._users is not None

    async def load(self) -> dict[str, User]:
        """Fetch the user collection if it has not been fetched yet."""
        if self._users is None:
            async with self._lock:
                if self._users is None:
                    users = await self._store.users()
                    self._users = index_by(users, lambda u: u.id)
                    logger.debug("User directory loaded %d users", len(self._users))
        return self._users

    async def get(self, user_id: str | None) -> User | None:
        users = await self.load()
        return users.get(user_id) if user_id else None

    async def resolve(self, user_id: str | None) -> str:
        """Display name for ``user_id``, or the unknown-user sentinel."""
        await self.load()
        return self.display_name(user_id, self._unknown_name)

    async def lookup(self, user_id: str | None, fallback: str = "") -> str:
        await self.load()
        return self.display_name(user_id, fallback)

    def owner_name(self, user_id: str | None) -> str:
        """Like display_name, but an unassigned owner stays blank."""
        return self.display_name(user_id) if user_id else ""

    def display_name(self, user_id: str | None, fallback: str | None = None) -> str:
        """Synchronous lookup; the directory must already be loaded.

        ``fallback`` defaults to the unknown-user sentinel.
        """
        if self._users is None:
            raise RuntimeError("User directory not loaded. Await load() first.")
        if fallback is None:
            fallback = self._unknown_name
        if not user_id:
            return fallback
        user = self._users.get(user_id)
        if user is None:
            logger.debug("Unknown user id %s, using fallback name", user_id)
            return fallback
        return user.full_name()
