"""Shared plumbing for composers."""

from __future__ import annotations

from fusiondash.config import Config
from fusiondash.core.directory import UserDirectory
from fusiondash.storage.base import StorageBackend


class Composer:
    """Base for view composers.

    A composer reads from ``store`` and resolves user names through
    ``directory``. When no directory is injected, every composition builds a
    private one, so user-name lookups cost one extra fetch per call.
    """

    def __init__(
        self,
        store: StorageBackend,
        directory: UserDirectory | None = None,
        *,
        config: Config | None = None,
    ) -> None:
        self._store = store
        self._directory = directory
        self._config = config or Config()

    def _user_directory(self) -> UserDirectory:
        if self._directory is not None:
            return self._directory
        return UserDirectory(self._store, unknown_name=self._config.unknown_user_name)
