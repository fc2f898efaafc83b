"""AutoCommit: every mutation is its own committed transaction."""

import logging
import os
from pathlib import Path
from typing import Iterable

from .editor import CommitResult, LoadResult
from .errors import CommitError
from .store import Store

logger = logging.getLogger(__name__)


class AutoCommit:
    """Wrapper that commits after every ``write()`` and ``erase()``.

    Each mutation opens a transaction on the wrapped store, applies the
    change and commits. If the commit fails the wrapped store is rolled
    back and ``CommitError`` is raised, so a mutation either reaches the
    file or the caller hears about it.

    Everything else is forwarded unchanged. Wrappers can wrap wrappers.

    Implements the ``Store`` protocol.

    Args:
        store: Any Store (a PropertiesEditor or another wrapper).
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    @property
    def store(self) -> Store:
        """The wrapped store."""
        return self._store

    # -- Auto-committed writes --

    def write(self, key: str, value: str) -> None:
        self._store.begin_transaction()
        try:
            self._store.write(key, value)
        except Exception:
            self._store.rollback()
            raise
        self._commit_or_raise("write", key)

    def erase(self, key: str) -> None:
        self._store.begin_transaction()
        try:
            self._store.erase(key)
        except Exception:
            self._store.rollback()
            raise
        self._commit_or_raise("erase", key)

    def _commit_or_raise(self, operation: str, key: str) -> None:
        result = self._store.commit()
        if result:
            return
        self._store.rollback()
        logger.warning("Rolled back %s of %r after failed commit", operation, key)
        raise CommitError(operation, key, self._store.path) from result.error

    # -- Pass-through --

    @property
    def base_directory(self) -> str:
        return self._store.base_directory

    @base_directory.setter
    def base_directory(self, base_directory: str) -> None:
        self._store.base_directory = base_directory

    @property
    def path(self) -> Path | None:
        return self._store.path

    @property
    def in_transaction(self) -> bool:
        return self._store.in_transaction

    def select_file(self, path: str | os.PathLike) -> None:
        self._store.select_file(path)

    def file_exists(self) -> bool:
        return self._store.file_exists()

    def create_properties_file(self, *, parents: bool = False) -> bool:
        return self._store.create_properties_file(parents=parents)

    def delete_properties_file(self) -> bool:
        return self._store.delete_properties_file()

    def load(self) -> LoadResult:
        return self._store.load()

    def read(self, key: str, default: str = "") -> str:
        return self._store.read(key, default)

    def keys(self) -> Iterable[str]:
        return self._store.keys()

    def items(self) -> Iterable[tuple[str, str]]:
        return self._store.items()

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def begin_transaction(self) -> None:
        self._store.begin_transaction()

    def commit(self) -> CommitResult:
        return self._store.commit()

    def rollback(self) -> None:
        """Roll back the wrapped store, for manual recovery."""
        self._store.rollback()
