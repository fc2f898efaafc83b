"""PropertiesEditor: in-memory editor over a single properties file."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from . import codec
from .errors import NoFileSelected

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Result of a load. Truthy when the file was read."""

    loaded: bool
    path: Path | None
    error: Exception | None = None

    def __bool__(self) -> bool:
        return self.loaded


@dataclass(frozen=True)
class CommitResult:
    """Result of a commit. Truthy when the file was written."""

    committed: bool
    path: Path | None
    error: Exception | None = None

    def __bool__(self) -> bool:
        return self.committed


class PropertiesEditor:
    """Editor for a key/value properties file.

    Reads and writes happen against an in-memory dict. Nothing reaches
    the disk until ``commit()``, which rewrites the whole selected file.
    ``begin_transaction()`` saves a copy of the entries that
    ``rollback()`` restores; there is only one checkpoint at a time.

    Implements the ``Store`` protocol.

    Args:
        path: File to select right away, resolved like ``select_file``.
        base_directory: Prefix for relative string paths.
        encoding: Text encoding of the file on disk.
    """

    def __init__(
        self,
        path: str | os.PathLike | None = None,
        *,
        base_directory: str = "",
        encoding: str = codec.DEFAULT_ENCODING,
    ) -> None:
        self._entries: dict[str, str] = {}
        self._checkpoint: dict[str, str] | None = None
        self._path: Path | None = None
        self._base_directory = base_directory
        self._encoding = encoding
        if path is not None:
            self.select_file(path)

    # -- File selection --

    @property
    def base_directory(self) -> str:
        """Prefix joined onto relative paths passed to ``select_file``."""
        return self._base_directory

    @base_directory.setter
    def base_directory(self, base_directory: str) -> None:
        # Already-selected files keep their resolved path.
        self._base_directory = base_directory

    @property
    def path(self) -> Path | None:
        """The selected file, or None."""
        return self._path

    def select_file(self, path: str | os.PathLike) -> None:
        """Select the file to load from and commit to. No I/O happens here.

        A string is joined onto ``base_directory`` as a path component,
        not concatenated: ``"conf"`` and ``"a"`` give ``conf/a``, and an
        absolute string ignores the base. Any other path-like object is
        taken as is.
        """
        if isinstance(path, str) and self._base_directory:
            self._path = Path(self._base_directory, path)
        else:
            self._path = Path(path)

    def file_exists(self) -> bool:
        return self._path is not None and self._path.exists()

    def create_properties_file(self, *, parents: bool = False) -> bool:
        """Create the selected file, empty, if it is not already there.

        Args:
            parents: Also create missing parent directories.

        Returns:
            True if a file was created.

        Raises:
            OSError: if the file or its parents cannot be created.
        """
        if self._path is None or self.file_exists() or self._path.is_dir():
            return False
        if parents:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.touch(exist_ok=False)
        logger.debug("Created properties file %s", self._path)
        return True

    def delete_properties_file(self) -> bool:
        """Delete the selected file from disk. This cannot be undone.

        Returns:
            True if a file was deleted.

        Raises:
            OSError: if the file exists but cannot be removed.
        """
        if self._path is None or not self._path.exists():
            return False
        self._path.unlink()
        logger.debug("Deleted properties file %s", self._path)
        return True

    # -- Loading --

    def load(self) -> LoadResult:
        """Replace the in-memory entries with the contents of the file.

        The entries are cleared first, so they stay empty when the file
        cannot be read. Failures are logged and returned, not raised.
        """
        self._entries.clear()
        if self._path is None:
            error = NoFileSelected()
            logger.warning("Cannot load: %s", error)
            return LoadResult(False, None, error)
        try:
            entries = codec.load(self._path, self._encoding)
        except (OSError, ValueError, LookupError) as e:
            logger.warning("Could not load %s: %s", self._path, e)
            return LoadResult(False, self._path, e)
        self._entries.update(entries)
        logger.debug("Loaded %d entries from %s", len(entries), self._path)
        return LoadResult(True, self._path)

    # -- Read operations --

    def read(self, key: str, default: str = "") -> str:
        return self._entries.get(key, default)

    def keys(self) -> Iterable[str]:
        return self._entries.keys()

    def items(self) -> Iterable[tuple[str, str]]:
        return self._entries.items()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    # -- Write operations --

    def write(self, key: str, value: str) -> None:
        """Set a pair in memory. Call ``commit()`` to persist it."""
        if not isinstance(key, str):
            raise TypeError(f"Expected str key, got {type(key).__name__}")
        if not isinstance(value, str):
            raise TypeError(f"Expected str value, got {type(value).__name__}")
        self._entries[key] = value

    def erase(self, key: str) -> None:
        """Remove a key from memory if present."""
        self._entries.pop(key, None)

    # -- Transactions --

    @property
    def in_transaction(self) -> bool:
        """Whether a checkpoint is waiting for commit or rollback."""
        return self._checkpoint is not None

    def begin_transaction(self) -> None:
        """Save a copy of the current entries for ``rollback()``.

        Replaces any checkpoint that was never committed or rolled back.
        """
        self._checkpoint = dict(self._entries)

    def commit(self) -> CommitResult:
        """Write every entry to the selected file, replacing its contents.

        On success the checkpoint is dropped. On failure the error is
        logged and returned, and both the entries and the checkpoint are
        left as they were so the caller can still roll back.
        """
        if self._path is None:
            error = NoFileSelected()
            logger.error("Cannot commit: %s", error)
            return CommitResult(False, None, error)
        try:
            codec.dump(self._entries, self._path, self._encoding)
        except (OSError, LookupError) as e:
            logger.error("Could not commit to %s: %s", self._path, e)
            return CommitResult(False, self._path, e)
        self._checkpoint = None
        logger.debug("Committed %d entries to %s", len(self._entries), self._path)
        return CommitResult(True, self._path)

    def rollback(self) -> None:
        """Restore the entries saved by ``begin_transaction()``, if any."""
        if self._checkpoint is not None:
            self._entries = self._checkpoint
        self._checkpoint = None
