"""Store protocol and factory function."""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .editor import CommitResult, LoadResult


@runtime_checkable
class Store(Protocol):
    """Protocol for properties stores with commit/rollback semantics.

    Wrappers take any Store and are Stores themselves, so they can be
    stacked. Implementations: ``PropertiesEditor``, ``AutoCommit``.
    """

    base_directory: str

    @property
    def path(self) -> Path | None: ...
    @property
    def in_transaction(self) -> bool: ...
    def select_file(self, path: str | os.PathLike) -> None: ...
    def file_exists(self) -> bool: ...
    def create_properties_file(self, *, parents: bool = False) -> bool: ...
    def delete_properties_file(self) -> bool: ...
    def load(self) -> "LoadResult": ...
    def read(self, key: str, default: str = "") -> str: ...
    def keys(self) -> Iterable[str]: ...
    def items(self) -> Iterable[tuple[str, str]]: ...
    def __contains__(self, key: object) -> bool: ...
    def __len__(self) -> int: ...
    def write(self, key: str, value: str) -> None: ...
    def erase(self, key: str) -> None: ...
    def begin_transaction(self) -> None: ...
    def commit(self) -> "CommitResult": ...
    def rollback(self) -> None: ...


def editor(
    path: str | os.PathLike | None = None,
    *,
    base_directory: str = "",
    encoding: str | None = None,
    auto_commit: bool = False,
    create: bool = False,
    load: bool = False,
) -> Store:
    """Create a Store with sensible defaults.

    Args:
        path: File to select. Required when ``create`` or ``load`` is set.
        base_directory: Prefix for relative string paths.
        encoding: File encoding (default ``latin-1``).
        auto_commit: Wrap the editor in ``AutoCommit`` so every
            ``write()``/``erase()`` is persisted immediately.
        create: Create the file (and its parent directories) if missing.
        load: Load the file's entries. A failed load is logged and
            leaves the store empty.

    Returns:
        A ``PropertiesEditor``, or an ``AutoCommit`` wrapping one.
    """
    if path is None and (create or load):
        raise ValueError("path is required when create or load is set")

    from .editor import PropertiesEditor

    kwargs = {}
    if encoding is not None:
        kwargs["encoding"] = encoding
    store: Store = PropertiesEditor(path, base_directory=base_directory, **kwargs)

    if create:
        store.create_properties_file(parents=True)
    if load:
        store.load()

    if auto_commit:
        from .auto_commit import AutoCommit

        store = AutoCommit(store)
    return store
