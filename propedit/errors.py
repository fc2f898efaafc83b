"""propedit error types."""

from pathlib import Path


class PropertiesError(Exception):
    """Base class for propedit errors."""


class CommitError(PropertiesError):
    """Raised when an auto-committed mutation could not be persisted.

    The wrapped store has already been rolled back when this is raised.
    The underlying I/O error, if any, is available as ``__cause__``.

    Attributes:
        operation: The mutating call that failed (``"write"`` or ``"erase"``).
        key: The key the mutation targeted.
        path: The file the commit was aimed at, or None if none was selected.
    """

    def __init__(self, operation: str, key: str, path: Path | None = None) -> None:
        self.operation = operation
        self.key = key
        self.path = path
        super().__init__(f"commit failed on {operation}")


class NoFileSelected(PropertiesError):
    """Raised (or returned) when an operation needs a file and none is selected."""

    def __init__(self) -> None:
        super().__init__("no properties file selected")
