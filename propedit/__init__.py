"""propedit: transactional editor for Java properties files."""

from .auto_commit import AutoCommit
from .editor import CommitResult, LoadResult, PropertiesEditor
from .errors import CommitError, NoFileSelected, PropertiesError
from .store import Store, editor

__all__ = [
    "AutoCommit",
    "CommitError",
    "CommitResult",
    "LoadResult",
    "NoFileSelected",
    "PropertiesEditor",
    "PropertiesError",
    "Store",
    "editor",
]
