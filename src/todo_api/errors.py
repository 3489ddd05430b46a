from __future__ import annotations


class TodoApiError(Exception):
    """Base class for errors raised inside the todo backend."""


# PUBLIC_INTERFACE
class StorageError(TodoApiError):
    """
    Raised when the storage backend fails (connectivity, query or constraint
    failure). The original ``sqlite3.Error`` is kept as ``__cause__``.
    """
