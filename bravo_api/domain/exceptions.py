"""Errors raised across the domain and persistence boundaries."""


class StorageError(RuntimeError):
    """Raised when the activity store cannot complete a read or a write."""


class ValidationError(ValueError):
    """Raised when an activity event is rejected before it is written."""


__all__ = ["StorageError", "ValidationError"]
