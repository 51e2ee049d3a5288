from __future__ import annotations


class ProfileError(Exception):
    pass


class InvalidFieldType(ProfileError):
    """Raised when a value does not fit the leaf it is written to."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class DraftClosedError(ProfileError):
    """Raised when a committed or discarded draft is used again."""
