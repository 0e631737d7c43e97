"""Error types raised while synchronizing translation trees."""

from __future__ import annotations

from pathlib import Path


class LocaleSyncError(Exception):
    """Base class for all localesync errors."""


class ConfigurationMissing(LocaleSyncError):
    """A required setting was not provided. Fatal for the whole run."""

    def __init__(self, setting: str) -> None:
        super().__init__(f"{setting} not set")
        self.setting = setting


class TraversalFailure(LocaleSyncError):
    """The directory walk of a root could not proceed."""

    def __init__(self, root: str | Path, reason: str) -> None:
        super().__init__(f"cannot walk {root}: {reason}")
        self.root = str(root)
        self.reason = reason


class FileFailure(LocaleSyncError):
    """An I/O error on a single file."""

    action = "access"

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"failed to {self.action} {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class FileReadFailure(FileFailure):
    action = "read"


class FileWriteFailure(FileFailure):
    action = "write"


class FileDeleteFailure(FileFailure):
    action = "remove"


class BackendError(LocaleSyncError):
    """The translation backend did not produce a usable answer."""


class BackendRequestFailure(BackendError):
    """Transport or API level failure talking to the backend."""


class BackendEmptyResponse(BackendError):
    """The backend answered without any candidate text."""
