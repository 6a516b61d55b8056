"""Exception types raised while scanning, fingerprinting and deleting."""

from __future__ import annotations

from pathlib import Path


class ImageDupesError(Exception):
    """Base class for all imagedupes errors."""


class NotFoundError(ImageDupesError):
    """Raised when the scan root is missing or is not a directory."""


class DecodeError(ImageDupesError):
    """Raised when an image file cannot be opened, read or decoded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot fingerprint {self.path}: {reason}")


class DeleteError(ImageDupesError):
    """A single file could not be removed. Collected, never raised by the executor."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error deleting {self.path}: {reason}")
