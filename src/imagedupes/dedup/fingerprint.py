"""Content fingerprints used as duplicate-detection keys."""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from pathlib import Path

from PIL import Image

from ..config import FINGERPRINT_STRATEGIES
from ..errors import DecodeError
from ..logging import get_logger

logger = get_logger(__name__)

CHUNK_SIZE = 64 * 1024
DEFAULT_CANONICAL_SIZE = 256


class Fingerprinter(ABC):
    """Turns an image file into a 128-bit hex fingerprint."""

    name = "base"

    @abstractmethod
    def fingerprint(self, path: Path) -> str:
        """Return the hex fingerprint of path, raising DecodeError if unreadable."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RawBytesFingerprinter(Fingerprinter):
    """MD5 of the file bytes. Only byte-identical files collide."""

    name = "raw"

    def fingerprint(self, path: Path) -> str:
        digest = hashlib.md5()
        try:
            with open(path, "rb") as f:
                for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
                    digest.update(chunk)
        except OSError as exc:
            raise DecodeError(path, str(exc)) from exc

        fingerprint = digest.hexdigest()
        logger.debug(f"Raw fingerprint for {path}: {fingerprint}")
        return fingerprint


class NormalizedPixelFingerprinter(Fingerprinter):
    """
    MD5 of decoded pixels after normalization.

    The first frame is converted to RGB, resized to a square canonical
    resolution with area averaging, then reduced to 8-bit grayscale. Files
    with the same picture but a different container, compression or metadata
    end up with the same fingerprint.
    """

    name = "normalized"

    def __init__(self, canonical_size: int = DEFAULT_CANONICAL_SIZE) -> None:
        if canonical_size < 1:
            raise ValueError(f"canonical_size must be positive, got {canonical_size}")
        self.canonical_size = canonical_size

    def fingerprint(self, path: Path) -> str:
        size = (self.canonical_size, self.canonical_size)
        try:
            with Image.open(path) as img:
                img.seek(0)
                normalized = (
                    img.convert("RGB")
                    .resize(size, resample=Image.Resampling.BOX)
                    .convert("L")
                )
                pixels = normalized.tobytes()
        except Exception as exc:
            raise DecodeError(path, str(exc)) from exc

        fingerprint = hashlib.md5(pixels).hexdigest()
        logger.debug(f"Normalized fingerprint for {path}: {fingerprint}")
        return fingerprint

    def __repr__(self) -> str:
        return f"{type(self).__name__}(canonical_size={self.canonical_size})"


def get_fingerprinter(strategy: str = "raw", canonical_size: int = DEFAULT_CANONICAL_SIZE) -> Fingerprinter:
    """
    Build the fingerprinter for a strategy name.

    Args:
        strategy: One of FINGERPRINT_STRATEGIES
        canonical_size: Edge length used by the normalized strategy

    Raises:
        ValueError: If the strategy name is unknown
    """
    if strategy == RawBytesFingerprinter.name:
        return RawBytesFingerprinter()
    if strategy == NormalizedPixelFingerprinter.name:
        return NormalizedPixelFingerprinter(canonical_size=canonical_size)
    raise ValueError(
        f"Unknown fingerprint strategy: {strategy!r}. "
        f"Must be one of {', '.join(FINGERPRINT_STRATEGIES)}"
    )
