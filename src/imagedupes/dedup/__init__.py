"""Exact duplicate detection for image files."""

from .model import find_duplicate_images, DuplicateScan, SkippedFile
from .fingerprint import (
    Fingerprinter,
    RawBytesFingerprinter,
    NormalizedPixelFingerprinter,
    get_fingerprinter,
)
from .cluster import group_duplicates, DuplicateGroup
from .deletion import delete_duplicates, DeletionResult

__all__ = [
    "find_duplicate_images",
    "DuplicateScan",
    "SkippedFile",
    "Fingerprinter",
    "RawBytesFingerprinter",
    "NormalizedPixelFingerprinter",
    "get_fingerprinter",
    "group_duplicates",
    "DuplicateGroup",
    "delete_duplicates",
    "DeletionResult",
]
