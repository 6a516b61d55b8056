"""Directory enumeration for candidate image files."""

from .walker import find_image_files, has_image_extension

__all__ = [
    "find_image_files",
    "has_image_extension",
]
