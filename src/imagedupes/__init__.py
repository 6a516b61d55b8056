"""Find and remove duplicate image files in a directory tree."""

__version__ = "0.1.0"
