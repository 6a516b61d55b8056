"""Walk a folder and collect files with an image extension."""

from __future__ import annotations

import os
from pathlib import Path
from typing import AbstractSet, Iterator, List

from ..config import IMAGE_EXTENSIONS
from ..errors import NotFoundError
from ..logging import get_logger

logger = get_logger(__name__)


def has_image_extension(path: Path, extensions: AbstractSet[str] = IMAGE_EXTENSIONS) -> bool:
    """Return True if the path's lowercased suffix (without the dot) is allowed."""
    suffix = path.suffix.lower().lstrip(".")
    return bool(suffix) and suffix in extensions


def find_image_files(
    root: Path | str,
    recursive: bool = True,
    extensions: AbstractSet[str] = IMAGE_EXTENSIONS,
) -> List[Path]:
    """
    Collect candidate image files under a root folder.

    Args:
        root: Folder to scan
        recursive: Descend into subfolders when True, immediate children only otherwise
        extensions: Allowed lowercase extensions without the leading dot

    Returns:
        Paths in discovery order (sorted per folder, files before subfolders)

    Raises:
        NotFoundError: If root is missing or not a directory
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise NotFoundError(f"Folder not found at {root_path}")

    files = _walk_recursive(root_path) if recursive else _list_shallow(root_path)

    candidates = [path for path in files if has_image_extension(path, extensions)]
    logger.info(f"Found {len(candidates)} candidate images under {root_path}")
    return candidates


def _walk_recursive(root: Path) -> Iterator[Path]:
    def on_error(exc: OSError) -> None:
        logger.debug(f"Skipping unreadable directory {exc.filename}: {exc.strerror}")

    # Directory symlinks are not followed, which also rules out cycles
    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error, followlinks=False):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if _is_regular_file(path):
                yield path


def _list_shallow(root: Path) -> Iterator[Path]:
    try:
        entries = sorted(root.iterdir())
    except OSError as exc:
        logger.debug(f"Skipping unreadable directory {root}: {exc}")
        return
    for path in entries:
        if _is_regular_file(path):
            yield path


def _is_regular_file(path: Path) -> bool:
    # Symlinks are skipped so a link and its target never pair up as duplicates
    try:
        if path.is_symlink():
            logger.debug(f"Skipping symlink {path}")
            return False
        return path.is_file()
    except OSError as exc:
        logger.debug(f"Skipping {path}: {exc}")
        return False
