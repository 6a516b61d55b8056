"""Removal of duplicate files, keeping the first member of each group."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Mapping, Optional

from ..errors import DeleteError
from ..logging import get_logger
from .cluster import DuplicateGroup

logger = get_logger(__name__)


@dataclass
class DeletionResult:
    deleted: List[Path] = field(default_factory=list)
    errors: List[DeleteError] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.errors


def delete_duplicates(
    groups: Mapping[str, DuplicateGroup],
    confirmed: bool,
    on_deleted: Optional[Callable[[Path], None]] = None,
    on_error: Optional[Callable[[DeleteError], None]] = None,
) -> DeletionResult:
    """
    Delete every member of each group except its keeper.

    Nothing is touched unless ``confirmed`` is True. A failure on one file is
    recorded and the remaining files are still processed. A member that is
    the keeper itself under another name (symlink, hard link) is refused with
    a DeleteError. Deletions are not rolled back.

    Args:
        groups: Mapping of fingerprint -> DuplicateGroup
        confirmed: Explicit user confirmation
        on_deleted: Called with each path after it is removed
        on_error: Called with each DeleteError as it happens

    Returns:
        DeletionResult listing removed paths and per-file errors
    """
    result = DeletionResult()
    if not confirmed:
        logger.info("Deletion not confirmed, leaving files untouched")
        return result

    for group in groups.values():
        for path in group.duplicates:
            try:
                if _same_file(path, group.keeper):
                    raise OSError(f"same file as kept copy {group.keeper}")
                os.remove(path)
            except OSError as exc:
                error = DeleteError(path, exc.strerror or str(exc))
                logger.debug(str(error))
                result.errors.append(error)
                if on_error is not None:
                    on_error(error)
                continue

            logger.debug(f"Deleted {path} (kept {group.keeper})")
            result.deleted.append(path)
            if on_deleted is not None:
                on_deleted(path)

    logger.info(f"Deleted {len(result.deleted)} duplicates, {len(result.errors)} failures")
    return result


def _same_file(path: Path, keeper: Path) -> bool:
    # Removing the keeper's own data (through a link or a second name) would leave no copy
    if os.path.realpath(path) == os.path.realpath(keeper):
        return True
    try:
        return os.path.samefile(path, keeper)
    except OSError:
        return False
