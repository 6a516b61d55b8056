"""Public API for finding duplicate images under a folder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..config import Settings
from ..errors import DecodeError
from ..logging import get_logger
from ..scan.walker import find_image_files
from .cluster import DuplicateGroup, group_duplicates
from .fingerprint import Fingerprinter, get_fingerprinter

logger = get_logger(__name__)


@dataclass(frozen=True)
class SkippedFile:
    """A candidate that could not be fingerprinted."""
    path: Path
    reason: str


@dataclass(frozen=True)
class DuplicateScan:
    """Outcome of one scan: what was found, grouped and skipped."""
    root: Path
    strategy: str
    candidates: Tuple[Path, ...] = ()
    groups: Dict[str, DuplicateGroup] = field(default_factory=dict)
    skipped: Tuple[SkippedFile, ...] = ()

    @property
    def duplicate_count(self) -> int:
        """Number of files that would be removed by deletion."""
        return sum(len(group.duplicates) for group in self.groups.values())


def find_duplicate_images(
    root: Path | str,
    settings: Optional[Settings] = None,
    fingerprinter: Optional[Fingerprinter] = None,
) -> DuplicateScan:
    """
    Scan a folder, fingerprint every candidate and group duplicates.

    Args:
        root: Folder to scan
        settings: Scan settings (defaults to Settings())
        fingerprinter: Overrides the strategy named in settings

    Returns:
        DuplicateScan with candidates, duplicate groups and skipped files

    Raises:
        NotFoundError: If root is not an existing directory
        DecodeError: If settings.strict is set and a candidate is unreadable
    """
    settings = settings or Settings()
    settings.validate()
    if fingerprinter is None:
        fingerprinter = get_fingerprinter(settings.strategy, settings.canonical_size)

    root_path = Path(root)
    candidates = find_image_files(root_path, recursive=settings.recursive, extensions=settings.extensions)

    if not candidates:
        logger.info(f"No images found in folder: {root_path}")
        return DuplicateScan(root=root_path, strategy=fingerprinter.name)

    pairs: List[Tuple[Path, str]] = []
    skipped: List[SkippedFile] = []

    for path in candidates:
        try:
            pairs.append((path, fingerprinter.fingerprint(path)))
        except DecodeError as exc:
            if settings.strict:
                raise
            logger.debug(f"Skipping unreadable image {path}: {exc.reason}")
            skipped.append(SkippedFile(path=path, reason=exc.reason))

    groups = group_duplicates(pairs)

    logger.info(
        f"Fingerprinted {len(pairs)}/{len(candidates)} images with '{fingerprinter.name}', "
        f"found {len(groups)} duplicate groups"
    )
    return DuplicateScan(
        root=root_path,
        strategy=fingerprinter.name,
        candidates=tuple(candidates),
        groups=groups,
        skipped=tuple(skipped),
    )
