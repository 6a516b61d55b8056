"""Grouping of fingerprinted files into duplicate groups."""

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DuplicateGroup:
    """Files sharing one fingerprint, in discovery order."""
    fingerprint: str
    paths: Tuple[Path, ...]

    @property
    def keeper(self) -> Path:
        """First-discovered member, the one that survives deletion."""
        return self.paths[0]

    @property
    def duplicates(self) -> Tuple[Path, ...]:
        return self.paths[1:]


def group_duplicates(pairs: Iterable[Tuple[Path, str]]) -> Dict[str, DuplicateGroup]:
    """
    Group paths by fingerprint and keep only real duplicates.

    Args:
        pairs: (path, fingerprint) tuples in discovery order

    Returns:
        Mapping of fingerprint -> DuplicateGroup, only for fingerprints
        shared by two or more paths
    """
    by_fingerprint: Dict[str, List[Path]] = defaultdict(list)
    for path, fingerprint in pairs:
        by_fingerprint[fingerprint].append(path)

    groups = {
        fingerprint: DuplicateGroup(fingerprint=fingerprint, paths=tuple(paths))
        for fingerprint, paths in by_fingerprint.items()
        if len(paths) > 1
    }

    for group in groups.values():
        logger.debug(f"Duplicate group {group.fingerprint}: {len(group.paths)} files, keeping {group.keeper}")
    logger.info(f"Grouped {len(by_fingerprint)} fingerprints into {len(groups)} duplicate groups")
    return groups
