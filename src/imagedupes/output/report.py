"""Rendering of duplicate groups for the console and as a JSON report."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ..dedup.cluster import DuplicateGroup
from ..dedup.deletion import DeletionResult
from ..dedup.model import DuplicateScan
from ..logging import get_logger

logger = get_logger(__name__)

REPORT_VERSION = "1.0.0"


def format_groups(groups: Mapping[str, DuplicateGroup]) -> List[str]:
    """Render each group as a hash line followed by indented member paths."""
    lines: List[str] = []
    for fingerprint, group in groups.items():
        lines.append(f"Hash: {fingerprint}")
        lines.extend(f"  - {path}" for path in group.paths)
    return lines


def build_report(scan: DuplicateScan, deletion: Optional[DeletionResult] = None) -> Dict[str, Any]:
    """
    Build a JSON-serializable report for a scan.

    Args:
        scan: Result of find_duplicate_images
        deletion: Deletion outcome, if deletion ran

    Returns:
        Report dictionary
    """
    deleted = deletion.deleted if deletion else []
    delete_errors = deletion.errors if deletion else []

    return {
        "version": REPORT_VERSION,
        "root": str(scan.root),
        "strategy": scan.strategy,
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "summary": {
            "candidates": len(scan.candidates),
            "groups": len(scan.groups),
            "duplicates": scan.duplicate_count,
            "skipped": len(scan.skipped),
            "deleted": len(deleted),
            "delete_errors": len(delete_errors),
        },
        "groups": [
            {
                "fingerprint": group.fingerprint,
                "keep": str(group.keeper),
                "duplicates": [str(path) for path in group.duplicates],
            }
            for group in scan.groups.values()
        ],
        "skipped": [
            {"path": str(item.path), "reason": item.reason}
            for item in scan.skipped
        ],
        "deleted": [str(path) for path in deleted],
        "delete_errors": [
            {"path": str(error.path), "reason": error.reason}
            for error in delete_errors
        ],
    }


def write_report_json(report: Dict[str, Any], report_path: Path) -> Path:
    """
    Write a report dictionary to a JSON file.

    Args:
        report: Dictionary from build_report
        report_path: Destination file; parent folders are created

    Returns:
        Path to the written report
    """
    report_path = Path(report_path)
    report_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(report_path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False)
    except OSError as exc:
        logger.error(f"Failed to write report to {report_path}: {exc}")
        raise

    logger.info(f"Wrote report to {report_path}")
    return report_path
