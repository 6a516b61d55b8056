"""Text and JSON reporting of scan results."""

from .report import format_groups, build_report, write_report_json, REPORT_VERSION

__all__ = [
    "format_groups",
    "build_report",
    "write_report_json",
    "REPORT_VERSION",
]
