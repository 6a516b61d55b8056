from pathlib import Path
from typing import Optional

import typer

from .config import Settings
from .dedup.deletion import DeletionResult, delete_duplicates
from .dedup.model import DuplicateScan, find_duplicate_images
from .errors import DecodeError, NotFoundError
from .logging import get_logger
from .output.report import build_report, format_groups, write_report_json

app = typer.Typer(help="imagedupes – find and remove duplicate image files")

FOLDER_PROMPT = "Enter the path to the folder containing images"
DELETE_PROMPT = "Do you want to delete the duplicate images? (yes/no)"

_ASCII_FALLBACKS = {
    "✅": "[OK]",
    "🖼️": "[IMG]",
    "🔄": "[DUP]",
    "📋": "[LIST]",
    "⚠️": "[WARN]",
    "🗑️": "[DEL]",
    "📁": "[DIR]",
    "📊": "[STATS]",
}


def safe_echo(message: str, err: bool = False) -> None:
    """Echo message, degrading emoji and undecodable path characters on narrow consoles."""
    try:
        typer.echo(message, err=err)
        return
    except UnicodeEncodeError:
        pass

    fallback_message = message
    for symbol, replacement in _ASCII_FALLBACKS.items():
        fallback_message = fallback_message.replace(symbol, replacement)
    try:
        typer.echo(fallback_message, err=err)
    except UnicodeEncodeError:
        # File names can still carry characters the console cannot show
        typer.echo(fallback_message.encode("ascii", "replace").decode("ascii"), err=err)


def _print_summary(scan: DuplicateScan, deletion: Optional[DeletionResult]) -> None:
    safe_echo("\n📊 Summary")
    safe_echo(f"📁 Folder: {scan.root}")
    safe_echo(f"🖼️  Images scanned: {len(scan.candidates)}")
    safe_echo(f"🔄 Duplicate groups: {len(scan.groups)}")
    safe_echo(f"📋 Duplicate files: {scan.duplicate_count}")
    if scan.skipped:
        safe_echo(f"⚠️  Unreadable images skipped: {len(scan.skipped)}")
    if deletion is not None:
        safe_echo(f"🗑️  Deleted: {len(deletion.deleted)}, failed: {len(deletion.errors)}")


@app.command()
def scan(
    root: Optional[Path] = typer.Argument(None, help="Folder to scan; prompted for when omitted"),
    recursive: bool = typer.Option(True, "--recursive/--shallow", help="Descend into subfolders"),
    strategy: str = typer.Option("raw", help="Fingerprint strategy: 'raw' or 'normalized'"),
    canonical_size: int = typer.Option(256, help="Edge length in pixels for the normalized strategy"),
    strict: bool = typer.Option(False, "--strict/--skip-unreadable", help="Abort on the first unreadable image"),
    yes: bool = typer.Option(False, "--yes", help="Delete duplicates without asking"),
    report: Optional[Path] = typer.Option(None, "--report", help="Write a JSON report to this file"),
) -> None:
    """
    Find duplicate images in a folder and optionally delete them.

    Every image is fingerprinted, files sharing a fingerprint are listed as a
    group, and on confirmation all but the first file of each group are deleted.
    """
    logger = get_logger(__name__)

    if root is None:
        root = Path(typer.prompt(FOLDER_PROMPT).strip())

    settings = Settings(
        recursive=recursive,
        strategy=strategy,
        canonical_size=canonical_size,
        strict=strict,
    )
    try:
        settings.validate()
    except ValueError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc

    try:
        logger.info(f"Scanning {root} ({'recursive' if recursive else 'shallow'}, strategy={strategy})")
        result = find_duplicate_images(root, settings)
    except NotFoundError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc
    except DecodeError as exc:
        logger.error(f"Aborting scan: {exc}")
        raise typer.Exit(code=1) from exc

    deletion: Optional[DeletionResult] = None

    if not result.candidates:
        safe_echo(f"No images found in folder: {result.root}")
    else:
        if result.skipped:
            safe_echo("Unreadable images skipped:")
            for item in result.skipped:
                safe_echo(f"  - {item.path}: {item.reason}")

        if not result.groups:
            safe_echo("No duplicate images found.")
        else:
            safe_echo("Duplicate images found:")
            for line in format_groups(result.groups):
                safe_echo(line)

            if yes:
                confirmed = True
            else:
                answer = typer.prompt(DELETE_PROMPT, default="no", show_default=False)
                confirmed = answer.strip().lower() == "yes"

            if confirmed:
                deletion = delete_duplicates(
                    result.groups,
                    confirmed=True,
                    on_deleted=lambda path: safe_echo(f"Deleted: {path}"),
                    on_error=lambda error: safe_echo(str(error), err=True),
                )
                safe_echo("Duplicate images deleted.")
            else:
                safe_echo("Duplicate images not deleted.")

        _print_summary(result, deletion)

    if report is not None:
        try:
            report_path = write_report_json(build_report(result, deletion), report)
        except OSError as exc:
            logger.error(f"Failed to write report: {exc}")
            raise typer.Exit(code=1) from exc
        safe_echo(f"✅ Report: {report_path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
