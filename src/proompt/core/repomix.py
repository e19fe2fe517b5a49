"""Pack a directory into an XML snapshot with the ``repomix`` CLI."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from .config import OUTPUT_FILE_NAMES
from .errors import ExternalToolError

console = Console()

REPOMIX_BIN = "repomix"


def repomix_command(output_path: Path, exclude_patterns: Sequence[str] = ()) -> list[str]:
    # Generated docs are never fed back into the snapshot.
    ignore = [*OUTPUT_FILE_NAMES.values(), *exclude_patterns]
    return [
        REPOMIX_BIN,
        ".",
        "--output",
        str(output_path),
        "--style",
        "xml",
        "--ignore",
        ",".join(ignore),
        "--quiet",
    ]


def pack_repository(
    output_path: Path,
    working_directory: Path | None = None,
    exclude_patterns: Sequence[str] = (),
) -> Path:
    """Run repomix in *working_directory* and write the XML to *output_path*."""
    cwd = Path(working_directory) if working_directory else Path.cwd()
    if not cwd.is_dir():
        raise ExternalToolError(f"Repomix processing failed: {cwd} is not a directory")
    if shutil.which(REPOMIX_BIN) is None:
        raise ExternalToolError(
            "Repomix processing failed: `repomix` not found on PATH "
            "(install with `npm install -g repomix`)"
        )

    try:
        r = subprocess.run(
            repomix_command(output_path, exclude_patterns),
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise ExternalToolError(f"Repomix processing failed: {e}") from e

    if r.returncode != 0:
        detail = (r.stderr or r.stdout).strip() or f"exit code {r.returncode}"
        raise ExternalToolError(f"Repomix processing failed: {detail}")
    if not output_path.is_file() or output_path.stat().st_size == 0:
        raise ExternalToolError("Repomix completed but no files were processed")

    console.print("Repository processing completed", style="dim")
    return output_path
