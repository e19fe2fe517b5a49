"""Git helpers, temp snapshot paths, documentation-file change detection."""

from __future__ import annotations

import secrets
import subprocess
import tempfile
import time
from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console()


def is_git_repository(cwd: Path | None = None) -> bool:
    try:
        r = subprocess.run(
            ["git", "rev-parse", "--git-dir"],
            capture_output=True,
            text=True,
            cwd=cwd,
            timeout=5,
        )
    except (OSError, subprocess.TimeoutExpired):
        return False
    return r.returncode == 0


def current_commit_hash(cwd: Path | None = None) -> str | None:
    """Return ``HEAD``'s commit hash, or None outside a repo / without git."""
    if not is_git_repository(cwd):
        return None
    try:
        r = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True,
            text=True,
            cwd=cwd,
            timeout=5,
        )
    except (OSError, subprocess.TimeoutExpired):
        return None
    return r.stdout.strip() if r.returncode == 0 and r.stdout.strip() else None


def temp_xml_path(prefix: str = "proompt-repo") -> Path:
    """Unique ``<tmp>/<prefix>-<millis>-<16 hex>.xml`` path."""
    millis = int(time.time() * 1000)
    return Path(tempfile.gettempdir()) / f"{prefix}-{millis}-{secrets.token_hex(8)}.xml"


def announce_temp_file(path: Path) -> None:
    # Snapshots are left on disk; the user removes them.
    console.print(f"Temporary XML file created: {escape(str(path))}")
    console.print(f'Clean up manually when finished: rm "{escape(str(path))}"', style="dim")


def file_mtime(path: Path) -> float | None:
    try:
        return path.stat().st_mtime
    except OSError:
        return None


def files_modified_since(
    start: float, file_names: Iterable[str], directories: Iterable[Path] = (Path("."),)
) -> bool:
    """True if any *file_names* inside any of *directories* changed after *start*."""
    names = list(file_names)
    for d in directories:
        for name in names:
            mtime = file_mtime(Path(d) / name)
            if mtime is not None and mtime > start:
                return True
    return False


def all_files_exist(directory: Path, file_names: Iterable[str]) -> bool:
    return all((Path(directory) / name).is_file() for name in file_names)


def short_cwd(p: Path) -> str:
    """Return path relative to home directory, using ~ prefix."""
    try:
        rel = p.relative_to(Path.home())
        return f"~/{rel}" if str(rel) != "." else "~"
    except ValueError:
        return str(p)
