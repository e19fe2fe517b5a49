"""Shell completion: emit the click completion script, or install it in the shell rc."""

from __future__ import annotations

import os
from pathlib import Path

import click
from click.shell_completion import get_completion_class

PROG_NAME = "proompt"
COMPLETE_VAR = "_PROOMPT_COMPLETE"
EVAL_LINE = f'eval "$({PROG_NAME} --completion)"'

RC_FILES = {
    "bash": ".bashrc",
    "zsh": ".zshrc",
}


def detect_shell() -> str:
    name = Path(os.environ.get("SHELL", "")).name
    return name if get_completion_class(name) is not None else "bash"


def completion_script(cli: click.Command, shell: str | None = None) -> str:
    shell = shell or detect_shell()
    comp_cls = get_completion_class(shell)
    if comp_cls is None:
        raise click.UsageError(f"shell completion is not supported for {shell!r}")
    return comp_cls(cli, {}, PROG_NAME, COMPLETE_VAR).source()


def setup_shell_init_file(shell: str | None = None, home: Path | None = None) -> Path:
    """Append the completion eval line to the shell's rc file (once). Returns the file."""
    shell = shell or detect_shell()
    rc_name = RC_FILES.get(shell)
    if rc_name is None:
        raise OSError(f"automatic setup is not supported for {shell!r}")
    rc_path = (home or Path.home()) / rc_name
    existing = rc_path.read_text(encoding="utf-8") if rc_path.exists() else ""
    if EVAL_LINE not in existing:
        with rc_path.open("a", encoding="utf-8") as f:
            if existing and not existing.endswith("\n"):
                f.write("\n")
            f.write(f"\n# proompt shell completion\n{EVAL_LINE}\n")
    return rc_path
