"""Spawn the configured assistant CLI with a rendered prompt, attached to this terminal."""

from __future__ import annotations

import subprocess

from ..core.config import ResolvedSettings
from ..core.errors import ChildProcessFailedError, SpawnError, UnsupportedAssistantError


def build_invocation(llm_cli: str, prompt: str) -> list[str]:
    """argv for *llm_cli* started interactively with *prompt* as its first message."""
    if llm_cli == "claude":
        return ["claude", prompt]
    if llm_cli == "gemini":
        # gemini needs -i to stay interactive after the initial prompt
        return ["gemini", "-i", prompt]
    raise UnsupportedAssistantError(llm_cli)


def execute(prompt: str, settings: ResolvedSettings) -> None:
    """Run the assistant and block until it exits; non-zero exit raises."""
    argv = build_invocation(settings.llm_cli, prompt)
    try:
        # stdin/stdout/stderr are inherited: the user talks to the child directly
        result = subprocess.run(argv)
    except OSError as e:
        raise SpawnError(argv[0], e.strerror or str(e)) from e
    if result.returncode != 0:
        raise ChildProcessFailedError(settings.llm_cli, result.returncode)
