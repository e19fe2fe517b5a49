"""Optional RULES.md files, formatted as mandatory instructions for the prompt."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

RULES_FILE_NAME = "RULES.md"

_NOTICE = """\
**MANDATORY COMPLIANCE NOTICE**

The following rules are **NON-NEGOTIABLE** and **SUPERSEDE** any patterns, conventions, \
or practices you may discover in the codebase analysis. These rules come directly from \
the project maintainers and represent absolute requirements.

**FAILURE TO FOLLOW THESE RULES IS A CRITICAL FAILURE** for any agentic coder working \
on this project."""

_FOOTER = """\
Remember: These rules are **mandatory** and **non-negotiable**. They override any \
conflicting information you may find elsewhere in the codebase or documentation.

**END OF CRITICAL PROJECT RULES**"""

_PREAMBLE = (
    "It is imperative you write the following information verbatim into your output "
    "at the end of the file:"
)


def read_rules(directory: Path) -> str | None:
    """Stripped RULES.md content, or None when missing, empty or unreadable."""
    path = Path(directory) / RULES_FILE_NAME
    try:
        content = path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None
    return content or None


def read_rules_from(directories: Iterable[Path]) -> dict[str, str]:
    result: dict[str, str] = {}
    for d in directories:
        if rules := read_rules(d):
            result[str(d)] = rules
    return result


def format_rules(rules: str, source: str) -> str:
    return (
        f"\n{_PREAMBLE}\n\n"
        f"## CRITICAL PROJECT RULES FROM {source.upper()}\n\n"
        f"{_NOTICE}\n\n---\n\n{rules}\n\n---\n\n{_FOOTER}\n"
    )


def format_multiple_rules(rules_by_dir: Mapping[str, str]) -> str:
    """One rules block covering several directories; empty string if none."""
    if not rules_by_dir:
        return ""
    sections = "".join(
        f"\n### Rules from: {d}\n\n{rules}\n\n---\n" for d, rules in rules_by_dir.items()
    )
    return (
        f"\n{_PREAMBLE}\n\n"
        "## CRITICAL PROJECT RULES FROM ANALYZED DIRECTORIES\n\n"
        f"{_NOTICE}\n\n---\n{sections}\n{_FOOTER}\n"
    )
