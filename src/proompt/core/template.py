"""``{{variable}}`` substitution and the output-file variables derived from settings."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from .config import OUTPUT_FILE_NAMES

_PLACEHOLDER_RE = re.compile(r"\{\{\s*([^{}\s]+)\s*\}\}")


def _stringify(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def render(template: str, variables: Mapping[str, object]) -> str:
    """Replace ``{{ name }}`` for every *name* in *variables*.

    Single pass: substituted values are never re-scanned, and placeholders
    without a matching key are left as-is.
    """

    def _replace(m: re.Match) -> str:
        name = m.group(1)
        if name not in variables:
            return m.group(0)
        return _stringify(variables[name])

    return _PLACEHOLDER_RE.sub(_replace, template)


def output_file_names(output_format: Sequence[str]) -> list[str]:
    return [OUTPUT_FILE_NAMES[fmt] for fmt in output_format]


def output_variables(output_format: Sequence[str]) -> dict[str, str]:
    """Template variables describing which documentation files to produce."""
    names = output_file_names(output_format)
    plural = len(names) > 1
    return {
        "outputFiles": " and ".join(f"`{n}`" for n in names),
        "outputFileList": " and ".join(names),
        "outputAction": "Create identical" if plural else "Create a",
        "fileOrFiles": "files" if plural else "file",
        "requiredDocFiles": ", ".join(f'"{n}"' for n in names),
        "allRequiredFilesExist": f"all required files ({', '.join(names)}) exist",
    }
