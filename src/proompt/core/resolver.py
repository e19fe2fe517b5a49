"""Settings resolution: defaults < global file < project file < command-line override."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .config import (
    DEFAULT_LLM_CLI,
    LLM_CLIS,
    LlmCli,
    ResolvedSettings,
    read_settings,
)
from .errors import ValidationError, ValidationIssue


class SettingsOverride(BaseModel):
    """Per-invocation overrides from ``--llm-cli`` / ``--output-format``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    llm_cli: LlmCli | None = Field(default=None, alias="llmCli")
    output_format: str | None = Field(default=None, alias="outputFormat")


def parse_output_format(value: str, field: str = "output_format") -> list[str]:
    """Split a comma-separated assistant list, rejecting unknown or empty entries."""
    formats = [part.strip() for part in value.split(",")]
    invalid = [f for f in formats if f not in LLM_CLIS]
    if invalid:
        allowed = ", ".join(LLM_CLIS)
        shown = ", ".join(repr(f) for f in invalid)
        message = f"Invalid output format {shown}. Valid options are: {allowed} (comma-separated)"
        raise ValidationError(message, [ValidationIssue(field=field, message=message)])
    return formats


def resolve_settings(override: SettingsOverride | dict | None = None) -> ResolvedSettings:
    """Merge every settings layer into one effective configuration.

    Each file layer that is present replaces both fields together, so a
    layer that only sets ``llmCli`` also resets the format to ``[llmCli]``.
    """
    try:
        override = SettingsOverride.model_validate(override or {})
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e

    llm_cli: str = DEFAULT_LLM_CLI
    output_format: list[str] = [DEFAULT_LLM_CLI]

    for scope in ("global", "project"):
        layer = read_settings(scope)
        if layer.file_exists and layer.settings is not None:
            llm_cli = layer.settings.llm_cli
            output_format = layer.settings.effective_output_format

    if override.llm_cli:
        llm_cli = override.llm_cli
    if override.output_format is not None:
        output_format = parse_output_format(override.output_format)

    try:
        return ResolvedSettings(llm_cli=llm_cli, output_format=output_format)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e
