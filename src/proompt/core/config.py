"""Settings store: schemas, paths, read/write at global and project scope."""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape

from .errors import SettingsIOError, ValidationError

err_console = Console(stderr=True)

LlmCli = Literal["claude", "gemini"]
OutputFormat = Annotated[list[LlmCli], Field(min_length=1)]

LLM_CLIS: tuple[str, ...] = ("claude", "gemini")
DEFAULT_LLM_CLI = "claude"
OUTPUT_FILE_NAMES: dict[str, str] = {
    "claude": "CLAUDE.md",
    "gemini": "GEMINI.md",
}

SETTINGS_DIR_NAME = ".proompt"
SETTINGS_FILE_NAME = "settings.json"


class Settings(BaseModel):
    """Persisted settings document (``{"llmCli": ..., "outputFormat": [...]}``)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    llm_cli: LlmCli = Field(alias="llmCli")
    output_format: OutputFormat | None = Field(default=None, alias="outputFormat")

    @property
    def effective_output_format(self) -> list[str]:
        """``outputFormat`` if set, else ``[llmCli]``."""
        return list(self.output_format) if self.output_format else [self.llm_cli]

    def to_json(self) -> str:
        return json.dumps(self.model_dump(by_alias=True, exclude_none=True), indent=2) + "\n"


class ResolvedSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    llm_cli: LlmCli = Field(alias="llmCli")
    output_format: OutputFormat = Field(alias="outputFormat")


@dataclass
class SettingsFile:
    """Result of reading one scope's settings file."""

    settings: Settings | None
    file_exists: bool
    file_path: Path


def proompt_dir(scope: str) -> Path:
    if scope == "global":
        return Path.home() / SETTINGS_DIR_NAME
    if scope == "project":
        return Path.cwd() / SETTINGS_DIR_NAME
    raise ValueError(f"unknown settings scope: {scope!r}")


def settings_path(scope: str) -> Path:
    return proompt_dir(scope) / SETTINGS_FILE_NAME


def read_settings(scope: str) -> SettingsFile:
    """Read *scope*'s settings; unreadable or invalid files count as absent."""
    path = settings_path(scope)
    if not path.exists():
        return SettingsFile(settings=None, file_exists=False, file_path=path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        settings = Settings.model_validate(data)
    except (OSError, ValueError) as e:
        reason = "invalid settings" if isinstance(e, PydanticValidationError) else str(e)
        err_console.print(
            f"warning: could not read {scope} settings file {escape(str(path))} "
            f"({escape(reason)}), using defaults",
            style="yellow",
        )
        return SettingsFile(settings=None, file_exists=False, file_path=path)
    return SettingsFile(settings=settings, file_exists=True, file_path=path)


def _file_mode(path: Path) -> int:
    """Existing file's permissions, else the umask default for a new file."""
    try:
        return path.stat().st_mode & 0o777
    except OSError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_settings(scope: str, settings: Settings | dict) -> Path:
    """Validate and atomically write *settings* to *scope*'s file. Returns the path."""
    try:
        validated = Settings.model_validate(settings)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e

    path = settings_path(scope)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".settings-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(validated.to_json())
            os.chmod(tmp_name, _file_mode(path))
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as e:
        raise SettingsIOError(f"Failed to write settings to {path}: {e}") from e
    return path
