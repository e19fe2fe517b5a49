"""Exception hierarchy: validation, settings I/O, child processes, external tools."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import ValidationError as PydanticValidationError


class ProomptError(Exception):
    """Base exception for proompt failures."""


@dataclass
class ValidationIssue:
    field: str
    message: str


class ValidationError(ProomptError):
    """Malformed or missing arguments, or malformed settings content."""

    def __init__(self, message: str, issues: list[ValidationIssue] | None = None):
        super().__init__(message)
        self.issues = issues or []

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError, message: str = "") -> ValidationError:
        issues = []
        for err in exc.errors():
            loc = err.get("loc") or ()
            field = str(loc[0]) if loc else ""
            issues.append(ValidationIssue(field=field, message=err.get("msg", "invalid value")))
        if not message:
            message = "; ".join(f"{i.field}: {i.message}" if i.field else i.message for i in issues)
        return cls(message, issues)


class SettingsIOError(ProomptError):
    """Settings directory or file could not be written."""


class UnsupportedAssistantError(ProomptError):
    def __init__(self, llm_cli: str):
        super().__init__(f"Unsupported LLM CLI: {llm_cli}")
        self.llm_cli = llm_cli


class ChildProcessError(ProomptError):  # noqa: A001
    """The external assistant failed to start or exited non-zero."""


class ChildProcessFailedError(ChildProcessError):
    def __init__(self, llm_cli: str, code: int):
        super().__init__(f"{llm_cli} command failed with exit code {code}")
        self.llm_cli = llm_cli
        self.code = code


class SpawnError(ChildProcessError):
    def __init__(self, program: str, reason: str):
        super().__init__(f"Failed to start {program}: {reason}")
        self.program = program


class ExternalToolError(ProomptError):
    """A helper tool (repository packer, etc.) failed."""
