"""Argument schemas for each command (validated after click has parsed argv)."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.config import LlmCli
from ..core.resolver import SettingsOverride

RequiredText = Annotated[str, Field(min_length=1)]

OVERRIDE_FIELDS = {"llm_cli", "output_format"}


class PromptArgs(BaseModel):
    """Base for prompt commands; camelCase aliases double as template variable names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    llm_cli: LlmCli | None = None

    def override(self) -> SettingsOverride:
        return SettingsOverride(
            llm_cli=self.llm_cli,
            output_format=getattr(self, "output_format", None),
        )

    def template_variables(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude=OVERRIDE_FIELDS)


class DocumentationArgs(PromptArgs):
    output_format: str | None = None


class LyraArgs(PromptArgs):
    pass


class PlanArgs(PromptArgs):
    plan_path: RequiredText


class GeneratePlanArgs(PromptArgs):
    draft_plan_path: RequiredText


class DocumentCodebaseArgs(DocumentationArgs):
    start_path: RequiredText


class DocumentDeepArgs(DocumentationArgs):
    start_path: RequiredText
    skip_existing: bool = False


class DocumentDirArgs(DocumentationArgs):
    directory_path: RequiredText
    skip_existing: bool = False


class DocumentDirsArgs(DocumentationArgs):
    directory_paths: RequiredText
    skip_existing: bool = False

    @property
    def directories(self) -> list[str]:
        return [d.strip() for d in self.directory_paths.split(",") if d.strip()]


class DocumentOverviewArgs(DocumentationArgs):
    initial_documentation_path: RequiredText


class DocumentProjectArgs(DocumentationArgs):
    initial_documentation_path: RequiredText


class ConfigArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    global_: bool = Field(default=False, alias="global")
    project: bool = False
    set_llm_cli: LlmCli | None = None
    set_output_format: str | None = None
