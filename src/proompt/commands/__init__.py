"""Commands: the ordered registry of proompt command modules."""

from __future__ import annotations

from . import proompts
from .configure import config_handler
from .documentation import document_dir, document_dirs, document_overview, document_project
from .module import (
    LLM_CLI_ARGUMENT,
    OUTPUT_FORMAT_ARGUMENT,
    CommandArgument,
    CommandModule,
    build_prompt,
    run_proompt,
    to_click_command,
    validate_args,
)
from .schemas import (
    ConfigArgs,
    DocumentCodebaseArgs,
    DocumentDeepArgs,
    DocumentDirArgs,
    DocumentDirsArgs,
    DocumentOverviewArgs,
    DocumentProjectArgs,
    GeneratePlanArgs,
    LyraArgs,
    PlanArgs,
)

_SKIP_EXISTING = CommandArgument(
    name="skip-existing",
    description=(
        "Skip directories where all required documentation files already exist "
        "(e.g. CLAUDE.md, GEMINI.md)"
    ),
    type="boolean",
    alias="s",
)

_START_PATH = CommandArgument(
    name="start-path",
    description="Path to modules, libs, or packages directory",
    required=True,
    alias="i",
)

_INITIAL_DOC = CommandArgument(
    name="initial-documentation-path",
    description="Path to initial documentation file (README.md, CLAUDE.md, GEMINI.md)",
    required=True,
    alias="i",
)

COMMAND_MODULES: tuple[CommandModule, ...] = (
    CommandModule(
        name="config",
        description="Configure proompt settings (view or update)",
        args_schema=ConfigArgs,
        arguments=(
            CommandArgument(
                "global", "Manage global settings (stored in home directory)", type="boolean", alias="g"
            ),
            CommandArgument(
                "project",
                "Manage project settings (stored in current directory)",
                type="boolean",
                alias="p",
            ),
            CommandArgument("set-llm-cli", "Set the LLM CLI (claude|gemini)", alias="L"),
            CommandArgument(
                "set-output-format",
                "Set output format (claude,gemini or any combination)",
                alias="F",
            ),
        ),
        handler=config_handler,
        overridable=False,
    ),
    CommandModule(
        name="document-codebase",
        description="Generate comprehensive module/library documentation for AI coding tools",
        args_schema=DocumentCodebaseArgs,
        template=proompts.DOCUMENT_CODEBASE,
        arguments=(_START_PATH,),
        documentation=True,
    ),
    CommandModule(
        name="document-deep",
        description="Generate in-depth recursive documentation for AI coding tools",
        args_schema=DocumentDeepArgs,
        template=proompts.DOCUMENT_DEEP,
        arguments=(_START_PATH, _SKIP_EXISTING),
        documentation=True,
    ),
    CommandModule(
        name="document-dir",
        description="Generate comprehensive documentation for AI coding tools in a specific directory",
        args_schema=DocumentDirArgs,
        template=proompts.DOCUMENT_DIR,
        arguments=(
            CommandArgument(
                "directory-path", "Path to directory to document", required=True, positional=True
            ),
            _SKIP_EXISTING,
        ),
        handler=document_dir,
        documentation=True,
    ),
    CommandModule(
        name="document-dirs",
        description="Generate documentation for AI coding tools in several directories at once",
        args_schema=DocumentDirsArgs,
        template=proompts.DOCUMENT_DIRS,
        arguments=(
            CommandArgument(
                "directory-paths",
                "Comma-separated paths of directories to document",
                required=True,
                positional=True,
            ),
            _SKIP_EXISTING,
        ),
        handler=document_dirs,
        documentation=True,
    ),
    CommandModule(
        name="document-overview",
        description="Generate a high-level project overview for AI coding tools",
        args_schema=DocumentOverviewArgs,
        template=proompts.DOCUMENT_OVERVIEW,
        arguments=(_INITIAL_DOC,),
        handler=document_overview,
        documentation=True,
    ),
    CommandModule(
        name="document-project",
        description="Generate comprehensive codebase analysis and overview documentation",
        args_schema=DocumentProjectArgs,
        template=proompts.DOCUMENT_PROJECT,
        arguments=(_INITIAL_DOC,),
        handler=document_project,
        documentation=True,
    ),
    CommandModule(
        name="execute-plan",
        description="Execute validated implementation plan",
        args_schema=PlanArgs,
        template=proompts.EXECUTE_PLAN,
        arguments=(
            CommandArgument("plan-path", "Path to implementation plan file", required=True, alias="i"),
        ),
    ),
    CommandModule(
        name="generate-plan",
        description="Generate detailed implementation plan from draft requirements",
        args_schema=GeneratePlanArgs,
        template=proompts.GENERATE_PLAN,
        arguments=(
            CommandArgument("draft-plan-path", "Path to draft plan file", required=True, positional=True),
        ),
    ),
    CommandModule(
        name="lyra",
        description="Optimize prompts for better AI responses",
        args_schema=LyraArgs,
        template=proompts.LYRA,
    ),
    CommandModule(
        name="validate-plan",
        description="Validate and stress-test implementation plan",
        args_schema=PlanArgs,
        template=proompts.VALIDATE_PLAN,
        arguments=(
            CommandArgument("plan-path", "Path to implementation plan file", required=True, positional=True),
        ),
    ),
)


def get_command_module(name: str) -> CommandModule | None:
    for module in COMMAND_MODULES:
        if module.name == name:
            return module
    return None


__all__ = [
    "COMMAND_MODULES",
    "LLM_CLI_ARGUMENT",
    "OUTPUT_FORMAT_ARGUMENT",
    "CommandArgument",
    "CommandModule",
    "build_prompt",
    "get_command_module",
    "run_proompt",
    "to_click_command",
    "validate_args",
]
