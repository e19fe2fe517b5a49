"""``proompt config``: show or update global / project settings."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from ..core.config import DEFAULT_LLM_CLI, Settings, read_settings, write_settings
from ..core.errors import ValidationError, ValidationIssue
from ..core.resolver import parse_output_format, resolve_settings
from .module import CommandModule, validate_args

console = Console()


def _print_settings(title: str, path: Path, settings: Settings) -> None:
    console.print(f"{title} (from {escape(str(path))}):")
    console.print(f"  LLM CLI: [bold]{settings.llm_cli}[/bold]")
    console.print(f"  Output format: {', '.join(settings.effective_output_format)}")


def _show(scope: str | None) -> None:
    global_meta = read_settings("global")

    if scope == "global":
        if global_meta.settings is not None:
            _print_settings("Global configuration", global_meta.file_path, global_meta.settings)
            return
        console.print("No global configuration file found.")
        console.print("Using built-in defaults:")
        console.print(f"  LLM CLI: {DEFAULT_LLM_CLI} (default)")
        console.print(f"  Output format: {DEFAULT_LLM_CLI} (default)")
        console.print()
        console.print("Create global settings: proompt config --global --set-llm-cli <value>", style="dim")
        return

    if scope == "project":
        project_meta = read_settings("project")
        if project_meta.settings is not None:
            _print_settings("Project configuration", project_meta.file_path, project_meta.settings)
            return
        console.print("No project configuration file found.")
        console.print("Effective settings for this project:")
        if global_meta.file_exists and global_meta.settings is not None:
            fmt = ", ".join(global_meta.settings.effective_output_format)
            console.print(f"  LLM CLI: {global_meta.settings.llm_cli} (from global settings)")
            console.print(f"  Output format: {fmt} (from global settings)")
        else:
            console.print(f"  LLM CLI: {DEFAULT_LLM_CLI} (built-in default)")
            console.print(f"  Output format: {DEFAULT_LLM_CLI} (built-in default)")
        console.print()
        console.print("Create project settings: proompt config --project --set-llm-cli <value>", style="dim")
        return

    resolved = resolve_settings()
    console.print("Effective configuration:")
    console.print(f"  LLM CLI: [bold]{resolved.llm_cli}[/bold]")
    console.print(f"  Output format: {', '.join(resolved.output_format)}")
    console.print()
    console.print("Use --global or --project to inspect or change a settings file.", style="dim")


def config_handler(module: CommandModule, raw_args: Mapping[str, Any]) -> None:
    args = validate_args(module, raw_args)

    if args.global_ and args.project:
        message = "Choose either --global or --project, not both"
        raise ValidationError(message, [ValidationIssue(field="global", message=message)])
    scope = "global" if args.global_ else "project" if args.project else None

    if args.set_llm_cli is None and args.set_output_format is None:
        _show(scope)
        return

    if scope is None:
        message = "Specify --global or --project to choose which settings file to update"
        raise ValidationError(message, [ValidationIssue(field="project", message=message)])

    # Validate everything before touching the file.
    output_format = None
    if args.set_output_format is not None:
        output_format = parse_output_format(args.set_output_format, field="set_output_format")

    current = read_settings(scope).settings or Settings(llm_cli=DEFAULT_LLM_CLI)
    updates: dict[str, Any] = {}
    if args.set_llm_cli is not None:
        updates["llm_cli"] = args.set_llm_cli
    if output_format is not None:
        updates["output_format"] = output_format
    path = write_settings(scope, {**current.model_dump(), **updates})

    if args.set_llm_cli is not None:
        console.print(f"[green]✓[/green] LLM CLI set to: {args.set_llm_cli}")
    if output_format is not None:
        console.print(f"[green]✓[/green] Output format set to: {', '.join(output_format)}")
    console.print(f"[green]✓[/green] {scope.capitalize()} settings saved to: {escape(str(path))}")
