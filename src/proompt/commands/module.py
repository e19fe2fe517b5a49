"""CommandModule descriptors, the default prompt pipeline, and click registration."""

from __future__ import annotations

import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import click
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape

from ..core.config import ResolvedSettings
from ..core.errors import ProomptError, ValidationError
from ..core.resolver import resolve_settings
from ..core.template import output_variables, render
from ..execution import execute
from .schemas import PromptArgs

console = Console()
err_console = Console(stderr=True)

Handler = Callable[["CommandModule", Mapping[str, Any]], None]


@dataclass(frozen=True)
class CommandArgument:
    """One command-line argument: ``--name``/``-alias`` option or positional."""

    name: str
    description: str
    required: bool = False
    type: str = "string"  # "string" | "number" | "boolean"
    alias: str | None = None
    positional: bool = False

    @property
    def field_name(self) -> str:
        return self.name.replace("-", "_")

    @property
    def flag(self) -> str:
        if self.positional:
            return f"<{self.name}>"
        return f"-{self.alias}, --{self.name}" if self.alias else f"--{self.name}"

    def matches(self, field: str) -> bool:
        def norm(s: str) -> str:
            return s.replace("-", "").replace("_", "").lower()

        return norm(self.name) == norm(field)

    def to_click_param(self) -> click.Parameter:
        help_text = f"{self.description} (required)" if self.required else self.description
        if self.positional:
            return click.Argument(
                [self.field_name], required=False, metavar=self.name.upper()
            )
        decls = [f"--{self.name}"]
        if self.alias:
            decls.append(f"-{self.alias}")
        decls.append(self.field_name)
        if self.type == "boolean":
            return click.Option(decls, is_flag=True, default=False, help=help_text)
        if self.type == "number":
            return click.Option(decls, type=float, default=None, metavar="<number>", help=help_text)
        return click.Option(decls, default=None, metavar="<value>", help=help_text)


LLM_CLI_ARGUMENT = CommandArgument(
    name="llm-cli",
    description="LLM CLI to use for this run (claude|gemini)",
    alias="L",
)
OUTPUT_FORMAT_ARGUMENT = CommandArgument(
    name="output-format",
    description="Documentation files to produce for this run (claude,gemini or any combination)",
    alias="F",
)


@dataclass(frozen=True)
class CommandModule:
    """Static descriptor for one proompt command."""

    name: str
    description: str
    args_schema: type[BaseModel]
    template: str = ""
    arguments: tuple[CommandArgument, ...] = ()
    handler: Handler | None = None
    overridable: bool = True
    documentation: bool = False

    @property
    def all_arguments(self) -> tuple[CommandArgument, ...]:
        extra: tuple[CommandArgument, ...] = ()
        if self.overridable:
            extra += (LLM_CLI_ARGUMENT,)
        if self.documentation:
            extra += (OUTPUT_FORMAT_ARGUMENT,)
        return self.arguments + extra

    def find_argument(self, field: str) -> CommandArgument | None:
        for arg in self.all_arguments:
            if arg.matches(field):
                return arg
        return None

    def run(self, raw_args: Mapping[str, Any]) -> None:
        (self.handler or run_proompt)(self, raw_args)


def validate_args(module: CommandModule, raw_args: Mapping[str, Any]) -> Any:
    """Validate click's parsed values against the module schema."""
    data = {k: v for k, v in raw_args.items() if v is not None}
    try:
        return module.args_schema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e, f"invalid arguments for '{module.name}'") from e


def build_prompt(
    module: CommandModule,
    args: PromptArgs,
    settings: ResolvedSettings,
    extra: Mapping[str, Any] | None = None,
) -> str:
    variables = {
        **args.template_variables(),
        **output_variables(settings.output_format),
        **(extra or {}),
    }
    return render(module.template, variables)


def run_proompt(module: CommandModule, raw_args: Mapping[str, Any]) -> None:
    """Default handler: validate, resolve settings, render, launch the assistant."""
    args = validate_args(module, raw_args)
    settings = resolve_settings(args.override())
    execute(build_prompt(module, args, settings), settings)


def report_validation_error(module: CommandModule, error: ValidationError) -> None:
    err_console.print(f"Error: invalid arguments for command '{module.name}':", style="red")
    if not error.issues:
        err_console.print(f"  {escape(str(error))}")
    for issue in error.issues:
        arg = module.find_argument(issue.field)
        if arg is not None:
            err_console.print(
                f"  [bold]{escape(arg.flag)}[/bold]: {escape(arg.description)} "
                f"[dim]({escape(issue.message)})[/dim]"
            )
        else:
            label = f"--{issue.field}: " if issue.field else ""
            err_console.print(f"  {escape(label + issue.message)}")
    err_console.print(f"\nUse 'proompt {module.name} --help' for more information.", style="dim")


class ProomptCommand(click.Command):
    """Command whose argv parse errors exit 1 instead of click's 2."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def to_click_command(module: CommandModule) -> click.Command:
    """Build the click subcommand for *module*; every ProomptError exits 1."""

    def callback(**kwargs: Any) -> None:
        ctx = click.get_current_context()
        verbose = bool(ctx.find_root().params.get("verbose"))
        try:
            module.run(kwargs)
        except ValidationError as e:
            report_validation_error(module, e)
            sys.exit(1)
        except ProomptError as e:
            err_console.print(
                f"Error running command {module.name}: {escape(str(e))}", style="red"
            )
            if verbose:
                err_console.print_exception()
            sys.exit(1)

    return ProomptCommand(
        name=module.name,
        callback=callback,
        params=[arg.to_click_param() for arg in module.all_arguments],
        help=module.description,
        short_help=module.description,
    )
