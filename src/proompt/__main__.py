"""CLI entry point: global options plus one subcommand per command module."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .commands import COMMAND_MODULES, to_click_command
from .completion import EVAL_LINE, completion_script, setup_shell_init_file
from .core.utils import short_cwd

console = Console()
err_console = Console(stderr=True)


class InvalidCommandError(click.UsageError):
    exit_code = 1


class ProomptGroup(click.Group):
    """Group whose usage errors, unknown subcommands included, exit 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise

    def resolve_command(self, ctx: click.Context, args: list[str]):
        name = args[0] if args else ""
        if name and not name.startswith("-") and self.get_command(ctx, name) is None:
            raise InvalidCommandError(
                f"Invalid command: {name}\nSee --help for a list of available commands.", ctx
            )
        return super().resolve_command(ctx, args)


def _change_directory(cwd: str) -> None:
    try:
        os.chdir(cwd)
    except OSError as e:
        err_console.print(
            f"Failed to change directory to {escape(cwd)}: {escape(e.strerror or str(e))}",
            style="red",
        )
        sys.exit(1)
    err_console.print(f"Changed working directory to: {escape(short_cwd(Path.cwd()))}", style="dim")


def _list_commands() -> None:
    console.print("Available proompts:")
    for module in COMMAND_MODULES:
        console.print(f"  [bold]{module.name:<20}[/bold] → {escape(module.description)}")


def _setup_completion() -> None:
    try:
        rc_path = setup_shell_init_file()
    except OSError as e:
        err_console.print(f"Failed to setup completion: {escape(str(e))}", style="red")
        console.print("You can manually add this to your shell config:")
        console.print(f"  {escape(EVAL_LINE)}")
        sys.exit(1)
    console.print(f"Shell completion has been set up in {escape(str(rc_path))}.")
    console.print("Restart your shell or run:")
    console.print(f"  source {escape(str(rc_path))}")


@click.group(
    cls=ProomptGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--cwd", "-C", default=None, metavar="DIRECTORY", help="Change working directory before running command")
@click.option("--list", "-l", "list_", is_flag=True, help="List all available proompts")
@click.option("--completion", is_flag=True, help="Output completion script for shell")
@click.option("--setup-completion", is_flag=True, help="Setup shell completion")
@click.option("--verbose", "-v", is_flag=True, help="Show tracebacks for errors")
@click.version_option(__version__, prog_name="proompt")
@click.pass_context
def cli(
    ctx: click.Context,
    cwd: str | None,
    list_: bool,
    completion: bool,
    setup_completion: bool,
    verbose: bool,
) -> None:
    """CLI tool for running AI prompts with structure and repeatability."""
    if cwd:
        _change_directory(cwd)

    if completion:
        click.echo(completion_script(ctx.command))
        ctx.exit(0)
    if setup_completion:
        _setup_completion()
        ctx.exit(0)
    if list_:
        _list_commands()
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _module in COMMAND_MODULES:
    cli.add_command(to_click_command(_module))


def main() -> None:
    cli(prog_name="proompt")


if __name__ == "__main__":
    main()
