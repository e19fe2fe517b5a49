"""Handlers for documentation commands: snapshots, rules, skip-existing, metadata."""

from __future__ import annotations

import time
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from ..core.config import ResolvedSettings
from ..core.doc_metadata import (
    DocRecord,
    dir_doc_record,
    project_doc_record,
    update_dir_doc_hash,
    update_project_doc_hash,
)
from ..core.errors import ValidationError, ValidationIssue
from ..core.repomix import pack_repository
from ..core.resolver import resolve_settings
from ..core.rules import format_multiple_rules, format_rules, read_rules, read_rules_from
from ..core.template import output_file_names
from ..core.utils import (
    all_files_exist,
    announce_temp_file,
    current_commit_hash,
    files_modified_since,
    temp_xml_path,
)
from ..execution import execute
from .module import CommandModule, build_prompt, validate_args

console = Console()


def _require_dir(path: str, field: str) -> Path:
    d = Path(path)
    if not d.is_dir():
        message = f"Directory not found: {path}"
        raise ValidationError(message, [ValidationIssue(field=field, message=message)])
    return d


def _snapshot(directory: Path) -> Path:
    path = temp_xml_path()
    pack_repository(path, directory)
    announce_temp_file(path)
    return path


def _last_commit(record: DocRecord | None) -> str:
    return record.commit_hash if record else "never"


def _launch_and_record(
    prompt: str,
    settings: ResolvedSettings,
    directories: Sequence[Path],
    project: bool = False,
) -> None:
    """Run the assistant, then store the commit hash for whatever docs it wrote."""
    started = time.time()
    execute(prompt, settings)

    names = output_file_names(settings.output_format)
    touched = [d for d in directories if files_modified_since(started, names, [d])]
    if not touched:
        console.print("no documentation files were created or modified", style="dim")
        return
    commit = current_commit_hash()
    if commit is None:
        console.print("not a git repository, documentation metadata not updated", style="dim")
        return
    if project:
        update_project_doc_hash(commit)
    else:
        for d in touched:
            update_dir_doc_hash(d, commit)
    console.print(f"recorded documentation at commit {commit[:7]}", style="dim")


def document_project(module: CommandModule, raw_args: Mapping[str, Any]) -> None:
    args = validate_args(module, raw_args)
    settings = resolve_settings(args.override())
    root = Path.cwd()
    rules = read_rules(root)
    extra = {
        "repositoryXmlPath": str(_snapshot(root)),
        "rules": format_rules(rules, "project root") if rules else "",
        "lastDocumentedCommit": _last_commit(project_doc_record()),
    }
    _launch_and_record(build_prompt(module, args, settings, extra), settings, [root], project=True)


def document_overview(module: CommandModule, raw_args: Mapping[str, Any]) -> None:
    args = validate_args(module, raw_args)
    settings = resolve_settings(args.override())
    _launch_and_record(build_prompt(module, args, settings), settings, [Path.cwd()], project=True)


def document_dir(module: CommandModule, raw_args: Mapping[str, Any]) -> None:
    args = validate_args(module, raw_args)
    settings = resolve_settings(args.override())
    directory = _require_dir(args.directory_path, "directory_path")

    names = output_file_names(settings.output_format)
    if args.skip_existing and all_files_exist(directory, names):
        console.print(
            f"skipping {escape(str(directory))}: {', '.join(names)} already exist", style="dim"
        )
        return

    rules = read_rules(directory)
    extra = {
        "repositoryXmlPath": str(_snapshot(directory)),
        "rules": format_rules(rules, f"directory {directory}") if rules else "",
        "lastDocumentedCommit": _last_commit(dir_doc_record(directory)),
    }
    _launch_and_record(build_prompt(module, args, settings, extra), settings, [directory])


def document_dirs(module: CommandModule, raw_args: Mapping[str, Any]) -> None:
    args = validate_args(module, raw_args)
    settings = resolve_settings(args.override())
    if not args.directories:
        message = "At least one directory path is required"
        raise ValidationError(message, [ValidationIssue(field="directory_paths", message=message)])
    directories = [_require_dir(d, "directory_paths") for d in args.directories]

    names = output_file_names(settings.output_format)
    if args.skip_existing:
        pending = [d for d in directories if not all_files_exist(d, names)]
        for d in directories:
            if d not in pending:
                console.print(f"skipping {escape(str(d))}: already documented", style="dim")
        directories = pending
    if not directories:
        console.print("nothing to document", style="dim")
        return

    snapshots = [_snapshot(d) for d in directories]
    extra = {
        "directoryList": "\n".join(f"- `{d}`" for d in directories),
        "repositoryXmlPaths": "\n".join(f"- `{d}`: `{s}`" for d, s in zip(directories, snapshots)),
        "rules": format_multiple_rules(read_rules_from(directories)),
    }
    _launch_and_record(build_prompt(module, args, settings, extra), settings, directories)
