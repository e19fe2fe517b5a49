"""Commit hashes of the last documentation run, per project and per directory."""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field

from .config import proompt_dir
from .errors import SettingsIOError

DOC_METADATA_FILE_NAME = "doc-metadata.json"


class DocRecord(BaseModel):
    commit_hash: str = Field(alias="commitHash")
    timestamp: str


class DocMetadata(BaseModel):
    project: DocRecord | None = None
    directories: dict[str, DocRecord] = Field(default_factory=dict)


def doc_metadata_path() -> Path:
    return proompt_dir("project") / DOC_METADATA_FILE_NAME


def read_doc_metadata() -> DocMetadata:
    """Load metadata; a missing or corrupt file reads as empty."""
    path = doc_metadata_path()
    try:
        return DocMetadata.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, ValueError):
        return DocMetadata()


def write_doc_metadata(metadata: DocMetadata) -> Path:
    path = doc_metadata_path()
    data = metadata.model_dump(by_alias=True, exclude_none=True)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise SettingsIOError(f"Failed to write documentation metadata: {e}") from e
    return path


def _record(commit_hash: str) -> DocRecord:
    return DocRecord(commitHash=commit_hash, timestamp=datetime.now(timezone.utc).isoformat())


def _relative_key(directory: Path) -> str:
    return os.path.relpath(Path(directory).resolve(), Path.cwd().resolve())


def update_project_doc_hash(commit_hash: str) -> None:
    metadata = read_doc_metadata()
    metadata.project = _record(commit_hash)
    write_doc_metadata(metadata)


def update_dir_doc_hash(directory: Path, commit_hash: str) -> None:
    metadata = read_doc_metadata()
    metadata.directories[_relative_key(directory)] = _record(commit_hash)
    write_doc_metadata(metadata)


def project_doc_record() -> DocRecord | None:
    return read_doc_metadata().project


def dir_doc_record(directory: Path) -> DocRecord | None:
    return read_doc_metadata().directories.get(_relative_key(directory))
