"""Shared fixtures: an isolated home directory and project working directory."""

import json

import pytest


@pytest.fixture
def home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def project(tmp_path, monkeypatch, home):
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def write_settings_file():
    """Write raw JSON (or text) to ``<base>/.proompt/settings.json``."""

    def _write(base, data):
        d = base / ".proompt"
        d.mkdir(parents=True, exist_ok=True)
        path = d / "settings.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    return _write
