"""Tests for launching the assistant CLI."""

import subprocess
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from proompt.core.config import ResolvedSettings
from proompt.core.errors import (
    ChildProcessError,
    ChildProcessFailedError,
    SpawnError,
    UnsupportedAssistantError,
)
from proompt.execution import build_invocation, execute


def _settings(llm="claude"):
    return ResolvedSettings(llm_cli=llm, output_format=[llm])


class TestBuildInvocation:
    def test_claude_takes_prompt_as_argument(self):
        assert build_invocation("claude", "hi") == ["claude", "hi"]

    def test_gemini_needs_interactive_flag(self):
        assert build_invocation("gemini", "hi") == ["gemini", "-i", "hi"]

    def test_unsupported(self):
        with pytest.raises(UnsupportedAssistantError, match="copilot"):
            build_invocation("copilot", "hi")


class TestExecute:
    def test_success(self):
        done = subprocess.CompletedProcess(["claude", "p"], 0)
        with patch("proompt.execution.executor.subprocess.run", return_value=done) as run:
            execute("p", _settings())
        run.assert_called_once_with(["claude", "p"])

    def test_gemini_invocation(self):
        done = subprocess.CompletedProcess([], 0)
        with patch("proompt.execution.executor.subprocess.run", return_value=done) as run:
            execute("prompt text", _settings("gemini"))
        assert run.call_args.args[0] == ["gemini", "-i", "prompt text"]

    def test_nonzero_exit(self, home, project, write_settings_file):
        path = write_settings_file(project, {"llmCli": "gemini"})
        before = path.read_text()
        failed = subprocess.CompletedProcess([], 2)
        with patch("proompt.execution.executor.subprocess.run", return_value=failed):
            with pytest.raises(ChildProcessFailedError) as exc:
                execute("p", _settings("gemini"))
        assert exc.value.code == 2
        assert "2" in str(exc.value)
        assert "gemini" in str(exc.value)
        assert path.read_text() == before

    def test_missing_executable(self):
        with patch(
            "proompt.execution.executor.subprocess.run",
            side_effect=FileNotFoundError(2, "No such file or directory"),
        ):
            with pytest.raises(SpawnError, match="claude") as exc:
                execute("p", _settings())
        assert isinstance(exc.value, ChildProcessError)

    def test_unsupported_never_spawns(self):
        with patch("proompt.execution.executor.subprocess.run") as run:
            with pytest.raises(UnsupportedAssistantError):
                execute("p", SimpleNamespace(llm_cli="copilot", output_format=["claude"]))
        run.assert_not_called()
