"""Tests for command modules: registry, argument validation, prompt pipeline, config."""

import json
from unittest.mock import patch

import click
import pytest

from proompt.commands import (
    COMMAND_MODULES,
    CommandArgument,
    CommandModule,
    get_command_module,
    run_proompt,
    to_click_command,
    validate_args,
)
from proompt.commands.schemas import LyraArgs, PlanArgs
from proompt.core.errors import ValidationError


@pytest.fixture
def launched():
    """Capture (prompt, settings) instead of spawning the assistant."""
    calls = []
    with patch(
        "proompt.commands.module.execute",
        side_effect=lambda prompt, settings: calls.append((prompt, settings)),
    ):
        yield calls


class TestRegistry:
    def test_names_unique(self):
        names = [m.name for m in COMMAND_MODULES]
        assert len(names) == len(set(names))

    def test_expected_commands(self):
        names = {m.name for m in COMMAND_MODULES}
        assert {
            "config",
            "lyra",
            "generate-plan",
            "validate-plan",
            "execute-plan",
            "document-project",
            "document-dir",
            "document-dirs",
        } <= names

    def test_lookup(self):
        assert get_command_module("lyra").description
        assert get_command_module("nope") is None

    def test_prompt_commands_accept_llm_override(self):
        for m in COMMAND_MODULES:
            names = [a.name for a in m.all_arguments]
            assert ("llm-cli" in names) == (m.name != "config")

    def test_output_format_only_on_documentation_commands(self):
        for m in COMMAND_MODULES:
            names = [a.name for a in m.all_arguments]
            assert ("output-format" in names) == m.name.startswith("document-")


class TestCommandArgument:
    def test_flag_with_alias(self):
        assert CommandArgument("plan-path", "d", alias="i").flag == "-i, --plan-path"

    def test_flag_positional(self):
        assert CommandArgument("plan-path", "d", positional=True).flag == "<plan-path>"

    def test_matches_camel_and_snake(self):
        arg = CommandArgument("draft-plan-path", "d")
        assert arg.matches("draftPlanPath")
        assert arg.matches("draft_plan_path")
        assert not arg.matches("planPath")


class TestValidateArgs:
    def test_missing_required(self):
        module = get_command_module("execute-plan")
        with pytest.raises(ValidationError) as exc:
            validate_args(module, {"plan_path": None, "llm_cli": None})
        assert module.find_argument(exc.value.issues[0].field).name == "plan-path"

    def test_empty_required(self):
        with pytest.raises(ValidationError):
            validate_args(get_command_module("execute-plan"), {"plan_path": ""})

    def test_valid(self):
        args = validate_args(get_command_module("execute-plan"), {"plan_path": "plan.md"})
        assert isinstance(args, PlanArgs)
        assert args.template_variables() == {"planPath": "plan.md"}


class TestRunProompt:
    def test_renders_arguments_and_launches(self, project, launched):
        module = get_command_module("validate-plan")
        run_proompt(module, {"plan_path": "docs/plan.md", "llm_cli": None})
        prompt, settings = launched[0]
        assert "`docs/plan.md`" in prompt
        assert "{{planPath}}" not in prompt
        assert settings.llm_cli == "claude"

    def test_llm_override(self, project, write_settings_file, launched):
        write_settings_file(project, {"llmCli": "claude"})
        run_proompt(get_command_module("lyra"), {"llm_cli": "gemini"})
        assert launched[0][1].llm_cli == "gemini"

    def test_output_format_override(self, project, launched):
        module = get_command_module("document-codebase")
        run_proompt(module, {"start_path": "libs", "output_format": "claude,gemini"})
        prompt, settings = launched[0]
        assert settings.output_format == ["claude", "gemini"]
        assert "Create identical `CLAUDE.md` and `GEMINI.md` files" in prompt

    def test_invalid_override_does_not_launch(self, project, launched):
        with pytest.raises(ValidationError):
            run_proompt(get_command_module("document-codebase"), {"start_path": "x", "output_format": "bogus"})
        assert launched == []

    def test_custom_module(self, project, launched):
        module = CommandModule(
            name="hello",
            description="say hello",
            args_schema=LyraArgs,
            template="hello {{ outputFileList }} {{missing}}",
        )
        module.run({})
        assert launched[0][0] == "hello CLAUDE.md {{missing}}"


class TestClickCommand:
    def _invoke(self, module, args):
        from click.testing import CliRunner

        group = click.Group("proompt", commands=[to_click_command(module)])
        return CliRunner().invoke(group, [module.name, *args])

    def test_missing_required_lists_flag(self, project, launched):
        result = self._invoke(get_command_module("execute-plan"), [])
        assert result.exit_code == 1
        assert "--plan-path" in result.output
        assert launched == []

    def test_positional_argument(self, project, launched):
        result = self._invoke(get_command_module("generate-plan"), ["draft.md"])
        assert result.exit_code == 0, result.output
        assert "`draft.md`" in launched[0][0]

    def test_invalid_llm_cli_exits_1(self, project, launched):
        result = self._invoke(get_command_module("lyra"), ["-L", "copilot"])
        assert result.exit_code == 1
        assert "--llm-cli" in result.output

    def test_child_failure_exits_1(self, project):
        from proompt.core.errors import ChildProcessFailedError

        with patch(
            "proompt.commands.module.execute",
            side_effect=ChildProcessFailedError("claude", 2),
        ):
            result = self._invoke(get_command_module("lyra"), [])
        assert result.exit_code == 1
        assert "exit code 2" in result.output


class TestConfigCommand:
    def _run(self, **kwargs):
        get_command_module("config").run(kwargs)

    def test_set_project_llm(self, project):
        self._run(project=True, set_llm_cli="gemini")
        data = json.loads((project / ".proompt" / "settings.json").read_text())
        assert data == {"llmCli": "gemini"}

    def test_set_global_format(self, home, project):
        self._run(**{"global": True, "set_output_format": "claude, gemini"})
        data = json.loads((home / ".proompt" / "settings.json").read_text())
        assert data == {"llmCli": "claude", "outputFormat": ["claude", "gemini"]}

    def test_set_llm_keeps_existing_format(self, project, write_settings_file):
        write_settings_file(project, {"llmCli": "claude", "outputFormat": ["claude", "gemini"]})
        self._run(project=True, set_llm_cli="gemini")
        data = json.loads((project / ".proompt" / "settings.json").read_text())
        assert data == {"llmCli": "gemini", "outputFormat": ["claude", "gemini"]}

    def test_invalid_format_writes_nothing(self, project):
        with pytest.raises(ValidationError, match="Valid options"):
            self._run(project=True, set_llm_cli="gemini", set_output_format="gemini,nope")
        assert not (project / ".proompt").exists()

    def test_invalid_llm(self, project):
        with pytest.raises(ValidationError):
            self._run(project=True, set_llm_cli="copilot")

    def test_both_scopes_rejected(self, project):
        with pytest.raises(ValidationError, match="not both"):
            self._run(**{"global": True, "project": True, "set_llm_cli": "claude"})

    def test_set_without_scope_rejected(self, project):
        with pytest.raises(ValidationError):
            self._run(set_llm_cli="gemini")

    def test_show_project_falls_back_to_global(self, home, project, write_settings_file, capsys):
        write_settings_file(home, {"llmCli": "gemini"})
        self._run(project=True)
        out = capsys.readouterr().out
        assert "No project configuration file found." in out
        assert "gemini (from global settings)" in out

    def test_show_global_defaults(self, home, project, capsys):
        self._run(**{"global": True})
        out = capsys.readouterr().out
        assert "No global configuration file found." in out
        assert "claude (default)" in out

    def test_show_effective(self, project, write_settings_file, capsys):
        write_settings_file(project, {"llmCli": "gemini", "outputFormat": ["claude", "gemini"]})
        self._run()
        out = capsys.readouterr().out
        assert "Effective configuration:" in out
        assert "claude, gemini" in out

    def test_show_project_file(self, project, write_settings_file, capsys):
        write_settings_file(project, {"llmCli": "gemini"})
        self._run(project=True)
        out = capsys.readouterr().out
        assert "Project configuration (from" in out
        assert "LLM CLI: gemini" in out
        assert "Output format: gemini" in out

    def test_show_global_file(self, home, project, write_settings_file, capsys):
        write_settings_file(home, {"llmCli": "claude", "outputFormat": ["gemini"]})
        self._run(**{"global": True})
        out = capsys.readouterr().out
        assert "Global configuration (from" in out
        assert "Output format: gemini" in out
