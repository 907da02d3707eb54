"""Tests for the react-starter command line."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.logging import RichHandler
from typer.testing import CliRunner

from react_starter import __version__
from react_starter.cli import app
from react_starter.config import CONFIG_PATH_ENV, ENV_OVERRIDES
from react_starter.errors import CommandError, StepFailed
from react_starter.generator import GenerationResult
from react_starter.installer import DependencyPlan
from react_starter.options import Library, ProjectOptions
from react_starter.pipeline import RunReport, Stage

runner = CliRunner()

# name, typescript, then one answer per library in prompt order
ANSWERS = "shop\ny\ny\nn\ny\nn\n"


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    for var in [CONFIG_PATH_ENV, *ENV_OVERRIDES]:
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_package_logger():
    """The CLI reconfigures the react_starter logger; undo it after each test."""
    package_logger = logging.getLogger("react_starter")
    level, handlers = package_logger.level, list(package_logger.handlers)
    yield package_logger
    package_logger.setLevel(level)
    package_logger.handlers = handlers


def _report(options: ProjectOptions, tmp_path: Path) -> RunReport:
    return RunReport(
        options=options,
        project_dir=tmp_path / options.project_name,
        dependencies=DependencyPlan(),
        generation=GenerationResult(),
    )


class TestVersion:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"react-starter-project {__version__}" in result.output


class TestCreate:
    def test_success(self, isolated: Path) -> None:
        with patch("react_starter.cli.StarterPipeline.run") as run:
            run.side_effect = lambda options: _report(options, isolated)
            result = runner.invoke(app, [], input=ANSWERS)

        assert result.exit_code == 0, result.output
        options = run.call_args.args[0]
        assert options == ProjectOptions(
            project_name="shop",
            typescript=True,
            libraries=[Library.TAILWIND, Library.REDUX],
        )
        assert "Welcome to Audvik React starter CLI" in result.output
        assert "Project shop is ready!" in result.output
        assert "npm run dev" in result.output

    def test_default_name_from_env(self, monkeypatch: pytest.MonkeyPatch, isolated: Path) -> None:
        monkeypatch.setenv("REACT_STARTER_DEFAULT_NAME", "from-env")

        with patch("react_starter.cli.StarterPipeline.run") as run:
            run.side_effect = lambda options: _report(options, isolated)
            result = runner.invoke(app, [], input="\n\n\n\n\n\n")

        assert result.exit_code == 0, result.output
        assert run.call_args.args[0].project_name == "from-env"
        assert run.call_args.args[0].libraries == []

    def test_failure_exits_with_status_1(self) -> None:
        error = StepFailed(
            Stage.SCAFFOLDING,
            CommandError(["npm", "create", "vite@latest"], 1),
        )
        with patch("react_starter.cli.StarterPipeline.run", side_effect=error):
            result = runner.invoke(app, [], input=ANSWERS)

        assert result.exit_code == 1
        assert "Error: Command failed with exit code 1: npm create vite@latest" in result.output
        assert "is ready" not in result.output

    def test_scaffold_failure_runs_nothing_else(self) -> None:
        calls: list[list[str]] = []

        def fake_run(self, args, cwd=None, stream=True):
            calls.append(list(args))
            raise CommandError(args, 2)

        with patch("react_starter.runner.CommandRunner.run", fake_run):
            result = runner.invoke(app, [], input=ANSWERS)

        assert result.exit_code == 1
        assert len(calls) == 1
        assert calls[0][:2] == ["npm", "create"]

    def test_invalid_config_file(self, isolated: Path) -> None:
        (isolated / "react-starter.yaml").write_text("unknown: 1\n")

        result = runner.invoke(app, [], input=ANSWERS)

        assert result.exit_code == 1
        assert "Invalid config" in result.output

    def test_dry_run(self) -> None:
        with patch("react_starter.runner.CommandRunner.run") as run:
            result = runner.invoke(app, ["--dry-run"], input=ANSWERS)

        assert result.exit_code == 0, result.output
        run.assert_not_called()
        assert "npm create vite@latest shop -- --template react-ts" in result.output
        assert "src/redux/store.ts" in result.output
        assert "src/App.tsx" in result.output
        assert "Redux Toolkit" in result.output

    def test_unexpected_error_exits_with_status_1(self) -> None:
        with patch(
            "react_starter.runner.subprocess.run",
            side_effect=ValueError("embedded null byte"),
        ):
            result = runner.invoke(app, [], input="bad\x00name\nn\nn\nn\nn\nn\n")

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "Error: embedded null byte" in result.output

    def test_aborted_prompt_is_not_reported_as_error(self) -> None:
        result = runner.invoke(app, [], input="")

        assert result.exit_code == 1
        assert "Error:" not in result.output


def _failed_scaffold() -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=1, stdout="", stderr="")


class TestLogging:
    def test_default_level_is_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch("react_starter.runner.subprocess.run", return_value=_failed_scaffold()):
            result = runner.invoke(app, [], input=ANSWERS)

        assert result.exit_code == 1
        package_logger = logging.getLogger("react_starter")
        assert package_logger.level == logging.WARNING
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0], RichHandler)
        assert not any("Running npm create" in r.getMessage() for r in caplog.records)

    def test_verbose_logs_commands(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch("react_starter.runner.subprocess.run", return_value=_failed_scaffold()):
            result = runner.invoke(app, ["--verbose"], input=ANSWERS)

        assert result.exit_code == 1
        assert logging.getLogger("react_starter").level == logging.DEBUG

        messages = [
            r.getMessage() for r in caplog.records if r.name == "react_starter.runner"
        ]
        assert any(
            m.startswith("Running npm create vite@latest shop -- --template react-ts")
            for m in messages
        )
        assert all(
            r.levelno == logging.DEBUG for r in caplog.records if r.name == "react_starter.runner"
        )

    def test_repeated_runs_keep_one_handler(self) -> None:
        with patch("react_starter.cli.StarterPipeline.run", side_effect=StepFailed(
            Stage.SCAFFOLDING, CommandError(["npm"], 1)
        )):
            runner.invoke(app, [], input=ANSWERS)
            runner.invoke(app, ["-v"], input=ANSWERS)

        assert len(logging.getLogger("react_starter").handlers) == 1
