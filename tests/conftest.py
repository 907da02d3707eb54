"""Shared fixtures for react-starter tests.

External commands are never executed here: ``FakeRunner`` records the argv
of every call and creates the project directory when asked to run
``npm create``, which is all later stages depend on.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Sequence

import pytest
from rich.console import Console

from react_starter.config import ToolConfig
from react_starter.errors import CommandError
from react_starter.options import Library, ProjectOptions
from react_starter.runner import CommandRunner


class FakeRunner(CommandRunner):
    """Records commands instead of running them."""

    def __init__(self, fail_on: Sequence[str] | None = None):
        self.calls: list[list[str]] = []
        self.cwds: list[Path | None] = []
        self.streamed: list[bool] = []
        self.fail_on = list(fail_on) if fail_on else None

    def run(self, args, cwd=None, stream=True):
        argv = list(args)
        self.calls.append(argv)
        self.cwds.append(cwd)
        self.streamed.append(stream)

        if self.fail_on and argv[: len(self.fail_on)] == self.fail_on:
            raise CommandError(argv, 1, "simulated failure")

        if argv[1:2] == ["create"] and cwd is not None:
            (Path(cwd) / argv[3]).mkdir(parents=True, exist_ok=True)

    def called(self, *prefix: str) -> bool:
        return any(call[: len(prefix)] == list(prefix) for call in self.calls)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def config() -> ToolConfig:
    return ToolConfig()


@pytest.fixture
def quiet_console() -> Console:
    """A console that writes to a buffer."""
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "my-app"
    path.mkdir()
    return path


@pytest.fixture
def all_libraries_ts() -> ProjectOptions:
    return ProjectOptions(
        project_name="my-app",
        typescript=True,
        libraries=list(Library),
    )


@pytest.fixture
def plain_js() -> ProjectOptions:
    return ProjectOptions(project_name="my-app")


@pytest.fixture
def failing_runner():
    """Factory for a runner that fails on commands starting with a prefix."""

    def _make(*prefix: str) -> FakeRunner:
        return FakeRunner(fail_on=prefix)

    return _make
