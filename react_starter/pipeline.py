"""
React Starter Pipeline - the sequential run

    IDLE -> COLLECTING -> SCAFFOLDING -> INSTALLING_DEPS
         -> WRITING_TEMPLATES -> INITIALIZING_REPO -> DONE

Any failure moves to FAILED and raises StepFailed. Nothing is retried
and nothing already written is cleaned up.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator

import typer
from rich.console import Console

from react_starter.config import ToolConfig
from react_starter.errors import StepFailed
from react_starter.generator import GenerationResult, TemplateWriter, plan_files
from react_starter.installer import (
    ALWAYS_CREATED_DIRS,
    DependencyPlan,
    install_commands,
    install_dependencies,
    plan_dependencies,
)
from react_starter.options import Library, ProjectOptions, collect_options
from react_starter.repository import GITIGNORE_PATH, init_repository
from react_starter.runner import CommandRunner
from react_starter.scaffolder import create_base_project, scaffold_command

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    IDLE = "idle"
    COLLECTING = "collecting"
    SCAFFOLDING = "scaffolding"
    INSTALLING_DEPS = "installing_deps"
    WRITING_TEMPLATES = "writing_templates"
    INITIALIZING_REPO = "initializing_repo"
    DONE = "done"
    FAILED = "failed"


@dataclass
class RunReport:
    """Outcome of a completed run."""

    options: ProjectOptions
    project_dir: Path
    dependencies: DependencyPlan
    generation: GenerationResult

    @property
    def written_files(self) -> list[str]:
        return self.generation.paths


@dataclass
class PlannedRun:
    """What a run would do, without doing it."""

    options: ProjectOptions
    commands: list[list[str]] = field(default_factory=list)
    directories: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)


class StarterPipeline:
    """Runs the scaffolding stages in order."""

    def __init__(
        self,
        config: ToolConfig | None = None,
        runner: CommandRunner | None = None,
        console: Console | None = None,
    ):
        self.config = config or ToolConfig()
        self.runner = runner or CommandRunner()
        self.console = console or Console()
        self.writer = TemplateWriter(self.config, self.runner, self.console)
        self.stage = Stage.IDLE

    @contextmanager
    def _stage(self, stage: Stage) -> Iterator[None]:
        self.stage = stage
        logger.debug("Entering stage %s", stage.value)
        try:
            yield
        except Exception as e:
            self.stage = Stage.FAILED
            logger.debug("Stage %s failed: %s", stage.value, e)
            raise StepFailed(stage, e) from e

    def collect(
        self,
        prompt: Callable[..., str] = typer.prompt,
        confirm: Callable[..., bool] = typer.confirm,
    ) -> ProjectOptions:
        """Prompt for options. An aborted prompt propagates unwrapped."""
        self.stage = Stage.COLLECTING
        return collect_options(self.config.default_project_name, prompt, confirm)

    def run(self, options: ProjectOptions, cwd: Path | None = None) -> RunReport:
        """
        Scaffold, install, write templates and commit.

        The process working directory is changed into the new project
        once it exists and is left there.
        """
        cwd = cwd or Path.cwd()

        with self._stage(Stage.SCAFFOLDING):
            project_dir = create_base_project(
                options, self.config, self.runner, self.console, cwd
            )
            os.chdir(project_dir)

        with self._stage(Stage.INSTALLING_DEPS):
            plan = plan_dependencies(options)
            install_dependencies(plan, self.config, self.runner, self.console, project_dir)

        with self._stage(Stage.WRITING_TEMPLATES):
            generation = self.writer.generate(options, project_dir)

        with self._stage(Stage.INITIALIZING_REPO):
            generation.files.append(
                init_repository(self.config, self.runner, self.writer.env, project_dir)
            )

        self.stage = Stage.DONE
        return RunReport(
            options=options,
            project_dir=project_dir,
            dependencies=plan,
            generation=generation,
        )

    def preview(self, options: ProjectOptions) -> PlannedRun:
        """List the commands, directories and files a run would produce."""
        planned = PlannedRun(options=options)
        planned.commands.append(scaffold_command(options, self.config))
        planned.commands += install_commands(plan_dependencies(options), self.config)

        planned.directories = list(ALWAYS_CREATED_DIRS)
        if options.uses(Library.TAILWIND):
            planned.commands.append([self.config.npx, "tailwindcss", "init", "-p"])
            planned.directories.append("src/styles")

        planned.files = [f.path for f in plan_files(options)] + [GITIGNORE_PATH]
        planned.commands += [
            [self.config.git, "init"],
            [self.config.git, "add", "."],
            [self.config.git, "commit", "-m", self.config.commit_message],
        ]
        return planned
