"""
React Starter Installer - npm dependencies for the selected libraries
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from react_starter.config import ToolConfig
from react_starter.options import Library, ProjectOptions
from react_starter.runner import CommandRunner

logger = logging.getLogger(__name__)

# Library -> (runtime packages, dev packages, dev packages when typescript)
LIBRARY_PACKAGES: dict[Library, tuple[list[str], list[str], list[str]]] = {
    Library.TAILWIND: ([], ["tailwindcss", "postcss", "autoprefixer"], []),
    Library.REACT_ROUTER: (["react-router-dom"], [], ["@types/react-router-dom"]),
    Library.REDUX: (["@reduxjs/toolkit", "react-redux"], [], ["@types/react-redux"]),
    Library.QUERY: (["@tanstack/react-query"], [], []),
}

TYPESCRIPT_DEV_PACKAGES = ["@types/react", "@types/react-dom"]

# Created in every project regardless of the selected libraries
ALWAYS_CREATED_DIRS = ["src/components", "src/features"]


@dataclass
class DependencyPlan:
    """Packages to install, in install order."""

    runtime: list[str] = field(default_factory=list)
    dev: list[str] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.runtime and not self.dev


def plan_dependencies(options: ProjectOptions) -> DependencyPlan:
    """Build the runtime and dev package lists for the options."""
    plan = DependencyPlan()

    for library in Library:
        if not options.uses(library):
            continue
        runtime, dev, typed_dev = LIBRARY_PACKAGES[library]
        plan.runtime.extend(runtime)
        plan.dev.extend(dev)
        if options.typescript:
            plan.dev.extend(typed_dev)

    if options.typescript:
        plan.dev.extend(TYPESCRIPT_DEV_PACKAGES)

    return plan


def install_commands(plan: DependencyPlan, config: ToolConfig) -> list[list[str]]:
    commands = []
    if plan.runtime:
        commands.append([config.npm, "install", *plan.runtime])
    if plan.dev:
        commands.append([config.npm, "install", "--save-dev", *plan.dev])
    return commands


def install_dependencies(
    plan: DependencyPlan,
    config: ToolConfig,
    runner: CommandRunner,
    console: Console,
    project_dir: Path,
) -> None:
    """Install planned packages, then create the always-present source folders."""
    console.print("[yellow]Installing dependencies...[/yellow]")
    for command in install_commands(plan, config):
        runner.run(command, cwd=project_dir, stream=False)
    console.print("[green]✔ Dependencies installed![/green]")

    for relative in ALWAYS_CREATED_DIRS:
        (project_dir / relative).mkdir(parents=True, exist_ok=True)
        logger.debug("Created %s/", relative)
