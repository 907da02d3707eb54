"""
React Starter Scaffolder - base project creation via Vite
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from react_starter.config import ToolConfig
from react_starter.options import ProjectOptions
from react_starter.runner import CommandRunner

# typescript flag -> Vite template
VITE_TEMPLATES: dict[bool, str] = {
    False: "react",
    True: "react-ts",
}


def scaffold_command(options: ProjectOptions, config: ToolConfig) -> list[str]:
    template = VITE_TEMPLATES[options.typescript]
    return [
        config.npm, "create", config.vite_package, options.project_name,
        "--", "--template", template,
    ]


def create_base_project(
    options: ProjectOptions,
    config: ToolConfig,
    runner: CommandRunner,
    console: Console,
    cwd: Path,
) -> Path:
    """Create the Vite React app and return its directory."""
    console.print(
        f"[yellow]Creating Vite React {options.language} app: "
        f"{options.project_name}...[/yellow]"
    )
    runner.run(scaffold_command(options, config), cwd=cwd)
    console.print("[green]✔ Vite React app created![/green]")

    return cwd / options.project_name
