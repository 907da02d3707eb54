"""
React Starter Generator - starter files for the selected libraries

Uses Jinja2 templates shipped with the package. Content varies only by
language (file suffix, non-null assertion) and by which libraries are
active. Every write replaces whatever is already at the path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    PackageLoader,
    StrictUndefined,
    TemplateError as JinjaTemplateError,
    select_autoescape,
)
from rich.console import Console

from react_starter.config import ToolConfig
from react_starter.errors import TemplateError
from react_starter.options import Library, ProjectOptions
from react_starter.runner import CommandRunner

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# GENERATED FILE TRACKING
# ═══════════════════════════════════════════════════════════════════════════


@dataclass
class TemplateFile:
    """A file the generator will write."""

    path: str  # Relative path from project directory
    template: str
    library: Library | None = None  # None for files written on every run


@dataclass
class GeneratedFile:
    """Represents a written file."""

    path: str
    content: str
    template: str | None = None


@dataclass
class GenerationResult:
    """Files written by the generator, in write order."""

    files: list[GeneratedFile] = field(default_factory=list)

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self.files]


# ═══════════════════════════════════════════════════════════════════════════
# JINJA ENVIRONMENT SETUP
# ═══════════════════════════════════════════════════════════════════════════


def create_jinja_env() -> Environment:
    """Create Jinja2 environment over the package templates."""
    return Environment(
        loader=PackageLoader("react_starter", "templates"),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_template(
    env: Environment,
    template_path: str,
    context: dict[str, Any] | None = None,
) -> str:
    """Render a Jinja2 template, raising TemplateError on failure."""
    try:
        template = env.get_template(template_path)
        return template.render(**(context or {}))
    except JinjaTemplateError as e:
        raise TemplateError(f"Cannot render {template_path}: {e}") from e


# ═══════════════════════════════════════════════════════════════════════════
# FILE PLAN
# ═══════════════════════════════════════════════════════════════════════════


def plan_files(options: ProjectOptions) -> list[TemplateFile]:
    """
    List the files a run writes, in write order.

    The App component is always last since its content depends on
    which of the other libraries were set up.
    """
    ts = options.suffix()
    tsx = options.suffix(jsx=True)
    files: list[TemplateFile] = []

    if options.uses(Library.TAILWIND):
        files += [
            TemplateFile("tailwind.config.js", "tailwind.config.js.j2", Library.TAILWIND),
            TemplateFile("src/index.css", "index.css.j2", Library.TAILWIND),
        ]

    if options.uses(Library.REDUX):
        files += [
            TemplateFile(f"src/redux/store{ts}", "store.j2", Library.REDUX),
            TemplateFile(f"src/redux/exampleSlice{ts}", "exampleSlice.j2", Library.REDUX),
        ]

    if options.uses(Library.REACT_ROUTER):
        files += [
            TemplateFile(f"src/pages/Home{tsx}", "Home.j2", Library.REACT_ROUTER),
            TemplateFile(f"src/pages/About{tsx}", "About.j2", Library.REACT_ROUTER),
        ]

    if options.uses(Library.QUERY):
        files.append(TemplateFile(f"src/main{tsx}", "main.j2", Library.QUERY))

    files.append(TemplateFile(f"src/App{tsx}", "App.j2"))
    return files


# ═══════════════════════════════════════════════════════════════════════════
# TEMPLATE WRITER
# ═══════════════════════════════════════════════════════════════════════════


# Setup order; the App component follows once all of these are done
SETUP_MESSAGES: dict[Library, tuple[str, str]] = {
    Library.TAILWIND: ("Configuring Tailwind CSS...", "✔ Tailwind CSS configured!"),
    Library.REDUX: ("Setting up Redux Toolkit...", "✔ Redux Toolkit configured!"),
    Library.REACT_ROUTER: ("Setting up React Router...", "✔ React Router configured!"),
    Library.QUERY: ("Setting up TanStack Query...", "✔ TanStack Query configured!"),
}


class TemplateWriter:
    """
    Writes starter files into a freshly scaffolded project.

    Tailwind is the only library that also needs an external command:
    `tailwindcss init -p` runs before its config file is written.
    """

    def __init__(
        self,
        config: ToolConfig,
        runner: CommandRunner,
        console: Console,
    ):
        self.config = config
        self.runner = runner
        self.console = console
        self.env = create_jinja_env()

    def generate(self, options: ProjectOptions, project_dir: Path) -> GenerationResult:
        """
        Write every planned file for the options.

        Args:
            options: Collected project options
            project_dir: Root of the scaffolded project

        Returns:
            GenerationResult with the written files
        """
        result = GenerationResult()
        context = self._create_context(options)
        planned = plan_files(options)

        for library, (start, done) in SETUP_MESSAGES.items():
            if not options.uses(library):
                continue
            self.console.print(f"[yellow]{start}[/yellow]")

            if library == Library.TAILWIND:
                self._init_tailwind(project_dir)

            for item in planned:
                if item.library == library:
                    self._write_template(project_dir, item, context, result)

            self.console.print(f"[green]{done}[/green]")

        for item in planned:
            if item.library is None:
                self._write_template(project_dir, item, context, result)

        return result

    def _create_context(self, options: ProjectOptions) -> dict[str, Any]:
        """Create template rendering context."""
        return {
            "project_name": options.project_name,
            "typescript": options.typescript,
            "tailwind": options.uses(Library.TAILWIND),
            "router": options.uses(Library.REACT_ROUTER),
            "redux": options.uses(Library.REDUX),
            "query": options.uses(Library.QUERY),
        }

    def _init_tailwind(self, project_dir: Path) -> None:
        self.runner.run([self.config.npx, "tailwindcss", "init", "-p"], cwd=project_dir)
        (project_dir / "src" / "styles").mkdir(parents=True, exist_ok=True)

    def _render_template(self, template_path: str, context: dict[str, Any]) -> str:
        return render_template(self.env, template_path, context)

    def _write_template(
        self,
        project_dir: Path,
        item: TemplateFile,
        context: dict[str, Any],
        result: GenerationResult,
    ) -> None:
        content = self._render_template(item.template, context)
        self._write_file(project_dir, item.path, content, result, item.template)

    def _write_file(
        self,
        project_dir: Path,
        relative_path: str,
        content: str,
        result: GenerationResult,
        template: str | None = None,
    ) -> None:
        """Write a generated file and track it."""
        full_path = project_dir / relative_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", relative_path)

        result.files.append(GeneratedFile(
            path=relative_path,
            content=content,
            template=template,
        ))
