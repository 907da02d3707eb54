"""
React Starter CLI - interactive React project creation

Usage:
    react-starter
    react-starter --dry-run
    react-starter --version
"""

from __future__ import annotations

import logging

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text
from rich.tree import Tree

from react_starter import __version__
from react_starter.config import load_config
from react_starter.options import LIBRARY_LABELS
from react_starter.pipeline import PlannedRun, RunReport, StarterPipeline

app = typer.Typer(
    name="react-starter",
    help=(
        "CLI to create a React starter project with Vite, Tailwind, React Router, "
        "Redux, TanStack Query, TypeScript, and Git"
    ),
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"react-starter-project {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    handler = RichHandler(console=err_console, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    package_logger = logging.getLogger("react_starter")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.handlers = [handler]


@app.command()
def create(
    version: bool = typer.Option(
        False,
        "--version", "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would be run and written without doing it",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Log every command and file write",
    ),
) -> None:
    """Create a React starter project interactively."""
    _setup_logging(verbose)
    rprint("[bright_blue]🚀 Welcome to Audvik React starter CLI[/bright_blue]")

    try:
        pipeline = StarterPipeline(load_config(), console=console)
        options = pipeline.collect()

        if dry_run:
            _show_preview(pipeline.preview(options))
            return

        report = pipeline.run(options)
    except typer.Abort:
        raise
    except Exception as e:
        err_console.print(f"❌ Error: {e}", style="red", markup=False, highlight=False)
        raise typer.Exit(1)

    _show_next_steps(report)


def _show_preview(planned: PlannedRun) -> None:
    """Show what would be generated."""
    options = planned.options
    tree = Tree(f"[bold]{options.project_name}[/bold] ({options.language})")

    libraries = tree.add("[blue]Libraries[/blue]")
    for library in options.libraries:
        libraries.add(LIBRARY_LABELS[library])
    if not options.libraries:
        libraries.add("[dim]none[/dim]")

    commands = tree.add("[blue]Commands[/blue]")
    for command in planned.commands:
        commands.add(Text(" ".join(command)))

    files = tree.add("[blue]Files[/blue]")
    for directory in planned.directories:
        files.add(f"[cyan]{directory}/[/cyan]")
    for path in planned.files:
        files.add(path)

    rprint(tree)


def _show_next_steps(report: RunReport) -> None:
    """Show next steps."""
    name = report.options.project_name
    steps = f"""
[bold]Navigate to your project folder:[/bold]
  cd {name}
[bold]Run the development server:[/bold]
  npm run dev
"""
    rprint(f"[bright_green]🎉 Project {name} is ready![/bright_green]")
    rprint(Panel(steps, title="Next steps"))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
