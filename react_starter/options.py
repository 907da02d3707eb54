"""
React Starter Options - the choices collected from the user

A ProjectOptions value is built once from the interactive prompts and
read by every later step of the run. It is never persisted.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

import typer
from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════
# ENUMS
# ═══════════════════════════════════════════════════════════════════════════


class Library(str, Enum):
    """Optional add-ons, in the order they are prompted and installed."""

    TAILWIND = "tailwind"
    REACT_ROUTER = "reactRouter"
    REDUX = "redux"
    QUERY = "query"


LIBRARY_LABELS: dict[Library, str] = {
    Library.TAILWIND: "Tailwind CSS",
    Library.REACT_ROUTER: "React Router",
    Library.REDUX: "Redux Toolkit",
    Library.QUERY: "TanStack Query (React Query)",
}


# ═══════════════════════════════════════════════════════════════════════════
# PROJECT OPTIONS
# ═══════════════════════════════════════════════════════════════════════════


class ProjectOptions(BaseModel):
    """Options for a single scaffolding run"""

    project_name: str
    typescript: bool = False
    libraries: list[Library] = Field(default_factory=list)

    def uses(self, library: Library) -> bool:
        return library in self.libraries

    def suffix(self, jsx: bool = False) -> str:
        """File suffix for generated sources: .ts/.tsx or .js/.jsx"""
        base = ".ts" if self.typescript else ".js"
        return base + "x" if jsx else base

    @property
    def language(self) -> str:
        return "TypeScript" if self.typescript else "JavaScript"


# ═══════════════════════════════════════════════════════════════════════════
# PROMPTS
# ═══════════════════════════════════════════════════════════════════════════


def collect_options(
    default_name: str,
    prompt: Callable[..., str] = typer.prompt,
    confirm: Callable[..., bool] = typer.confirm,
) -> ProjectOptions:
    """
    Ask the user for the project name, language and libraries.

    Input is taken as given; an aborted prompt propagates to the caller.
    """
    project_name = prompt("Enter your project name:", default=default_name)
    typescript = confirm("Do you want to use TypeScript?", default=False)

    libraries = [
        library
        for library in Library
        if confirm(f"Include {LIBRARY_LABELS[library]}?", default=False)
    ]

    return ProjectOptions(
        project_name=project_name,
        typescript=typescript,
        libraries=libraries,
    )
