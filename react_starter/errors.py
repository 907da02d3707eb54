"""
Exceptions raised while scaffolding a project.

Every failure is a StarterError; the CLI is the only place that catches them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from react_starter.pipeline import Stage


class StarterError(Exception):
    """Base exception for react-starter."""


class ConfigError(StarterError):
    """Tool configuration could not be loaded."""


class TemplateError(StarterError):
    """A template could not be rendered."""


class CommandError(StarterError):
    """An external command failed or could not be started."""

    def __init__(
        self,
        args: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
    ):
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr.strip()

        cmd = " ".join(self.command)
        if returncode is None:
            message = f"Command not found: {cmd}"
        else:
            message = f"Command failed with exit code {returncode}: {cmd}"
        if self.stderr:
            message = f"{message}\n{self.stderr}"
        super().__init__(message)


class StepFailed(StarterError):
    """A pipeline stage failed; wraps the underlying error."""

    def __init__(self, stage: Stage, cause: BaseException):
        self.stage = stage
        self.cause = cause
        super().__init__(str(cause))
