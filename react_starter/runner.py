"""
React Starter Runner - external command execution

Commands run to completion with no timeout. Only the exit status is
observed; output is passed through to the terminal or captured for
the error message, never parsed.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from react_starter.errors import CommandError

logger = logging.getLogger(__name__)


class CommandRunner:
    """Runs external commands, raising CommandError on failure."""

    def run(
        self,
        args: Sequence[str],
        cwd: Path | None = None,
        stream: bool = True,
    ) -> None:
        """
        Run a command and wait for it.

        Args:
            args: Command and arguments
            cwd: Working directory (defaults to the process cwd)
            stream: Pass output through to the terminal; when False it is
                captured and stderr is attached to any error
        """
        argv = list(args)
        logger.debug("Running %s (cwd=%s)", " ".join(argv), cwd or ".")

        try:
            result = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=not stream,
                text=True,
            )
        except FileNotFoundError as e:
            raise CommandError(argv) from e

        if result.returncode != 0:
            raise CommandError(argv, result.returncode, result.stderr or "")
