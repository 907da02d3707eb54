"""
React Starter Repository - git initialization and first commit

Author identity is left to the user's git configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment

from react_starter.config import ToolConfig
from react_starter.generator import GeneratedFile, render_template
from react_starter.runner import CommandRunner

logger = logging.getLogger(__name__)

GITIGNORE_PATH = ".gitignore"
GITIGNORE_TEMPLATE = "gitignore.j2"


def init_repository(
    config: ToolConfig,
    runner: CommandRunner,
    env: Environment,
    project_dir: Path,
) -> GeneratedFile:
    """Init a repo, write .gitignore, stage everything and commit."""
    runner.run([config.git, "init"], cwd=project_dir)

    content = render_template(env, GITIGNORE_TEMPLATE)
    (project_dir / GITIGNORE_PATH).write_text(content, encoding="utf-8")
    logger.debug("Wrote %s", GITIGNORE_PATH)

    runner.run([config.git, "add", "."], cwd=project_dir)
    runner.run([config.git, "commit", "-m", config.commit_message], cwd=project_dir)
    return GeneratedFile(path=GITIGNORE_PATH, content=content, template=GITIGNORE_TEMPLATE)
