"""
React Starter Config - external tool names and fixed values

Defaults can be overridden by a react-starter.yaml file and then by
REACT_STARTER_* environment variables. Configuration only changes how
external tools are invoked, never what files are generated.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from react_starter.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "react-starter.yaml"
CONFIG_PATH_ENV = "REACT_STARTER_CONFIG"

# Environment variable -> ToolConfig field
ENV_OVERRIDES: dict[str, str] = {
    "REACT_STARTER_NPM": "npm",
    "REACT_STARTER_NPX": "npx",
    "REACT_STARTER_GIT": "git",
    "REACT_STARTER_VITE_PACKAGE": "vite_package",
    "REACT_STARTER_COMMIT_MESSAGE": "commit_message",
    "REACT_STARTER_DEFAULT_NAME": "default_project_name",
}


class ToolConfig(BaseModel):
    """External executables and fixed values used during a run"""

    npm: str = "npm"
    npx: str = "npx"
    git: str = "git"
    vite_package: str = Field("vite@latest", alias="vitePackage")
    commit_message: str = Field("Initial commit", alias="commitMessage")
    default_project_name: str = Field("my-audvik-app", alias="defaultProjectName")

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "ToolConfig":
        """Parse YAML content into ToolConfig"""
        try:
            data = yaml.safe_load(yaml_content) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config: {e}") from e

    @classmethod
    def from_file(cls, path: str | Path) -> "ToolConfig":
        """Load config from a YAML file"""
        try:
            content = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        return cls.from_yaml(content)

    def with_env(self, environ: dict[str, str] | None = None) -> "ToolConfig":
        """Return a copy with REACT_STARTER_* environment overrides applied."""
        environ = os.environ if environ is None else environ

        overrides: dict[str, Any] = {}
        for var, field_name in ENV_OVERRIDES.items():
            if environ.get(var):
                overrides[field_name] = environ[var]

        if overrides:
            logger.debug("Environment overrides: %s", sorted(overrides))
        return self.model_copy(update=overrides)


def load_config(
    cwd: Path | None = None,
    environ: dict[str, str] | None = None,
) -> ToolConfig:
    """
    Resolve the tool config.

    Order: defaults, then the YAML file (REACT_STARTER_CONFIG or
    ./react-starter.yaml), then environment variables.
    """
    environ = os.environ if environ is None else environ
    cwd = cwd or Path.cwd()

    explicit = environ.get(CONFIG_PATH_ENV)
    path = Path(explicit) if explicit else cwd / CONFIG_FILENAME

    if explicit or path.is_file():
        logger.debug("Loading config from %s", path)
        config = ToolConfig.from_file(path)
    else:
        config = ToolConfig()

    return config.with_env(environ)
