"""
React Starter - Interactive React project scaffolding

Creates a Vite React app, installs the selected libraries,
writes starter files for them and commits the result to git.
"""

__version__ = "1.2.0"

from react_starter.options import Library, ProjectOptions
from react_starter.pipeline import Stage, StarterPipeline

__all__ = [
    "Library",
    "ProjectOptions",
    "Stage",
    "StarterPipeline",
]
