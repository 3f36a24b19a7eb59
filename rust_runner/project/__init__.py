"""Cargo project lifecycle inside the ephemeral workspace."""

from __future__ import annotations

from .install import install_dependencies
from .run import run_project
from .scaffold import ScaffoldedProject, resolve_cache_wrapper, scaffold_project

__all__ = [
    "ScaffoldedProject",
    "install_dependencies",
    "resolve_cache_wrapper",
    "run_project",
    "scaffold_project",
]
