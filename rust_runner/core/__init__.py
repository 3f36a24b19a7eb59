"""Project core.

This package hosts the stable, non-domain-specific building blocks (errors and
shared value types).
"""

from __future__ import annotations

from .errors import (
    DirectiveError,
    EnvironmentSetupError,
    InputError,
    RunError,
    RunnerError,
    ScaffoldError,
)
from .types import DependencyWarning, DirectiveOption, DirectiveSet, RunReport, SourceText

__all__ = [
    "DependencyWarning",
    "DirectiveError",
    "DirectiveOption",
    "DirectiveSet",
    "EnvironmentSetupError",
    "InputError",
    "RunError",
    "RunReport",
    "RunnerError",
    "ScaffoldError",
    "SourceText",
]
