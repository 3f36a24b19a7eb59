from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

DEFAULT_TOOLCHAIN = "stable"


@dataclass(frozen=True, slots=True)
class SourceText:
    """The whole input program, read once."""

    text: str
    origin: str = "<stdin>"


class DirectiveOption(str, Enum):
    """Option names accepted in a `// rust-runner:` directive."""

    TOOLCHAIN = "toolchain"

    @classmethod
    def parse(cls, name: str) -> DirectiveOption | None:
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class DirectiveSet:
    options: Mapping[DirectiveOption, str] = field(default_factory=dict)
    default_toolchain: str = DEFAULT_TOOLCHAIN

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    @property
    def toolchain(self) -> str:
        return self.options.get(DirectiveOption.TOOLCHAIN, self.default_toolchain)


@dataclass(frozen=True, slots=True)
class DependencyWarning:
    """A crate that could not be added; recorded instead of raised."""

    crate: str
    reason: str


@dataclass(frozen=True, slots=True)
class RunReport:
    directives: DirectiveSet
    dependencies: frozenset[str]
    warnings: list[DependencyWarning] = field(default_factory=list)
