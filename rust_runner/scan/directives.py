"""Directive scanning for the leading comment block.

A Rust script may configure the runner from its first comment lines:

    // rust-runner: toolchain=nightly
    use std::io;

Only the contiguous run of comment (and blank) lines at the top of the file is
looked at. The first line of real code ends scanning.
"""

from __future__ import annotations

import logging
import re

from rust_runner.core.errors import DirectiveError
from rust_runner.core.types import DEFAULT_TOOLCHAIN, DirectiveOption, DirectiveSet

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "rust-runner"


def _directive_pattern(marker: str) -> re.Pattern[str]:
    return re.compile(rf"^\s*//\s*{re.escape(marker)}:\s*(?P<option>.*)$")


def _parse_options(option_str: str, *, line: int) -> list[tuple[DirectiveOption, str]]:
    parsed: list[tuple[DirectiveOption, str]] = []
    for fragment in option_str.split(";"):
        name, sep, value = fragment.partition("=")
        if not sep:
            raise DirectiveError(f"invalid option string: {fragment!r}", line=line)

        option = DirectiveOption.parse(name.strip())
        if option is None:
            raise DirectiveError(f"unknown option: {name.strip()!r}", line=line)
        parsed.append((option, value.strip()))
    return parsed


def scan_directives(
    text: str,
    *,
    marker: str = DEFAULT_MARKER,
    default_toolchain: str = DEFAULT_TOOLCHAIN,
) -> DirectiveSet:
    """Collect `// <marker>: name=value;...` directives from the leading comments.

    Later occurrences of an option override earlier ones.

    Raises:
        DirectiveError: On a fragment without `=` or an unknown option name.
    """

    pattern = _directive_pattern(marker)
    options: dict[DirectiveOption, str] = {}

    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        if not line.lstrip().startswith("//"):
            break

        match = pattern.match(line)
        if match is None:
            continue

        for option, value in _parse_options(match.group("option"), line=lineno):
            options[option] = value

    directives = DirectiveSet(options=options, default_toolchain=default_toolchain)
    logger.debug(
        "directives_scanned",
        extra={"options": {k.value: v for k, v in options.items()}, "toolchain": directives.toolchain},
    )
    return directives
