from __future__ import annotations

import re

# Only the first path segment is captured: `use serde::Deserialize;` -> serde.
# Brace groups, aliases and `use ::crate` forms are not parsed.
_USE_RE = re.compile(r"^\s*use\s+(?P<crate>\w+)")

RESERVED_NAMES = frozenset({"std", "crate", "self", "super"})


def scan_dependencies(text: str) -> frozenset[str]:
    """Return the crate names `use`d anywhere in `text`.

    Names that refer to the standard library or the current crate are dropped.
    """

    found: set[str] = set()
    for line in text.splitlines():
        match = _USE_RE.match(line)
        if match is not None:
            found.add(match.group("crate"))

    return frozenset(found - RESERVED_NAMES)
