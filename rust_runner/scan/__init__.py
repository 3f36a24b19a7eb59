"""Lightweight static scanning of Rust source text."""

from __future__ import annotations

from .directives import DEFAULT_MARKER, scan_directives
from .imports import RESERVED_NAMES, scan_dependencies

__all__ = ["DEFAULT_MARKER", "RESERVED_NAMES", "scan_dependencies", "scan_directives"]
