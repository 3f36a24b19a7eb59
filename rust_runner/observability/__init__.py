from __future__ import annotations

from .logging import JsonFormatter, KeyValueFormatter, configure_logging

__all__ = ["JsonFormatter", "KeyValueFormatter", "configure_logging"]
