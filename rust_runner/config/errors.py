from __future__ import annotations

from rust_runner.core.errors import RunnerError


class ConfigError(RunnerError):
    """Raised when config loading or validation fails."""

    exit_code = 2
