"""Configuration loading and schema.

- YAML config files, strict ${ENV_VAR} expansion (missing/empty env vars are errors)
- validated into a frozen pydantic model
"""

from __future__ import annotations

from rust_runner.config.errors import ConfigError
from rust_runner.config.loader import load_config, resolve_config_paths
from rust_runner.config.model import RunnerConfig, build_config, load_runner_config

__all__ = [
    "ConfigError",
    "RunnerConfig",
    "build_config",
    "load_config",
    "load_runner_config",
    "resolve_config_paths",
]
