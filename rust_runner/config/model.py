from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from rust_runner.config.errors import ConfigError
from rust_runner.config.loader import load_config


class RunnerConfig(BaseModel):
    """Typed runner settings.

    Every field has a default, so running without any config file works.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    cargo: str = "cargo"
    project_name: str = "rustrunner"
    workspace_prefix: str = "rustjunk"
    directive_marker: str = "rust-runner"
    default_toolchain: str = "stable"
    # "auto" | "off" | explicit program name/path
    cache_wrapper: str = "auto"
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    @field_validator("cache_wrapper", mode="before")
    @classmethod
    def _yaml_off(cls, v: Any) -> Any:
        # YAML 1.1 reads a bare `off` as False.
        if v is False:
            return "off"
        return v

    @field_validator(
        "cargo",
        "project_name",
        "workspace_prefix",
        "directive_marker",
        "default_toolchain",
        "cache_wrapper",
    )
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must be a non-empty string")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return level


def _format_validation_error(e: ValidationError) -> str:
    lines = ["Invalid runner config:"]
    for err in e.errors():
        where = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        lines.append(f"- {where}: {err.get('msg', 'invalid value')}")
    return "\n".join(lines)


def build_config(raw: Mapping[str, Any]) -> RunnerConfig:
    try:
        return RunnerConfig.model_validate(dict(raw))
    except ValidationError as e:
        raise ConfigError(_format_validation_error(e)) from e


def load_runner_config(paths: Sequence[Path], *, load_dotenv_file: bool = True) -> RunnerConfig:
    """Load and validate the runner config; no paths means built-in defaults."""

    if not paths:
        return RunnerConfig()
    return build_config(load_config(list(paths), load_dotenv_file=load_dotenv_file))
