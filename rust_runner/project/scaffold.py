"""Materialize a throwaway Cargo project around a single source file."""

from __future__ import annotations

import json
import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from rust_runner.core.errors import ScaffoldError
from rust_runner.core.types import DirectiveSet, SourceText
from rust_runner.toolchain import Cargo

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "rustrunner"
CACHE_WRAPPER_AUTO = "auto"
CACHE_WRAPPER_OFF = "off"
DEFAULT_CACHE_WRAPPER = "sccache"

ENTRY_POINT = Path("src") / "main.rs"
CARGO_CONFIG = Path(".cargo") / "config.toml"
TOOLCHAIN_PIN = Path("rust-toolchain")


@dataclass(frozen=True, slots=True)
class ScaffoldedProject:
    root: Path
    entry_point: Path
    toolchain_file: Path
    cargo_config: Path | None = None


def resolve_cache_wrapper(setting: str) -> Path | None:
    """Resolve the `cache_wrapper` setting to a binary path.

    - "auto": use `sccache` when it is on PATH.
    - "off": never use a wrapper.
    - anything else: an explicit program name or path.
    """

    if setting == CACHE_WRAPPER_OFF:
        return None

    program = DEFAULT_CACHE_WRAPPER if setting == CACHE_WRAPPER_AUTO else setting
    found = shutil.which(program)
    if found is None:
        if setting != CACHE_WRAPPER_AUTO:
            logger.warning("cache_wrapper_not_found", extra={"cache_wrapper": setting})
        return None
    return Path(found)


def render_cargo_config(wrapper: Path) -> str:
    # JSON string escaping is a valid TOML basic string.
    return f"[build]\nrustc-wrapper = {json.dumps(str(wrapper))}\n"


def scaffold_project(
    root: Path,
    source: SourceText,
    directives: DirectiveSet,
    *,
    cargo: Cargo,
    project_name: str = DEFAULT_PROJECT_NAME,
    cache_wrapper: Path | None = None,
) -> ScaffoldedProject:
    """Run `cargo init` in `root` and replace its files with ours.

    The cache wrapper config is written before anything else touches cargo
    again, so `cargo add` and `cargo run` both go through it.

    Raises:
        ScaffoldError: If `cargo init` fails or a project file cannot be written.
    """

    try:
        ok = cargo.init(root, name=project_name)
    except OSError as e:
        raise ScaffoldError(f"failed to init project: {e}") from e
    if not ok:
        raise ScaffoldError("failed to init project")

    cargo_config: Path | None = None
    entry_point = root / ENTRY_POINT
    toolchain_file = root / TOOLCHAIN_PIN
    try:
        if cache_wrapper is not None:
            cargo_config = root / CARGO_CONFIG
            cargo_config.parent.mkdir(parents=True, exist_ok=True)
            cargo_config.write_text(render_cargo_config(cache_wrapper), encoding="utf-8")
            logger.info("cache_wrapper_enabled", extra={"cache_wrapper": str(cache_wrapper)})

        entry_point.unlink()
        entry_point.write_text(source.text, encoding="utf-8", newline="")

        toolchain_file.write_text(directives.toolchain, encoding="utf-8")
    except OSError as e:
        raise ScaffoldError(f"failed to write project files: {e}") from e

    logger.debug(
        "project_scaffolded",
        extra={"project_root": str(root), "toolchain": directives.toolchain},
    )
    return ScaffoldedProject(
        root=root,
        entry_point=entry_point,
        toolchain_file=toolchain_file,
        cargo_config=cargo_config,
    )
