from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from rust_runner import __version__
from rust_runner.config.loader import resolve_config_paths
from rust_runner.config.model import RunnerConfig, load_runner_config
from rust_runner.core.errors import RunError, RunnerError
from rust_runner.observability.logging import configure_logging
from rust_runner.pipeline import run_script
from rust_runner.scan import scan_dependencies, scan_directives
from rust_runner.source import SourceFile


logger = logging.getLogger(__name__)


def _split_program_args(argv: list[str]) -> tuple[list[str], list[str]]:
    """Everything after the first `--` goes to the Rust program."""

    if "--" in argv:
        i = argv.index("--")
        return argv[:i], argv[i + 1 :]
    return argv, []


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rust-runner",
        description="Run a single Rust source file as a script.",
        epilog="Arguments after `--` are passed to the program.",
    )

    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Rust source file (default: read from stdin)",
    )
    parser.add_argument("--config", type=Path, help="Path to a YAML config file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (e.g. DEBUG, INFO, WARNING); overrides the config",
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default=None,
        help="Log output format; overrides the config",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--print-config",
        action="store_true",
        help="Print the effective config as JSON and exit",
    )
    group.add_argument(
        "--print-context",
        action="store_true",
        help="Print the toolchain and dependencies found in the source and exit",
    )

    return parser


def _print_json(obj: object) -> None:
    sys.stdout.write(json.dumps(obj, ensure_ascii=False, indent=2))
    sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint referenced by pyproject.toml."""

    argv_list = list(argv) if argv is not None else sys.argv[1:]
    argv_list, program_args = _split_program_args(argv_list)

    parser = _build_parser()

    try:
        ns = parser.parse_args(argv_list)
    except SystemExit as e:
        # argparse has already printed help/usage to stdout/stderr.
        code = e.code
        return int(code) if isinstance(code, int) else 1

    # Log to stderr with CLI overrides until the config is known.
    configure_logging(level=ns.log_level or "INFO", fmt=ns.log_format or "text")

    try:
        config_paths = resolve_config_paths(ns.config)
        cfg = load_runner_config(config_paths)
        configure_logging(
            level=ns.log_level or cfg.log_level,
            fmt=ns.log_format or cfg.log_format,
        )
        logger.debug("config_loaded", extra={"config_files": [str(p) for p in config_paths]})

        if ns.print_config:
            _print_json(cfg.model_dump())
            return 0

        source = SourceFile.from_arg(ns.source).read()

        if ns.print_context:
            directives = scan_directives(
                source.text,
                marker=cfg.directive_marker,
                default_toolchain=cfg.default_toolchain,
            )
            _print_json(
                {
                    "source": source.origin,
                    "toolchain": directives.toolchain,
                    "dependencies": sorted(scan_dependencies(source.text)),
                }
            )
            return 0

        report = run_script(source, config=cfg, program_args=program_args)
        if report.warnings:
            logger.info(
                "run_finished_with_warnings",
                extra={"failed_crates": [w.crate for w in report.warnings]},
            )
        return 0

    except RunError as e:
        logger.error("run_error", extra={"error": str(e), "returncode": e.returncode})
        sys.stderr.write(f"{type(e).__name__}: {e}\n")
        return e.exit_code
    except RunnerError as e:
        logger.error("runner_error", extra={"error": str(e), "kind": type(e).__name__})
        sys.stderr.write(f"{type(e).__name__}: {e}\n")
        return e.exit_code
    except Exception as e:  # noqa: BLE001
        logger.exception("fatal_error")
        sys.stderr.write(f"Fatal error: {e}\n")
        return 1
