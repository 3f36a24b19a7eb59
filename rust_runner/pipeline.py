"""End-to-end run: scan, scaffold, install, run, clean up."""

from __future__ import annotations

import logging
from typing import Sequence

from rust_runner.config.model import RunnerConfig
from rust_runner.core.types import RunReport, SourceText
from rust_runner.project import install_dependencies, resolve_cache_wrapper, run_project, scaffold_project
from rust_runner.runtime.workspace import ephemeral_workspace
from rust_runner.scan import scan_dependencies, scan_directives
from rust_runner.toolchain import Cargo

logger = logging.getLogger(__name__)


def run_script(
    source: SourceText,
    *,
    config: RunnerConfig | None = None,
    cargo: Cargo | None = None,
    program_args: Sequence[str] = (),
) -> RunReport:
    """Run `source` as a throwaway Cargo project.

    Directive errors surface before any directory is created. Everything after
    that runs inside the ephemeral workspace, which is restored and removed
    whatever happens.

    Raises:
        DirectiveError, EnvironmentSetupError, ScaffoldError, RunError
    """

    cfg = config or RunnerConfig()
    cargo = cargo or Cargo(program=cfg.cargo)

    directives = scan_directives(
        source.text,
        marker=cfg.directive_marker,
        default_toolchain=cfg.default_toolchain,
    )
    dependencies = scan_dependencies(source.text)
    logger.info(
        "context_parsed",
        extra={
            "source": source.origin,
            "toolchain": directives.toolchain,
            "dependencies": sorted(dependencies),
        },
    )

    cache_wrapper = resolve_cache_wrapper(cfg.cache_wrapper)

    with ephemeral_workspace(prefix=cfg.workspace_prefix) as root:
        project = scaffold_project(
            root,
            source,
            directives,
            cargo=cargo,
            project_name=cfg.project_name,
            cache_wrapper=cache_wrapper,
        )
        warnings = install_dependencies(project, dependencies, cargo=cargo)
        run_project(project, cargo=cargo, program_args=program_args)

    return RunReport(directives=directives, dependencies=dependencies, warnings=warnings)
