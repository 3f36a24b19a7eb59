from __future__ import annotations

import logging
from typing import Sequence

from rust_runner.core.errors import RunError
from rust_runner.toolchain import Cargo

from .scaffold import ScaffoldedProject

logger = logging.getLogger(__name__)


def run_project(
    project: ScaffoldedProject,
    *,
    cargo: Cargo,
    program_args: Sequence[str] = (),
) -> None:
    """Build and run the project; the program's own output is not captured."""

    try:
        status = cargo.run(project.root, program_args)
    except OSError as e:
        raise RunError(f"failed to run the program: {e}") from e

    if status != 0:
        raise RunError("failed to run the program", returncode=status)
    logger.debug("program_finished", extra={"status": status})
