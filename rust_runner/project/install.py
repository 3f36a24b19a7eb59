from __future__ import annotations

import logging
from typing import Iterable

from rust_runner.core.types import DependencyWarning
from rust_runner.toolchain import Cargo

from .scaffold import ScaffoldedProject

logger = logging.getLogger(__name__)


def install_dependencies(
    project: ScaffoldedProject,
    dependencies: Iterable[str],
    *,
    cargo: Cargo,
) -> list[DependencyWarning]:
    """`cargo add` each dependency; a failure is recorded and skipped.

    Returns the warnings for crates that could not be added.
    """

    warnings: list[DependencyWarning] = []
    for crate in sorted(dependencies):
        logger.info("dependency_adding", extra={"crate": crate})
        try:
            ok = cargo.add(project.root, crate)
            reason = "cargo add failed"
        except OSError as e:
            ok = False
            reason = str(e)

        if not ok:
            logger.warning(
                "dependency_add_failed",
                extra={"crate": crate, "reason": reason},
            )
            warnings.append(DependencyWarning(crate=crate, reason=reason))

    return warnings
