"""Cargo invocation.

This is the only module that spawns `cargo`. Every call names the project root
explicitly, waits for the child without a timeout, and reports success as a
bool. The child inherits stdin/stdout/stderr.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

logger = logging.getLogger(__name__)

# (argv, cwd) -> exit status
CommandRunner = Callable[[Sequence[str], Path], int]


def run_command(argv: Sequence[str], cwd: Path) -> int:
    """Run `argv` in `cwd` and return its exit status.

    Raises:
        OSError: If the program cannot be spawned.
    """

    return subprocess.run(list(argv), cwd=cwd, check=False).returncode


@dataclass(frozen=True, slots=True)
class Cargo:
    program: str = "cargo"
    runner: CommandRunner = field(default=run_command, repr=False)

    def _call(self, root: Path, *args: str) -> int:
        argv = [self.program, *args]
        logger.debug("cargo_invoke", extra={"argv": argv, "cwd": str(root)})
        status = self.runner(argv, root)
        logger.debug("cargo_exit", extra={"argv": argv, "status": status})
        return status

    def init(self, root: Path, *, name: str) -> bool:
        return self._call(root, "init", "--name", name) == 0

    def add(self, root: Path, crate: str) -> bool:
        return self._call(root, "add", crate) == 0

    def run(self, root: Path, program_args: Sequence[str] = ()) -> int:
        args = ["run"]
        if program_args:
            args += ["--", *program_args]
        return self._call(root, *args)
