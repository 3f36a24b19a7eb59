"""Ephemeral workspace: a temp directory that is also the current directory.

The directory and the working-directory switch are one resource. Leaving the
`with` block restores the previous directory first, then deletes the temp tree,
on every exit path.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from rust_runner.core.errors import EnvironmentSetupError

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "rustjunk"


def _remove_tree(root: Path) -> None:
    try:
        shutil.rmtree(root)
    except OSError as e:
        logger.warning("workspace_cleanup_failed", extra={"workspace": str(root), "error": str(e)})


@contextmanager
def ephemeral_workspace(*, prefix: str = DEFAULT_PREFIX) -> Iterator[Path]:
    """Create a unique temp directory, `chdir` into it, and yield its path.

    Raises:
        EnvironmentSetupError: If the directory cannot be created or entered,
            or the previous directory cannot be restored.
    """

    try:
        previous = Path.cwd()
    except OSError as e:
        raise EnvironmentSetupError(f"cannot determine current directory: {e}") from e

    try:
        root = Path(tempfile.mkdtemp(prefix=prefix))
    except OSError as e:
        raise EnvironmentSetupError(f"failed to create temporary directory: {e}") from e

    try:
        os.chdir(root)
    except OSError as e:
        _remove_tree(root)
        raise EnvironmentSetupError(f"failed to enter {root}: {e}") from e

    logger.debug("workspace_entered", extra={"workspace": str(root), "previous": str(previous)})
    try:
        yield root
    finally:
        try:
            os.chdir(previous)
        except OSError as e:
            raise EnvironmentSetupError(f"failed to restore working directory {previous}: {e}") from e
        finally:
            _remove_tree(root)
            logger.debug("workspace_removed", extra={"workspace": str(root)})
