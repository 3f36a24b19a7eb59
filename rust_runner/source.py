from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from rust_runner.core.errors import InputError
from rust_runner.core.types import SourceText

STDIN_ARG = "-"


@dataclass(frozen=True, slots=True)
class SourceFile:
    """Where the program comes from: a file path, or stdin when `path` is None."""

    path: Path | None = None

    @classmethod
    def from_arg(cls, arg: str | None) -> SourceFile:
        if arg is None or arg == STDIN_ARG:
            return cls()
        return cls(Path(arg))

    def read(self, *, stdin: TextIO | None = None) -> SourceText:
        if self.path is None:
            stream = stdin if stdin is not None else sys.stdin
            # Read bytes where possible; text mode would translate CRLF.
            raw = getattr(stream, "buffer", None)
            try:
                text = raw.read().decode("utf-8") if raw is not None else stream.read()
                return SourceText(text=text)
            except (OSError, UnicodeDecodeError) as e:
                raise InputError(f"failed to read standard input: {e}") from e

        try:
            text = self.path.read_bytes().decode("utf-8")
        except FileNotFoundError as e:
            raise InputError("no such file", path=str(self.path)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"failed to read source: {e}", path=str(self.path)) from e
        return SourceText(text=text, origin=str(self.path))
