from __future__ import annotations


class RunnerError(Exception):
    """Base exception for this project.

    `exit_code` is the process status the CLI reports for this error kind.
    """

    exit_code: int = 1


class InputError(RunnerError):
    """Raised when the source program cannot be read."""

    exit_code = 2

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class DirectiveError(RunnerError):
    """Raised for a malformed or unknown `// rust-runner:` directive."""

    exit_code = 2

    def __init__(self, message: str, *, line: int | None = None):
        super().__init__(f"line {line}: {message}" if line is not None else message)
        self.line = line


class EnvironmentSetupError(RunnerError):
    """Raised when the temporary workspace cannot be created, entered or left."""


class ScaffoldError(RunnerError):
    """Raised when `cargo init` fails or project files cannot be written."""


class RunError(RunnerError):
    """Raised when `cargo run` does not succeed."""

    def __init__(self, message: str, *, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode
