from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import pytest


def pytest_configure() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


@dataclass
class FakeCargo:
    """Stands in for the `cargo` process.

    `init` creates a minimal project layout; statuses can be overridden per
    subcommand, or per crate for `add`.
    """

    init_status: int = 0
    run_status: int = 0
    add_status: dict[str, int] = field(default_factory=dict)
    calls: list[tuple[list[str], Path]] = field(default_factory=list)
    # Snapshot of files seen when `cargo run` is invoked.
    run_snapshot: dict[str, str] = field(default_factory=dict)

    def __call__(self, argv: Sequence[str], cwd: Path) -> int:
        argv = list(argv)
        self.calls.append((argv, cwd))
        sub = argv[1]
        if sub == "init":
            if self.init_status == 0:
                (cwd / "src").mkdir(parents=True, exist_ok=True)
                (cwd / "src" / "main.rs").write_text('fn main() {\n    println!("Hello, world!");\n}\n')
                (cwd / "Cargo.toml").write_text('[package]\nname = "rustrunner"\n')
            return self.init_status
        if sub == "add":
            return self.add_status.get(argv[2], 0)
        if sub == "run":
            for p in sorted(cwd.rglob("*")):
                if p.is_file():
                    self.run_snapshot[p.relative_to(cwd).as_posix()] = p.read_text()
            return self.run_status
        raise AssertionError(f"unexpected cargo call: {argv}")

    def subcommands(self) -> list[str]:
        return [argv[1] for argv, _ in self.calls]

    def added(self) -> list[str]:
        return [argv[2] for argv, _ in self.calls if argv[1] == "add"]


@pytest.fixture
def fake_cargo() -> FakeCargo:
    return FakeCargo()


@pytest.fixture(autouse=True)
def _no_cache_wrapper(monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep tests independent of whether sccache is installed on the host.
    monkeypatch.setattr("rust_runner.project.scaffold.shutil.which", lambda name: None)
