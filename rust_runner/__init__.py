"""rust-runner: run a single Rust source file as a script.

A throwaway Cargo project is synthesized around the file, its `use`d crates are
added, and `cargo run` is invoked. The project is removed afterwards.
"""

from __future__ import annotations

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
