from __future__ import annotations

import pytest

from rust_runner.core.errors import DirectiveError
from rust_runner.core.types import DirectiveOption
from rust_runner.scan.directives import scan_directives


def test_no_comment_block_defaults_to_stable() -> None:
    d = scan_directives("fn main() {}\n")
    assert d.toolchain == "stable"
    assert dict(d.options) == {}


def test_empty_text_defaults_to_stable() -> None:
    assert scan_directives("").toolchain == "stable"


def test_toolchain_directive_is_read() -> None:
    d = scan_directives("// rust-runner: toolchain=1.70\nfn main(){}")
    assert d.toolchain == "1.70"
    assert dict(d.options) == {DirectiveOption.TOOLCHAIN: "1.70"}


def test_blank_lines_and_plain_comments_are_skipped() -> None:
    src = "\n// a normal comment\n\n   // rust-runner: toolchain=nightly\nfn main() {}\n"
    assert scan_directives(src).toolchain == "nightly"


def test_later_directive_wins() -> None:
    src = (
        "// rust-runner: toolchain=1.60;toolchain=1.65\n"
        "// rust-runner: toolchain=beta\n"
        "fn main() {}\n"
    )
    assert scan_directives(src).toolchain == "beta"


def test_directive_after_code_is_ignored() -> None:
    src = "use std::io;\n// rust-runner: toolchain=nightly\n"
    assert scan_directives(src).toolchain == "stable"


def test_malformed_directive_after_code_is_ignored() -> None:
    src = "fn main() {}\n// rust-runner: toolchain\n"
    assert scan_directives(src).toolchain == "stable"


@pytest.mark.parametrize(
    "options",
    ["toolchain", "toolchain=1.70;nightly", "toolchain=1.70;", "nightly;toolchain=1.70"],
)
def test_fragment_without_equals_is_error(options: str) -> None:
    with pytest.raises(DirectiveError) as ei:
        scan_directives(f"// rust-runner: {options}\nfn main() {{}}\n")
    assert "invalid option string" in str(ei.value)


def test_unknown_option_is_error() -> None:
    with pytest.raises(DirectiveError) as ei:
        scan_directives("// rust-runner: edition=2021\n")
    assert "unknown option" in str(ei.value)
    assert "edition" in str(ei.value)


def test_error_reports_line_number() -> None:
    with pytest.raises(DirectiveError) as ei:
        scan_directives("// header\n// rust-runner: bogus=1\n")
    assert ei.value.line == 2


def test_custom_marker_and_default() -> None:
    src = "// tool: toolchain=1.70\nfn main(){}"
    assert scan_directives(src, marker="tool").toolchain == "1.70"
    assert scan_directives(src).toolchain == "stable"
    assert scan_directives("fn main(){}", default_toolchain="beta").toolchain == "beta"


def test_value_keeps_everything_after_first_equals() -> None:
    d = scan_directives("// rust-runner: toolchain=nightly-2024-01-01=x\n")
    assert d.toolchain == "nightly-2024-01-01=x"
