from __future__ import annotations

import os
from pathlib import Path

import pytest

from rust_runner.core.errors import EnvironmentSetupError
from rust_runner.runtime.workspace import ephemeral_workspace


def test_enters_and_restores(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    with ephemeral_workspace(prefix="rr-test-") as root:
        assert Path.cwd() == root.resolve() or Path.cwd() == root
        assert root.name.startswith("rr-test-")
        (root / "scratch.txt").write_text("x")

    assert Path.cwd() == tmp_path
    assert not root.exists()


def test_restores_when_body_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(RuntimeError, match="boom"):
        with ephemeral_workspace() as root:
            raise RuntimeError("boom")

    assert Path.cwd() == tmp_path
    assert not root.exists()


def test_unique_directories(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    with ephemeral_workspace() as a, ephemeral_workspace() as b:
        assert a != b


def test_mkdtemp_failure_is_environment_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    def _fail(**kwargs: object) -> str:
        raise PermissionError("denied")

    monkeypatch.setattr("rust_runner.runtime.workspace.tempfile.mkdtemp", _fail)

    with pytest.raises(EnvironmentSetupError):
        with ephemeral_workspace():
            pytest.fail("body must not run")

    assert Path.cwd() == tmp_path


def test_chdir_failure_removes_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    created: list[Path] = []
    real_mkdtemp = __import__("tempfile").mkdtemp

    def _mkdtemp(**kwargs: object) -> str:
        path = real_mkdtemp(dir=tmp_path, **kwargs)
        created.append(Path(path))
        return path

    def _chdir(path: object) -> None:
        raise PermissionError("denied")

    monkeypatch.setattr("rust_runner.runtime.workspace.tempfile.mkdtemp", _mkdtemp)
    monkeypatch.setattr("rust_runner.runtime.workspace.os.chdir", _chdir)

    with pytest.raises(EnvironmentSetupError):
        with ephemeral_workspace():
            pytest.fail("body must not run")

    assert created and not created[0].exists()
    assert os.getcwd() == str(tmp_path)
