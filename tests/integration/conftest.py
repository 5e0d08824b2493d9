from collections.abc import Callable
from pathlib import Path

import pytest


def _write_lines(path: Path, lines: list[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    (tmp_path / "ids").mkdir()
    (tmp_path / "old").mkdir()
    return tmp_path


@pytest.fixture
def write_lines() -> Callable[[Path, list[str]], None]:
    return _write_lines


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("MATCH_MODE", "MAX_WORKERS", "CLEAN_OUTPUT", "WORK_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
