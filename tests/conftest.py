# ruff: noqa: E402

import builtins
import sys
from pathlib import Path

import pytest
from _pytest.doctest import DoctestModule

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import gostarter.io as io
import gostarter.log as log
import gostarter.paths as paths

PACKAGE = ROOT / "src" / "gostarter"
DOCTEST_MODULES = {
    PACKAGE / "__init__.py",
    PACKAGE / "config.py",
    PACKAGE / "git.py",
    PACKAGE / "github.py",
    PACKAGE / "log.py",
    PACKAGE / "models.py",
    PACKAGE / "paths.py",
    PACKAGE / "templates.py",
    PACKAGE / "services" / "scaffold" / "plan.py",
}


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.setattr(paths, "gostarter_data_dir", lambda: tmp_path / "data")
    monkeypatch.setattr(paths, "gostarter_config_dir", lambda: tmp_path / "config")
    for name in ("GOSTARTER_OWNER", "GOSTARTER_VERSION", "GOSTARTER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(log, "_level", None)
    monkeypatch.setattr(log, "_force_no_color", False)

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)


def pytest_collect_file(
    parent: pytest.Collector, file_path: Path
) -> DoctestModule | None:
    path = file_path if isinstance(file_path, Path) else Path(str(file_path))
    if path in DOCTEST_MODULES:
        return DoctestModule.from_parent(parent, path=path)
    return None
