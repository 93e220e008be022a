from __future__ import annotations

import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"

# Force this checkout's src to the front of sys.path so imports use this tree,
# not any installed copy.
SRC_STR = str(SRC_PATH)
sys.path = [SRC_STR] + [p for p in sys.path if p != SRC_STR]


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path_factory, monkeypatch):
    """Keep anonymous work local to the test run and never open a browser."""
    anon_dir = tmp_path_factory.mktemp("anon_work")
    monkeypatch.setenv("UIGEN_ANON_WORK_PATH", str(anon_dir / "anon_work.json"))
    monkeypatch.delenv("UIGEN_SERVER_URL", raising=False)
    monkeypatch.delenv("UIGEN_APP_URL", raising=False)

    # Prevent tests from opening real browser windows.
    monkeypatch.setattr("webbrowser.open", lambda *a, **kw: None)

    yield
