from __future__ import annotations

import io
import os

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep real J_* variables and a local .env out of every test."""

    for key in list(os.environ):
        if key.upper().startswith("J_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=40, color_system=None, force_terminal=False)
