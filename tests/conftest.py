from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import pytest

from vojker.config.settings import Settings


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Default settings, isolated from any VOJKER_* variables in the shell."""
    for key in list(os.environ):
        if key.startswith("VOJKER_"):
            monkeypatch.delenv(key, raising=False)
    return Settings()

@pytest.fixture()
def bar() -> dict[str, Any]:
    return {
        "symbol": "EURUSD",
        "timeframe": "M1",
        "timestamp": 1700000000,
        "open": 1.1000,
        "close": 1.0950,
        "volume": 10,
    }

@pytest.fixture()
def make_case(tmp_path: Path):
    """Create a case directory holding golden_input.json and return its path."""

    def _make(payload: dict[str, Any] | bytes, name: str = "case_a") -> Path:
        case_dir = tmp_path / name
        case_dir.mkdir()
        raw = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
        (case_dir / "golden_input.json").write_bytes(raw)
        return case_dir

    return _make
