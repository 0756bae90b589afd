from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_codex_env(monkeypatch):
    for name in (
        "CODEX_PATTERN_MIN_BODY",
        "CODEX_LINE_MIN_BODY",
        "CODEX_LOW_YIELD",
        "CODEX_STRIP_PAGE_NUMBERS",
    ):
        monkeypatch.delenv(name, raising=False)
