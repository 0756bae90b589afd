"""
segmentation/config.py — parametry silnika segmentacji.

Zmienne środowiskowe (opcjonalne, nadpisują wartości domyślne):
  CODEX_PATTERN_MIN_BODY    min. długość treści dla strategii wzorców (10)
  CODEX_LINE_MIN_BODY       min. długość treści dla strategii liniowej (20)
  CODEX_LOW_YIELD           próg liczby artykułów uruchamiający fallback (10)
  CODEX_STRIP_PAGE_NUMBERS  usuwanie artefaktów numeracji stron: 1/0 (1)

Opcjonalnie plik .env w katalogu głównym projektu:
  CODEX_LOW_YIELD=25
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

_ENV_FILE = pathlib.Path(__file__).resolve().parent.parent / ".env"

_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True, slots=True)
class SegmentationConfig:
    pattern_min_body_length: int = 10
    line_min_body_length: int = 20
    low_yield_threshold: int = 10
    strip_page_artifacts: bool = True

    @classmethod
    def from_env(cls) -> SegmentationConfig:
        """Buduje konfigurację z CODEX_* (po wczytaniu .env, jeśli istnieje)."""
        load_dotenv(_ENV_FILE)
        default = cls()
        return cls(
            pattern_min_body_length = _env_int("CODEX_PATTERN_MIN_BODY", default.pattern_min_body_length),
            line_min_body_length    = _env_int("CODEX_LINE_MIN_BODY",    default.line_min_body_length),
            low_yield_threshold     = _env_int("CODEX_LOW_YIELD",        default.low_yield_threshold),
            strip_page_artifacts    = _env_bool("CODEX_STRIP_PAGE_NUMBERS", default.strip_page_artifacts),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"Zmienna {name} musi być liczbą całkowitą, otrzymano: {raw!r}") from exc
    if value < 0:
        raise ValueError(f"Zmienna {name} nie może być ujemna: {value}")
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSE_VALUES
