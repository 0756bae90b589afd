"""
pdf/sanitizer.py — naprawa kodowania tekstu przed segmentacją.

Polityka: każda niepoprawna sekwencja UTF-8 zamieniana jest na JEDNĄ spację.
Korzystamy z dekodera UTF-8 z zarejestrowaną procedurą obsługi błędów,
więc granice niepoprawnych sekwencji wyznacza sam kodek.
"""

from __future__ import annotations

import codecs

_ERROR_HANDLER = "codex-space"


def _replace_with_space(exc: UnicodeError) -> tuple[str, int]:
    if isinstance(exc, (UnicodeDecodeError, UnicodeEncodeError)):
        return " ", exc.end
    raise exc


codecs.register_error(_ERROR_HANDLER, _replace_with_space)


def sanitize_bytes(data: bytes) -> str:
    """Dekoduje bajty jako UTF-8; niepoprawne sekwencje → " "."""
    return data.decode("utf-8", errors=_ERROR_HANDLER)


def sanitize_text(text: str) -> str:
    """
    Ta sama polityka dla już zdekodowanego tekstu.

    Samotne surogaty (np. po wczytaniu z errors="surrogateescape") nie mają
    reprezentacji UTF-8, każdy ich ciąg zamieniany jest na jedną spację.
    """
    return text.encode("utf-8", errors=_ERROR_HANDLER).decode("utf-8")
