"""
pdf/extractor.py — konwersja dokumentu źródłowego do jednego strumienia tekstu.

Architektura:
  .pdf → fitz.open() → strony → page.get_text("text") → "\f".join(strony)
  .txt → bajty → sanitize_bytes() (niepoprawne UTF-8 → spacja)

Wynik zawsze przechodzi przez sanitizer, a strony rozdziela znak \f;
tę konwencję rozumie segmentation.page_normalizer.

Kluczowe funkcje publiczne:
  extract_text(path) -> str
"""

from __future__ import annotations

from pathlib import Path

import fitz  # PyMuPDF

from pdf.sanitizer import sanitize_bytes, sanitize_text
from segmentation.page_normalizer import PAGE_BREAK

SUPPORTED_SUFFIXES = frozenset({".pdf", ".txt"})


class ExtractionError(RuntimeError):
    """Nie udało się uzyskać tekstu z pliku źródłowego."""


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def extract_text(path: str | Path) -> str:
    """
    Zwraca pełny tekst dokumentu; strony rozdzielone znakiem \f.

    Raises:
        ExtractionError: brak pliku, nieobsługiwane rozszerzenie,
                         błąd konwersji lub pusty wynik.
    """
    path = Path(path)
    if not path.exists():
        raise ExtractionError(f"Plik nie istnieje: {path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ExtractionError(
            f"Nieobsługiwane rozszerzenie {suffix or '(brak)'}; "
            f"oczekiwano: {', '.join(sorted(SUPPORTED_SUFFIXES))}"
        )

    if suffix == ".pdf":
        text = _extract_pdf(path)
    else:
        text = sanitize_bytes(path.read_bytes())

    if not text.replace(PAGE_BREAK, "").strip():
        raise ExtractionError(f"Konwersja dała pusty tekst: {path}")
    return text


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _extract_pdf(path: Path) -> str:
    try:
        doc = fitz.open(str(path))
    except RuntimeError as exc:  # fitz.FileDataError dziedziczy po RuntimeError
        raise ExtractionError(f"Nie można otworzyć PDF {path}: {exc}") from exc
    try:
        return PAGE_BREAK.join(_extract_pages(doc))
    finally:
        doc.close()


def _extract_pages(doc: fitz.Document) -> list[str]:
    """Tekst każdej strony w kolejności dokumentu (z zachowaniem białych znaków)."""
    pages: list[str] = []
    for page in doc:
        text = page.get_text("text", flags=fitz.TEXT_PRESERVE_WHITESPACE)
        pages.append(sanitize_text(text))
    return pages
