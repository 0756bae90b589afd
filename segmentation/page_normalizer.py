"""
segmentation/page_normalizer.py — podział na strony i ponowne sklejenie tekstu.

Co robimy:
  - Dzielimy surowy tekst na strony po znaku \f (form feed)
  - Odrzucamy puste strony
  - Sklejamy strony z powrotem, każdą zakończoną pojedynczym \n

Czego NIE robimy na tym etapie:
  - Nie przycinamy białych znaków wewnątrz strony (robi to segmenter)
  - Nie usuwamy nagłówków/stopek: strip_headers_footers() to na razie
    przejście bez zmian, miejsce na przyszłe przycinanie per strona
"""

from __future__ import annotations

# Znak podziału stron emitowany przez konwerter PDF → tekst.
PAGE_BREAK = "\f"


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def split_pages(raw: str) -> list[str]:
    """Dzieli tekst po PAGE_BREAK i zwraca tylko niepuste strony (w kolejności)."""
    return [page for page in raw.split(PAGE_BREAK) if page]


def strip_headers_footers(pages: list[str]) -> list[str]:
    """
    Usuwa nagłówki/stopki stron.

    Obecnie zwraca strony bez zmian.
    """
    return list(pages)


def join_pages(pages: list[str]) -> str:
    """Skleja strony; po każdej dokładnie jeden \n. Brak stron → ""."""
    if not pages:
        return ""
    return "".join(page + "\n" for page in pages)


def normalize(raw: str) -> str:
    """
    RawStream → CleanedStream.

    Funkcja totalna: pusty tekst, same \f, dowolne znaki; nigdy nie rzuca.
    """
    return join_pages(strip_headers_footers(split_pages(raw)))
