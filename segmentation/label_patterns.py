"""
segmentation/label_patterns.py — wzorce regex do rozpoznawania nagłówków artykułów.

Każdy LabelRule zawiera:
  - name    : krótka nazwa wariantu (do raportów analizy)
  - keyword : dosłowny tekst wariantu, np. "Artículo" lub "Art."
  - regex   : skompilowany wzorzec pełnego nagłówka (wyszukiwanie w całym tekście)

Pełny nagłówek: wariant + numer + opcjonalny znacznik porządkowy (o, °, º)
+ opcjonalne słowo kwalifikujące (np. "bis") + literał ".-".

Wzorce nie wykluczają się wzajemnie; duplikaty na tym samym offsecie
usuwa detektor granic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LabelRule:
    name: str
    keyword: str
    regex: re.Pattern[str]


def _p(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE | re.UNICODE)


# Numer, znacznik porządkowy, słowo kwalifikujące i terminator ".-"
_TAIL = r"(\d+)(?:o|°|º)?(?:\s+([A-Za-záéíóúÁÉÍÓÚñÑüÜ]+))?\s*\.-"


def _rule(name: str, keyword: str, sep: str = r"\s+", word_start: bool = False) -> LabelRule:
    # Pełne słowa bez \b: OCR skleja je z poprzedzającym tekstem ("12Artículo 5.-")
    head = (r"\b" if word_start else "") + re.escape(keyword)
    return LabelRule(name=name, keyword=keyword, regex=_p(head + sep + _TAIL))


RULES: list[LabelRule] = [
    # -------------------------------------------------------------------------
    # Pełne słowo z akcentem: "Artículo 12.-", "ARTÍCULO 3o bis.-"
    # -------------------------------------------------------------------------
    _rule("acentuado", "Artículo"),

    # -------------------------------------------------------------------------
    # Pełne słowo bez akcentu (częste w OCR): "Articulo 12.-"
    # -------------------------------------------------------------------------
    _rule("sin_acento", "Articulo"),

    # -------------------------------------------------------------------------
    # Skrót: "Art. 12.-", "Art.12.-"; \b, by nie łapać końcówki "Depart."
    # -------------------------------------------------------------------------
    _rule("abreviado", "Art.", sep=r"\s*", word_start=True),
]


def line_label_regex(rules: list[LabelRule]) -> re.Pattern[str]:
    """
    Wzorzec strategii liniowej: dowolny wariant z `rules`, po którym gdzieś
    dalej w tej samej linii występuje cyfra.

    Dopasowanie zaczyna się na pierwszym znaku wariantu; etykietą jest
    reszta linii od tego miejsca.
    """
    variants = "|".join(
        re.escape(r.keyword) for r in sorted(rules, key=lambda r: -len(r.keyword))
    )
    return _p(r"(?:" + variants + r")(?=[^\n]*\d)")
