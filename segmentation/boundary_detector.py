"""
segmentation/boundary_detector.py — wykrywanie granic artykułów w oczyszczonym tekście.

Dwie strategie o tym samym kształcie wyniku (list[Boundary]):

  PATTERN: każdy LabelRule przeszukuje cały tekst niezależnie; każde
            dopasowanie to kandydat (offset, dopasowany tekst).
  LINE:    skan linia po linii; linia jest granicą, jeśli zawiera wariant
            nagłówka, a dalej w tej samej linii występuje cyfra. Etykieta to
            reszta linii od pierwszego znaku wariantu. Tekst przed wariantem
            nie trafia do żadnej treści: poprzedni artykuł kończy się na
            początku linii-nagłówka (Boundary.line_start).

Po zebraniu kandydatów (obie strategie):
  sortowanie po offsecie → jeden kandydat na offset.
  Przy remisie wygrywa najdłuższa etykieta, potem wcześniej zarejestrowana reguła.
"""

from __future__ import annotations

from enum import StrEnum

from data_model.articles import Boundary
from segmentation.label_patterns import RULES, LabelRule, line_label_regex


class DetectionStrategy(StrEnum):
    """Strategia wykrywania nagłówków artykułów."""
    PATTERN = "pattern"
    LINE    = "line"


# Kandydat: (offset, etykieta, indeks reguły, początek linii albo None);
# indeks reguły tylko do rozstrzygania remisów
_Candidate = tuple[int, str, int, int | None]


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def detect(
    text: str,
    rules: list[LabelRule] | None = None,
    strategy: DetectionStrategy = DetectionStrategy.PATTERN,
) -> list[Boundary]:
    """
    Zwraca listę granic o ściśle rosnących, unikalnych offsetach.

    Args:
        text:     CleanedStream (wynik page_normalizer.normalize).
        rules:    Reguły etykiet; domyślnie label_patterns.RULES.
        strategy: PATTERN (pełnotekstowo) lub LINE (linia po linii).
    """
    if not text:
        return []
    rules = RULES if rules is None else rules
    if not rules:
        return []

    if strategy is DetectionStrategy.LINE:
        candidates = _line_candidates(text, rules)
    else:
        candidates = _pattern_candidates(text, rules)

    return _dedupe(candidates)


# ---------------------------------------------------------------------------
# Strategie
# ---------------------------------------------------------------------------

def _pattern_candidates(text: str, rules: list[LabelRule]) -> list[_Candidate]:
    candidates: list[_Candidate] = []
    for idx, rule in enumerate(rules):
        for m in rule.regex.finditer(text):
            candidates.append((m.start(), m.group(), idx, None))
    return candidates


def _line_candidates(text: str, rules: list[LabelRule]) -> list[_Candidate]:
    regex = line_label_regex(rules)
    candidates: list[_Candidate] = []
    line_start = 0
    for line in text.split("\n"):
        m = regex.search(line)
        if m:
            label = line[m.start():].rstrip()
            candidates.append((line_start + m.start(), label, 0, line_start))
        line_start += len(line) + 1
    return candidates


def _dedupe(candidates: list[_Candidate]) -> list[Boundary]:
    candidates.sort(key=lambda c: (c[0], -len(c[1]), c[2]))
    result: list[Boundary] = []
    last_offset = -1
    for offset, label, _, line_start in candidates:
        if offset == last_offset:
            continue
        result.append(Boundary(offset=offset, label=label, line_start=line_start))
        last_offset = offset
    return result

