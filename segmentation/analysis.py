"""
segmentation/analysis.py — diagnostyka tekstu przed ekstrakcją.

analyze() zwraca raport zamiast wypisywać liczniki na ekran:
  - liczba znaków i flaga "tekst podejrzanie krótki"
  - liczba surowych dopasowań każdej reguły + przykładowe fragmenty
  - liczba linii-kandydatów strategii liniowej
  - podgląd pierwszych niebanalnych linii tekstu
"""

from __future__ import annotations

from dataclasses import dataclass, field

from segmentation.boundary_detector import DetectionStrategy, detect
from segmentation.label_patterns import RULES, LabelRule

# Tekst krótszy niż to (w znakach) najpewniej oznacza nieudaną konwersję
SHORT_TEXT_THRESHOLD = 1000

_PREVIEW_LINES = 10
_PREVIEW_MIN_LINE_LENGTH = 3   # linie o długości <= 3 pomijamy w podglądzie
_SNIPPET_CONTEXT = 60          # znaków treści za nagłówkiem w przykładzie


@dataclass(slots=True)
class RuleStats:
    name: str
    keyword: str
    matches: int = 0
    examples: list[str] = field(default_factory=list)


@dataclass(slots=True)
class AnalysisReport:
    """
    Wynik analyze().

    - total_chars:     długość analizowanego tekstu
    - rules:           statystyki per reguła (w kolejności rejestracji)
    - line_candidates: liczba granic strategii LINE
    - preview:         pierwsze linie tekstu (do szybkiej oceny konwersji)
    """
    total_chars: int
    rules: list[RuleStats] = field(default_factory=list)
    line_candidates: int = 0
    preview: list[str] = field(default_factory=list)

    @property
    def is_short(self) -> bool:
        return self.total_chars < SHORT_TEXT_THRESHOLD

    @property
    def total_matches(self) -> int:
        return sum(r.matches for r in self.rules)


def analyze(
    text: str,
    rules: list[LabelRule] | None = None,
    max_examples: int = 3,
) -> AnalysisReport:
    rules = RULES if rules is None else rules
    report = AnalysisReport(total_chars=len(text))

    for rule in rules:
        stats = RuleStats(name=rule.name, keyword=rule.keyword)
        for m in rule.regex.finditer(text):
            stats.matches += 1
            if len(stats.examples) < max_examples:
                stats.examples.append(_snippet(text, m.start(), m.end()))
        report.rules.append(stats)

    report.line_candidates = len(detect(text, rules, DetectionStrategy.LINE))
    report.preview = preview_lines(text)
    return report


def preview_lines(text: str, limit: int = _PREVIEW_LINES) -> list[str]:
    """Pierwsze `limit` linii dłuższych niż 3 znaki."""
    out: list[str] = []
    for line in text.splitlines():
        if len(line) > _PREVIEW_MIN_LINE_LENGTH:
            out.append(line)
            if len(out) >= limit:
                break
    return out


def _snippet(text: str, start: int, end: int) -> str:
    fragment = text[start:end + _SNIPPET_CONTEXT]
    return " ".join(fragment.split())
