"""
segmentation/fallback.py — koordynator strategii z mechanizmem awaryjnym.

Przebieg extract():
  1. Strategia PATTERN → primary
  2. len(primary) < low_yield_threshold → strategia LINE → alternate
  3. Zwracamy alternate tylko gdy ma ściśle więcej rekordów; inaczej primary

Heurystyka "więcej rekordów = pełniejsza ekstrakcja" nie jest gwarancją
poprawności, żadna ze strategii nie jest ogólnie lepsza.

Strategia LINE jako automat stanów:
  OUTSIDE_ARTICLE: tekst przed pierwszą linią-nagłówkiem jest pomijany
  INSIDE_ARTICLE:  każda kolejna linia-nagłówek zamyka bieżący rekord
                   i otwiera nowy; pozostałe niepuste linie dołączane są
                   do treści (spacja jako separator); koniec tekstu
                   zamyka ostatni rekord.
Przejścia realizuje para detect(LINE) + segment(): treść to tekst między
końcem linii-nagłówka a początkiem następnej linii-nagłówka (także gdy
wariant stoi w środku linii), a collapse_whitespace() skleja linie spacją
i usuwa puste.
"""

from __future__ import annotations

from dataclasses import dataclass

from data_model.articles import RecordSequence
from segmentation.boundary_detector import DetectionStrategy, detect
from segmentation.config import SegmentationConfig
from segmentation.label_patterns import RULES, LabelRule
from segmentation.segmenter import segment


@dataclass(frozen=True, slots=True)
class ExtractionReport:
    """
    Diagnostyka jednego przebiegu extract_with_report().

    - strategy:        strategia, której wynik zwrócono
    - primary_count:   liczba rekordów strategii PATTERN
    - alternate_count: liczba rekordów strategii LINE (None gdy nie uruchomiono)
    - threshold:       próg niskiego uzysku użyty w tym przebiegu
    """
    strategy: DetectionStrategy
    primary_count: int
    alternate_count: int | None
    threshold: int

    @property
    def fallback_triggered(self) -> bool:
        return self.alternate_count is not None


def min_body_length_for(strategy: DetectionStrategy, config: SegmentationConfig) -> int:
    if strategy is DetectionStrategy.LINE:
        return config.line_min_body_length
    return config.pattern_min_body_length


def run_strategy(
    text: str,
    strategy: DetectionStrategy,
    config: SegmentationConfig | None = None,
    rules: list[LabelRule] | None = None,
) -> RecordSequence:
    """Detekcja + segmentacja jedną strategią."""
    config = config or SegmentationConfig()
    boundaries = detect(text, rules if rules is not None else RULES, strategy)
    # Artefakty stron czyścimy tylko w strategii wzorców
    strip_artifacts = config.strip_page_artifacts and strategy is DetectionStrategy.PATTERN
    return segment(text, boundaries, min_body_length_for(strategy, config), strip_artifacts)


def extract_with_report(
    text: str,
    config: SegmentationConfig | None = None,
    rules: list[LabelRule] | None = None,
) -> tuple[RecordSequence, ExtractionReport]:
    config = config or SegmentationConfig()

    primary = run_strategy(text, DetectionStrategy.PATTERN, config, rules)
    if len(primary) >= config.low_yield_threshold:
        return primary, ExtractionReport(
            strategy=DetectionStrategy.PATTERN,
            primary_count=len(primary),
            alternate_count=None,
            threshold=config.low_yield_threshold,
        )

    alternate = run_strategy(text, DetectionStrategy.LINE, config, rules)
    chosen, strategy = (
        (alternate, DetectionStrategy.LINE)
        if len(alternate) > len(primary)
        else (primary, DetectionStrategy.PATTERN)
    )
    return chosen, ExtractionReport(
        strategy=strategy,
        primary_count=len(primary),
        alternate_count=len(alternate),
        threshold=config.low_yield_threshold,
    )


def extract(
    text: str,
    config: SegmentationConfig | None = None,
    rules: list[LabelRule] | None = None,
) -> RecordSequence:
    """CleanedStream → RecordSequence (PATTERN z awaryjnym LINE)."""
    records, _ = extract_with_report(text, config, rules)
    return records
