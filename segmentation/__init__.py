"""
segmentation — silnik cięcia tekstu kodeksu na artykuły.

Publiczne API:
  normalize(raw)                         RawStream → CleanedStream
  detect(text, rules, strategy)          → list[Boundary]
  segment(text, boundaries, min_len)     → RecordSequence
  extract(text, config)                  PATTERN z awaryjnym LINE
  extract_with_report(text, config)      → (RecordSequence, ExtractionReport)
  analyze(text, rules)                   → AnalysisReport
  DetectionStrategy, LabelRule, RULES, SegmentationConfig

Typowe użycie:
    from segmentation import normalize, extract

    records = extract(normalize(raw_text))
"""

from .analysis          import AnalysisReport, RuleStats, analyze, SHORT_TEXT_THRESHOLD
from .boundary_detector import DetectionStrategy, detect
from .config            import SegmentationConfig
from .fallback          import ExtractionReport, extract, extract_with_report, run_strategy
from .label_patterns    import RULES, LabelRule
from .page_normalizer   import PAGE_BREAK, normalize
from .segmenter         import segment

__all__ = [
    "AnalysisReport",
    "RuleStats",
    "analyze",
    "SHORT_TEXT_THRESHOLD",
    "DetectionStrategy",
    "detect",
    "SegmentationConfig",
    "ExtractionReport",
    "extract",
    "extract_with_report",
    "run_strategy",
    "RULES",
    "LabelRule",
    "PAGE_BREAK",
    "normalize",
    "segment",
]
