"""
data_model — struktury danych ekstraktora artykułów.

Użycie:
  from data_model import Boundary, ArticleRecord, RecordSequence

Moduły:
  articles   Boundary, ArticleRecord, RecordSequence

Mapowanie na wyjściowy JSON:
  ArticleRecord.label → "articulo"
  ArticleRecord.body  → "contenido"
"""

from .articles import (
    Boundary,
    ArticleRecord,
    RecordSequence,
)

__all__ = [
    "Boundary",
    "ArticleRecord",
    "RecordSequence",
]
