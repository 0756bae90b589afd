"""
data_model/articles.py — model artykułów wyciętych z tekstu kodeksu.

Boundary odpowiada jednemu nagłówkowi artykułu znalezionemu w oczyszczonym
tekście; ArticleRecord to gotowy rekord (nagłówek + treść), który trafia
do serializacji JSON jako {"articulo": ..., "contenido": ...}.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Boundary:
    offset: int          # pozycja początku nagłówka w CleanedStream (0-based)
    label: str           # dosłownie dopasowany tekst nagłówka, np. "Artículo 5.-"
    line_start: int | None = None   # strategia LINE: początek linii-nagłówka

    @property
    def end(self) -> int:
        """Pozycja tuż za nagłówkiem; tu zaczyna się treść artykułu."""
        return self.offset + len(self.label)

    @property
    def cut(self) -> int:
        """Pozycja, na której kończy się treść poprzedniego artykułu."""
        return self.offset if self.line_start is None else self.line_start


@dataclass(frozen=True, slots=True)
class ArticleRecord:
    label: str           # nagłówek po końcowym strip()
    body: str            # treść ze znormalizowanymi białymi znakami

    def to_json(self) -> dict[str, str]:
        return {"articulo": self.label, "contenido": self.body}


# Lista rekordów w kolejności dokumentu (= kolejność offsetów granic).
RecordSequence = list[ArticleRecord]
