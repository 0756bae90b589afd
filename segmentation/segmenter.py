"""
segmentation/segmenter.py — cięcie tekstu na rekordy artykułów wg listy granic.

Dla granicy i:
  treść = text[boundaries[i].end : boundaries[i+1].cut]   (ostatnia: do końca tekstu)
  cut = offset, a w strategii LINE początek linii-nagłówka

Czyszczenie treści:
  - każdy ciąg białych znaków (także \n) → jedna spacja, strip()
  - opcjonalnie: usunięcie artefaktów numeracji stron ("12 / 340",
    treść złożona wyłącznie z cyfr)
  - rekord zostaje tylko gdy len(treść) > min_body_length
"""

from __future__ import annotations

import re

from data_model.articles import ArticleRecord, Boundary, RecordSequence

_WHITESPACE_RE = re.compile(r"\s+")

# "N / M": licznik stron wstawiony przez konwerter
_PAGE_COUNTER_RE = re.compile(r"\b\d+\s*/\s*\d+\b")

# Treść będąca samym numerem strony
_BARE_NUMBER_RE = re.compile(r"^\d+\s*$")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def strip_page_artifacts(body: str) -> str:
    """Usuwa liczniki stron "N / M" i treść złożoną z samego numeru."""
    body = _PAGE_COUNTER_RE.sub("", body)
    body = _BARE_NUMBER_RE.sub("", body)
    return collapse_whitespace(body)


def clean_body(raw: str, strip_artifacts: bool = True) -> str:
    body = collapse_whitespace(raw)
    if strip_artifacts:
        body = strip_page_artifacts(body)
    return body


def spans(text: str, boundaries: list[Boundary]) -> list[tuple[Boundary, int, int]]:
    """
    Zwraca (granica, początek treści, koniec treści) dla każdej granicy.

    Zakresy o zerowej lub ujemnej długości są pomijane.
    """
    result: list[tuple[Boundary, int, int]] = []
    for i, boundary in enumerate(boundaries):
        start = boundary.end
        end = boundaries[i + 1].cut if i + 1 < len(boundaries) else len(text)
        if start >= end:
            continue
        result.append((boundary, start, end))
    return result


def segment(
    text: str,
    boundaries: list[Boundary],
    min_body_length: int,
    strip_artifacts: bool = True,
) -> RecordSequence:
    """
    Buduje RecordSequence w kolejności granic.

    Rekord jest zachowywany tylko gdy oczyszczona treść ma więcej niż
    min_body_length znaków (dokładnie min_body_length → odrzucony).
    """
    records: RecordSequence = []
    for boundary, start, end in spans(text, boundaries):
        body = clean_body(text[start:end], strip_artifacts)
        if len(body) > min_body_length:
            records.append(ArticleRecord(label=boundary.label.strip(), body=body))
    return records
