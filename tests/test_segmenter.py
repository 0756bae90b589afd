from data_model import ArticleRecord, Boundary
from segmentation import detect, segment
from segmentation.segmenter import clean_body, spans, strip_page_artifacts


def test_segment_scenario_a():
    text = "Artículo 1.- Todo es punible. Artículo 2.- Nadie escapa."
    records = segment(text, detect(text), min_body_length=10)
    assert records == [
        ArticleRecord("Artículo 1.-", "Todo es punible."),
        ArticleRecord("Artículo 2.-", "Nadie escapa."),
    ]


def test_segment_threshold_is_strict():
    text = "Art. 1.- " + "a" * 10 + " Art. 2.- " + "b" * 11
    records = segment(text, detect(text), min_body_length=10)
    assert [r.body for r in records] == ["b" * 11]


def test_segment_collapses_whitespace_and_newlines():
    text = "Artículo 3.-\n   El que   mate\n\na otro\t será penado.\n"
    records = segment(text, detect(text), min_body_length=10)
    assert records[0].body == "El que mate a otro será penado."


def test_segment_skips_empty_spans():
    text = "Artículo 1.-Artículo 2.- texto suficientemente largo"
    boundaries = detect(text)
    assert len(boundaries) == 2
    records = segment(text, boundaries, min_body_length=10)
    assert [r.label for r in records] == ["Artículo 2.-"]


def test_segment_last_boundary_runs_to_end_of_text():
    text = "Artículo 9.- última disposición del código"
    records = segment(text, detect(text), min_body_length=10)
    assert records[0].body == "última disposición del código"


def test_segment_trims_label():
    text = "Artículo 4 Titulo De la pena\ncontenido de la pena aplicable\n"
    boundaries = [Boundary(offset=0, label="Artículo 4 Titulo De la pena ")]
    records = segment(text, boundaries, min_body_length=10)
    assert records[0].label == "Artículo 4 Titulo De la pena"


def test_segment_preserves_boundary_order():
    text = "".join(f"Artículo {n}.- contenido del artículo número {n}. " for n in range(1, 6))
    records = segment(text, detect(text), min_body_length=10)
    assert [r.label for r in records] == [f"Artículo {n}.-" for n in range(1, 6)]


def test_spans_cover_text_from_first_boundary():
    text = "intro Artículo 1.- uno dos tres Artículo 2.- cuatro cinco"
    boundaries = detect(text)
    covered = set()
    for b in boundaries:
        covered.update(range(b.offset, b.end))
    for _, start, end in spans(text, boundaries):
        covered.update(range(start, end))
    assert covered >= set(range(boundaries[0].offset, len(text)))


def test_strip_page_artifacts_removes_page_counters():
    assert strip_page_artifacts("El juez 12 / 340 resolverá") == "El juez resolverá"
    assert strip_page_artifacts("57") == ""


def test_clean_body_without_artifact_stripping():
    assert clean_body(" 3/4 de la pena ", strip_artifacts=False) == "3/4 de la pena"


def test_segment_drops_body_that_is_only_page_number():
    text = "Artículo 1.-\n   123456789012345\nArtículo 2.- texto real del artículo"
    records = segment(text, detect(text), min_body_length=10)
    assert [r.label for r in records] == ["Artículo 2.-"]
