from segmentation import SHORT_TEXT_THRESHOLD, analyze
from segmentation.analysis import preview_lines


def test_analyze_counts_matches_per_rule():
    text = "Artículo 1.- uno. Articulo 2.- dos. Art. 3.- tres. Artículo 4.- cuatro."
    report = analyze(text)
    counts = {r.name: r.matches for r in report.rules}
    assert counts == {"acentuado": 2, "sin_acento": 1, "abreviado": 1}
    assert report.total_matches == 4
    assert report.total_chars == len(text)
    assert report.is_short


def test_analyze_limits_examples():
    text = " ".join(f"Artículo {n}.- texto {n}" for n in range(1, 8))
    report = analyze(text, max_examples=2)
    acentuado = report.rules[0]
    assert acentuado.matches == 7
    assert len(acentuado.examples) == 2
    assert acentuado.examples[0].startswith("Artículo 1.-")


def test_analyze_line_candidates():
    text = "Artículo 1 Objeto\ncuerpo\nArt. 2 Ámbito\ncuerpo\n"
    assert analyze(text).line_candidates == 2


def test_analyze_long_text_is_not_short():
    report = analyze("a" * SHORT_TEXT_THRESHOLD)
    assert not report.is_short


def test_preview_lines_skips_short_lines_and_limits():
    text = "ab\n\nCÓDIGO PENAL\n123\n" + "\n".join(f"línea {n}" for n in range(20))
    preview = preview_lines(text)
    assert preview[0] == "CÓDIGO PENAL"
    assert "123" not in preview
    assert len(preview) == 10
