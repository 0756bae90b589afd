import pytest

from segmentation import SegmentationConfig


def test_defaults():
    config = SegmentationConfig()
    assert config.pattern_min_body_length == 10
    assert config.line_min_body_length == 20
    assert config.low_yield_threshold == 10
    assert config.strip_page_artifacts is True


def test_from_env_without_variables_gives_defaults():
    assert SegmentationConfig.from_env() == SegmentationConfig()


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("CODEX_PATTERN_MIN_BODY", "5")
    monkeypatch.setenv("CODEX_LINE_MIN_BODY", "30")
    monkeypatch.setenv("CODEX_LOW_YIELD", "25")
    monkeypatch.setenv("CODEX_STRIP_PAGE_NUMBERS", "off")
    config = SegmentationConfig.from_env()
    assert config == SegmentationConfig(
        pattern_min_body_length=5,
        line_min_body_length=30,
        low_yield_threshold=25,
        strip_page_artifacts=False,
    )


def test_from_env_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("CODEX_LOW_YIELD", "diez")
    with pytest.raises(ValueError, match="CODEX_LOW_YIELD"):
        SegmentationConfig.from_env()


def test_from_env_rejects_negative(monkeypatch):
    monkeypatch.setenv("CODEX_LINE_MIN_BODY", "-1")
    with pytest.raises(ValueError, match="ujemna"):
        SegmentationConfig.from_env()
