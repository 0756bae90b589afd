from pdf.sanitizer import sanitize_bytes, sanitize_text


def test_sanitize_bytes_valid_utf8_is_untouched():
    text = "Artículo 1.- Niño, año, pingüino."
    assert sanitize_bytes(text.encode("utf-8")) == text


def test_sanitize_bytes_replaces_invalid_byte_with_single_space():
    assert sanitize_bytes(b"abc\xffdef") == "abc def"


def test_sanitize_bytes_truncated_sequence_is_one_space():
    # \xe2\x82 to początek "€" bez ostatniego bajtu
    assert sanitize_bytes(b"precio \xe2\x82 final") == "precio   final"


def test_sanitize_bytes_latin1_accent():
    assert sanitize_bytes("Artículo".encode("latin-1")) == "Art culo"


def test_sanitize_text_lone_surrogates():
    raw = b"pena \xff m\xe1xima".decode("utf-8", errors="surrogateescape")
    assert sanitize_text(raw) == "pena   m xima"
