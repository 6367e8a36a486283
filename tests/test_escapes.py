import pytest

from hanscan.utils.escapes import EscapeError, decode_escapes


def test_plain_text_is_unchanged():
    assert decode_escapes("你好 world") == "你好 world"


def test_simple_escapes():
    assert decode_escapes(r"a\nb\tc\\d\"e\'f") == "a\nb\tc\\d\"e'f"


def test_hex_and_unicode_escapes():
    assert decode_escapes(r"\x41中\u{6587}") == "A中文"


def test_surrogate_pair_escapes_join_into_one_code_point():
    assert decode_escapes(r"\ud83d\ude00") == "\U0001F600"


def test_line_continuation_contributes_nothing():
    assert decode_escapes("ab\\\ncd") == "abcd"
    assert decode_escapes("ab\\\r\ncd") == "abcd"


def test_null_and_legacy_octal_in_strings():
    assert decode_escapes(r"\0") == "\0"
    assert decode_escapes(r"\101") == "A"
    assert decode_escapes(r"\8") == "8"


def test_unknown_escape_stands_for_itself():
    assert decode_escapes(r"\q\中") == "q中"


@pytest.mark.parametrize("raw", [r"\x4", r"\xZZ", r"\u12", r"\u{110000}", r"\u{", "\\"])
def test_malformed_escapes_raise(raw):
    with pytest.raises(EscapeError):
        decode_escapes(raw)


def test_template_cooking_normalises_carriage_returns():
    assert decode_escapes("a\r\nb\rc", template=True) == "a\nb\nc"


def test_template_rejects_octal_escapes():
    with pytest.raises(EscapeError):
        decode_escapes(r"\1 中文", template=True)
    assert decode_escapes(r"\0", template=True) == "\0"
