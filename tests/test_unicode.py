import pytest
from hypothesis import given
from hypothesis import strategies as st

from cborkit.unicode import InvalidUtf8Error, codepoint_count


def test_empty_input():
    assert codepoint_count(b"") == 0


def test_ascii_and_multibyte():
    text = "ab\u00e9\u20ac\U0001d11e"
    assert codepoint_count(text.encode("utf-8")) == len(text)


@given(st.text())
def test_matches_decoded_length(text):
    assert codepoint_count(text.encode("utf-8")) == len(text)


@given(st.binary(max_size=32))
def test_agrees_with_strict_decoder(data):
    try:
        decoded = data.decode("utf-8")
    except UnicodeDecodeError:
        with pytest.raises(InvalidUtf8Error):
            codepoint_count(data)
    else:
        assert codepoint_count(data) == len(decoded)


def test_invalid_lead_byte_location():
    with pytest.raises(InvalidUtf8Error) as info:
        codepoint_count(b"\xff")
    assert info.value.location == 0


def test_truncated_sequence_reports_end():
    data = b"ab\xc3"
    with pytest.raises(InvalidUtf8Error) as info:
        codepoint_count(data)
    assert info.value.location == len(data)


def test_surrogate_is_rejected_at_continuation():
    prefix = b"a\xed"
    with pytest.raises(InvalidUtf8Error) as info:
        codepoint_count(prefix + b"\xa0\x80")
    assert info.value.location == len(prefix)


def test_overlong_encoding_is_rejected():
    with pytest.raises(ValueError):
        codepoint_count(b"\xc0\x80")


def test_memoryview_input():
    text = "\u00e9t\u00e9"
    assert codepoint_count(memoryview(text.encode("utf-8"))) == len(text)