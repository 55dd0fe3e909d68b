import pytest
from hypothesis import given
from hypothesis import strategies as st

from cborkit.encoders import (
    encode_head,
    encode_head_uint8,
    encode_head_uint16,
    encode_head_uint32,
    encode_head_uint64,
)
from cborkit.loaders import load_uint8, load_uint16, load_uint32, load_uint64

_LOADERS = {0x18: load_uint8, 0x19: load_uint16, 0x1A: load_uint32, 0x1B: load_uint64}


def _argument(head):
    info = head[0] & 0x1F
    if info < 0x18:
        return info
    return _LOADERS[info](head[1:])


@pytest.mark.parametrize(
    "value, expected",
    [
        (18446744073709551615, bytes([0x3B] + [0xFF] * 8)),
        (1000000, bytes([0x3A, 0x00, 0x0F, 0x42, 0x40])),
        (1000, bytes([0x39, 0x03, 0xE8])),
        (255, bytes([0x38, 0xFF])),
        (14, bytes([0x2E])),
    ],
)
def test_encode_head_negint_offset(value, expected):
    assert encode_head(value, 0x20) == expected


def test_fixed_width_encoders_match_known_bytes():
    assert encode_head_uint8(255, 0x20) == bytes([0x38, 0xFF])
    assert encode_head_uint16(1000, 0x20) == bytes([0x39, 0x03, 0xE8])
    assert encode_head_uint32(1000000, 0x20) == bytes([0x3A, 0x00, 0x0F, 0x42, 0x40])
    assert encode_head_uint64(18446744073709551615, 0x20) == bytes([0x3B] + [0xFF] * 8)


def test_embedded_values_use_single_byte():
    for value in range(24):
        assert encode_head_uint8(value, 0x00) == bytes([value])


@pytest.mark.parametrize(
    "value, info",
    [
        (24, 0x18),
        (0xFF, 0x18),
        (0x100, 0x19),
        (0xFFFF, 0x19),
        (0x10000, 0x1A),
        (0xFFFFFFFF, 0x1A),
        (0x100000000, 0x1B),
    ],
)
def test_encode_head_picks_narrowest_width(value, info):
    head = encode_head(value, 0x00)
    assert head[0] == info
    assert _argument(head) == value


def test_fixed_width_is_kept_for_small_values():
    head = encode_head_uint32(1, 0x00)
    assert head[0] == 0x1A
    assert load_uint32(head[1:]) == 1
    head = encode_head_uint64(1, 0x00)
    assert head[0] == 0x1B
    assert load_uint64(head[1:]) == 1


@given(
    st.integers(min_value=0, max_value=2**64 - 1),
    st.sampled_from([0x00, 0x20, 0x40, 0x60, 0x80, 0xA0, 0xC0, 0xE0]),
)
def test_encode_head_round_trip(value, offset):
    head = encode_head(value, offset)
    assert head[0] & 0xE0 == offset
    assert _argument(head) == value


@pytest.mark.parametrize(
    "func, value",
    [
        (encode_head_uint8, 256),
        (encode_head_uint16, 0x10000),
        (encode_head_uint32, 0x100000000),
        (encode_head_uint64, 2**64),
        (encode_head, 2**64),
        (encode_head, -1),
        (encode_head_uint8, -1),
    ],
)
def test_out_of_range_values_are_rejected(func, value):
    with pytest.raises(ValueError):
        func(value, 0x00)