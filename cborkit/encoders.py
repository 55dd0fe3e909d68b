"""Encoding of CBOR item heads: the initial byte and its unsigned argument."""

import struct

_UINT8_MAX = 0xFF
_UINT16_MAX = 0xFFFF
_UINT32_MAX = 0xFFFFFFFF
_UINT64_MAX = 0xFFFFFFFFFFFFFFFF


def _check_range(value, bits):
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{value} does not fit in an unsigned {bits}-bit integer")


def encode_head_uint8(value, offset):
    """Encode an 8-bit argument, embedding values up to 23 in the initial byte."""
    _check_range(value, 8)
    if value <= 23:
        return bytes((offset + value,))
    return bytes((offset + 0x18, value))


def encode_head_uint16(value, offset):
    """Encode a 16-bit argument in its full width."""
    _check_range(value, 16)
    return struct.pack(">BH", offset + 0x19, value)


def encode_head_uint32(value, offset):
    """Encode a 32-bit argument in its full width."""
    _check_range(value, 32)
    return struct.pack(">BI", offset + 0x1A, value)


def encode_head_uint64(value, offset):
    """Encode a 64-bit argument in its full width."""
    _check_range(value, 64)
    return struct.pack(">BQ", offset + 0x1B, value)


def encode_head(value, offset):
    """Encode an argument using the narrowest width that holds it."""
    if value < 0 or value > _UINT64_MAX:
        raise ValueError(f"{value} does not fit in an unsigned 64-bit integer")
    if value <= _UINT8_MAX:
        return encode_head_uint8(value, offset)
    if value <= _UINT16_MAX:
        return encode_head_uint16(value, offset)
    if value <= _UINT32_MAX:
        return encode_head_uint32(value, offset)
    return encode_head_uint64(value, offset)