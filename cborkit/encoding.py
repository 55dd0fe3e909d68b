"""Encoders for single CBOR data items and item heads."""

import math
import struct

from cborkit.encoders import (
    encode_head,
    encode_head_uint8,
    encode_head_uint16,
    encode_head_uint32,
    encode_head_uint64,
)

_SIMPLE_FALSE = 20
_SIMPLE_TRUE = 21


class BufferTooSmallError(ValueError):
    """The output buffer cannot hold the encoded bytes."""


def write(data, buffer):
    """Copy ``data`` to the start of ``buffer`` and return the number of bytes written.

    The buffer is left untouched when it is too small.
    """
    size = len(data)
    if len(buffer) < size:
        raise BufferTooSmallError(
            f"buffer of {len(buffer)} bytes cannot hold {size} bytes"
        )
    buffer[:size] = data
    return size


def encode_uint8(value):
    return encode_head_uint8(value, 0x00)


def encode_uint16(value):
    return encode_head_uint16(value, 0x00)


def encode_uint32(value):
    return encode_head_uint32(value, 0x00)


def encode_uint64(value):
    return encode_head_uint64(value, 0x00)


def encode_uint(value):
    """Encode an unsigned integer in the narrowest width."""
    return encode_head(value, 0x00)


def encode_negint8(value):
    """Encode the negative integer ``-value - 1``."""
    return encode_head_uint8(value, 0x20)


def encode_negint16(value):
    return encode_head_uint16(value, 0x20)


def encode_negint32(value):
    return encode_head_uint32(value, 0x20)


def encode_negint64(value):
    return encode_head_uint64(value, 0x20)


def encode_negint(value):
    """Encode the negative integer ``-value - 1`` in the narrowest width."""
    return encode_head(value, 0x20)


def encode_bytestring_start(length):
    return encode_head(length, 0x40)


def encode_indef_bytestring_start():
    return b"\x5f"


def encode_string_start(length):
    return encode_head(length, 0x60)


def encode_indef_string_start():
    return b"\x7f"


def encode_array_start(length):
    return encode_head(length, 0x80)


def encode_indef_array_start():
    return b"\x9f"


def encode_map_start(length):
    return encode_head(length, 0xA0)


def encode_indef_map_start():
    return b"\xbf"


def encode_tag(value):
    return encode_head(value, 0xC0)


def encode_bool(value):
    """Encode a boolean as the simple value true or false."""
    return encode_ctrl(_SIMPLE_TRUE if value else _SIMPLE_FALSE)


def encode_null():
    return b"\xf6"


def encode_undef():
    return b"\xf7"


def _float32_bits(value):
    try:
        packed = struct.pack(">f", value)
    except OverflowError:
        packed = struct.pack(">f", math.copysign(math.inf, value))
    return int.from_bytes(packed, "big")


def encode_half(value):
    """Encode a value as a half-precision float.

    The value is first taken to single precision. Infinities, NaN and zeros
    are preserved; magnitudes below 2**-24 become zero, and those below
    2**-14 keep only their sign and power of two.
    """
    bits = _float32_bits(value)
    sign = (bits & 0x80000000) >> 16
    exponent = (bits & 0x7F800000) >> 23
    mantissa = bits & 0x7FFFFF
    if exponent == 0xFF:
        if mantissa:
            # CBOR requires this canonical NaN
            half = 0x7E00
        else:
            half = sign | 0x7C00
    elif exponent == 0x00:
        half = sign | mantissa >> 13
    else:
        logical_exponent = exponent - 127
        if logical_exponent < -24:
            half = 0
        elif logical_exponent < -14:
            half = sign | 1 << (24 + logical_exponent)
        else:
            half = (sign | (logical_exponent + 15) << 10 | mantissa >> 13) & 0xFFFF
    return encode_head_uint16(half, 0xE0)


def encode_single(value):
    """Encode a value as a single-precision float."""
    return encode_head_uint32(_float32_bits(value), 0xE0)


def encode_double(value):
    """Encode a value as a double-precision float."""
    bits = int.from_bytes(struct.pack(">d", value), "big")
    return encode_head_uint64(bits, 0xE0)


def encode_break():
    return b"\xff"


def encode_ctrl(value):
    """Encode a simple value."""
    return encode_head_uint8(value, 0xE0)