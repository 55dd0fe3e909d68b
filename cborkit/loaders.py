"""Reading big-endian integers and floats from CBOR payloads."""

import math
import struct


def _take(source, size):
    if len(source) < size:
        raise ValueError(f"need {size} bytes, got {len(source)}")
    return bytes(source[:size])


def load_uint8(source):
    return _take(source, 1)[0]


def load_uint16(source):
    return int.from_bytes(_take(source, 2), "big")


def load_uint32(source):
    return int.from_bytes(_take(source, 4), "big")


def load_uint64(source):
    return int.from_bytes(_take(source, 8), "big")


def decode_half(source):
    """Decode a big-endian half-precision float."""
    half = load_uint16(source)
    exponent = (half >> 10) & 0x1F
    mantissa = half & 0x3FF
    if exponent == 0:
        value = math.ldexp(mantissa, -24)
    elif exponent != 31:
        value = math.ldexp(mantissa + 1024, exponent - 25)
    else:
        value = math.inf if mantissa == 0 else math.nan
    return -value if half & 0x8000 else value


def load_half(source):
    return decode_half(source)


def load_float(source):
    """Decode a big-endian single-precision float."""
    return struct.unpack(">f", _take(source, 4))[0]


def load_double(source):
    """Decode a big-endian double-precision float."""
    return struct.unpack(">d", _take(source, 8))[0]