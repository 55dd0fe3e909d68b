# cborkit

Low-level building blocks for working with CBOR (RFC 7049) data in Python.

cborkit gives you the primitives that a CBOR encoder or decoder is built from:

- `cborkit.encoders` encodes type/length heads: `encode_head` picks the narrowest width, and `encode_head_uint8`, `encode_head_uint16`, `encode_head_uint32` and `encode_head_uint64` use a fixed one. Each takes the value and the major-type offset (for example `0x00` for unsigned integers and `0x20` for negative ones). A value that does not fit raises `ValueError`.
- `cborkit.encoding` encodes every CBOR item head and simple value. It covers unsigned and negative integers, the starts of byte strings, text strings, arrays and maps (definite and indefinite), tags, booleans, `null`, `undefined`, simple values (`encode_ctrl`), half-, single- and double-precision floats, and `break`. Every function returns `bytes`. `write(data, buffer)` copies encoded bytes to the start of a writable buffer and returns the count. When the buffer is too small, `write` raises `BufferTooSmallError` and leaves the buffer unchanged.
- `cborkit.loaders` reads big-endian values: `load_uint8`, `load_uint16`, `load_uint32`, `load_uint64`, `load_half`/`decode_half`, `load_float` and `load_double`. Each raises `ValueError` when given too few bytes.
- `cborkit.unicode` provides `codepoint_count`, which validates UTF-8 and counts its code points. Invalid input raises `InvalidUtf8Error`. Its `location` attribute gives the byte offset of the error.
- `cborkit.floats_ctrls` models float and control items with `FloatCtrlItem`, `FloatWidth` and `Ctrl`. It also provides the constructors `new_ctrl`, `new_float2`, `new_float4`, `new_float8`, `new_null`, `new_undef`, `build_bool`, `build_float2`, `build_float4`, `build_float8` and `build_ctrl`.

### Half-precision encoding

`encode_half` first takes the value to single precision. It keeps infinities and zeros as they are, and writes every NaN as `0x7E00`. Magnitudes below 2**-24 become zero. Magnitudes below 2**-14 keep only their sign and their power of two. All other values keep their sign, their exponent and the top 10 bits of the significand.

## Installation

```
pip install cborkit
```

## Examples

Encode item heads:

```python
from cborkit.encoding import encode_negint, encode_array_start, encode_half

encode_negint(1000)       # b'\x39\x03\xe8'  (the integer -1001)
encode_array_start(2)     # b'\x82'
encode_half(1.0)          # b'\xf9\x3c\x00'
```

Write into a preallocated buffer:

```python
from cborkit.encoding import write, encode_uint, BufferTooSmallError

buf = bytearray(8)
written = write(encode_uint(500), buf)   # 3
try:
    write(encode_uint(500), bytearray(2))
except BufferTooSmallError:
    ...
```

Decode a half-precision float and validate a text payload:

```python
from cborkit.loaders import decode_half
from cborkit.unicode import codepoint_count

decode_half(b"\x7b\xff")          # 65504.0
codepoint_count("žluť".encode())  # 4
```

Build float and control items:

```python
from cborkit.floats_ctrls import build_bool, build_float2, new_null

build_bool(True).as_bool()        # True
build_float2(0.1).as_float()      # 0.10000000149011612 (kept at single precision)
new_null().is_null                # True
```

## What it does not do

cborkit works only with single heads, values and items. It has no encoder or decoder for whole documents, and no streaming parser. It has no item types for integers, strings, arrays, maps or tags. To serialize a full document, you combine the encoders yourself.

## Running the tests

```
pip install -e ".[test]"
pytest
```