"""Low-level CBOR head encoding, value loading, UTF-8 validation and float/control items."""

__version__ = "0.1.0"
__all__ = [
    "encoders",
    "encoding",
    "loaders",
    "unicode",
    "floats_ctrls",
]