"""Float and control (simple value) items."""

import enum
import math
import struct
from dataclasses import dataclass


class FloatWidth(enum.Enum):
    """Width of a float item, valued by its size in bytes; 0 for ctrl items."""

    FLOAT_0 = 0
    FLOAT_16 = 2
    FLOAT_32 = 4
    FLOAT_64 = 8


class Ctrl(enum.IntEnum):
    """Well-known simple values."""

    NONE = 0
    FALSE = 20
    TRUE = 21
    NULL = 22
    UNDEF = 23


def _to_single(value):
    try:
        return struct.unpack(">f", struct.pack(">f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass
class FloatCtrlItem:
    """A float of a fixed width, or a ctrl item holding a simple value.

    Half and single precision values are kept at single precision.
    """

    width: FloatWidth
    value: float = 0.0
    ctrl: int = Ctrl.NONE

    def __post_init__(self):
        if self.is_ctrl():
            self.value = 0.0
            self.set_ctrl(self.ctrl)
        else:
            self.ctrl = Ctrl.NONE
            self.set_float(self.value)

    def is_ctrl(self):
        """Whether this is a ctrl item rather than a float."""
        return self.width is FloatWidth.FLOAT_0

    @property
    def is_bool(self):
        return self.is_ctrl() and self.ctrl in (Ctrl.TRUE, Ctrl.FALSE)

    @property
    def is_null(self):
        return self.is_ctrl() and self.ctrl == Ctrl.NULL

    @property
    def is_undef(self):
        return self.is_ctrl() and self.ctrl == Ctrl.UNDEF

    def as_float(self):
        """The value as a float of any width; NaN for ctrl items."""
        if self.is_ctrl():
            return math.nan
        return self.value

    def as_bool(self):
        """The value of a boolean ctrl item."""
        if not self.is_bool:
            raise ValueError("item is not a boolean")
        return self.ctrl == Ctrl.TRUE

    def set_float(self, value):
        """Assign a float value, rounded to the item's precision."""
        if self.is_ctrl():
            raise ValueError("cannot assign a float to a ctrl item")
        value = float(value)
        if self.width is not FloatWidth.FLOAT_64:
            value = _to_single(value)
        self.value = value

    def set_ctrl(self, value):
        """Assign a simple value; any byte is accepted."""
        if not self.is_ctrl():
            raise ValueError("cannot assign a ctrl value to a float item")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"{value} is not a valid simple value")
        try:
            self.ctrl = Ctrl(value)
        except ValueError:
            self.ctrl = value

    def set_bool(self, value):
        """Assign a boolean to a boolean ctrl item."""
        if not self.is_bool:
            raise ValueError("item is not a boolean")
        self.ctrl = Ctrl.TRUE if value else Ctrl.FALSE


def new_ctrl():
    """A new ctrl item with no simple value assigned."""
    return FloatCtrlItem(FloatWidth.FLOAT_0)


def new_float2():
    return FloatCtrlItem(FloatWidth.FLOAT_16)


def new_float4():
    return FloatCtrlItem(FloatWidth.FLOAT_32)


def new_float8():
    return FloatCtrlItem(FloatWidth.FLOAT_64)


def new_null():
    return build_ctrl(Ctrl.NULL)


def new_undef():
    return build_ctrl(Ctrl.UNDEF)


def build_bool(value):
    return build_ctrl(Ctrl.TRUE if value else Ctrl.FALSE)


def build_float2(value):
    item = new_float2()
    item.set_float(value)
    return item


def build_float4(value):
    item = new_float4()
    item.set_float(value)
    return item


def build_float8(value):
    item = new_float8()
    item.set_float(value)
    return item


def build_ctrl(value):
    item = new_ctrl()
    item.set_ctrl(value)
    return item