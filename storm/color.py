"""Colour types with 8-bit components and the pixel layouts they describe."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import ClassVar


class ColorComponentType(Enum):
    """The storage type of each colour component."""

    U8 = "unsigned_byte"
    F32 = "float"


class GpuFormat(Enum):
    """The internal format a texture takes on the graphics device."""

    R8 = "r8"
    RG8 = "rg8"
    RGB8 = "rgb8"
    RGBA8 = "rgba8"


class ColorLayoutFormat(Enum):
    """The order and count of colour components in memory."""

    R = "red"
    RG = "rg"
    RGB = "rgb"
    RGBA = "rgba"
    BGRA = "bgra"

    def gpu_format(self) -> GpuFormat:
        """The device-side format used to store colours of this layout."""
        return _GPU_FORMATS[self]


_GPU_FORMATS = {
    ColorLayoutFormat.R: GpuFormat.R8,
    ColorLayoutFormat.RG: GpuFormat.RG8,
    ColorLayoutFormat.RGB: GpuFormat.RGB8,
    ColorLayoutFormat.RGBA: GpuFormat.RGBA8,
    ColorLayoutFormat.BGRA: GpuFormat.RGBA8,
}


def _unit_to_u8(value: float) -> int:
    """Scale a unit value to a byte, truncating and saturating at the bounds."""
    scaled = float(value) * 255.0
    if math.isnan(scaled) or scaled <= 0.0:
        return 0
    if scaled >= 255.0:
        return 255
    return int(scaled)


def _u8_to_unit(value: int) -> float:
    return value / 255.0


@dataclass(frozen=True)
class _Color8:
    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"component {field.name!r} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"component {field.name!r} must be within 0..255, got {value}")


@dataclass(frozen=True)
class R8(_Color8):
    """A single red channel."""

    r: int = 0

    @classmethod
    def from_f32(cls, red: float) -> R8:
        return cls(_unit_to_u8(red))

    def to_f32(self) -> float:
        return _u8_to_unit(self.r)

    @classmethod
    def component_type(cls) -> ColorComponentType:
        """Every component is an unsigned byte."""
        return ColorComponentType.U8

    @classmethod
    def layout(cls) -> ColorLayoutFormat:
        """A single red component."""
        return ColorLayoutFormat.R


@dataclass(frozen=True)
class RG8(_Color8):
    """Red and green channels."""

    r: int = 0
    g: int = 0

    @classmethod
    def from_f32(cls, red: float, green: float) -> RG8:
        return cls(_unit_to_u8(red), _unit_to_u8(green))

    def to_f32(self) -> tuple[float, float]:
        return _u8_to_unit(self.r), _u8_to_unit(self.g)

    @classmethod
    def component_type(cls) -> ColorComponentType:
        """Every component is an unsigned byte."""
        return ColorComponentType.U8

    @classmethod
    def layout(cls) -> ColorLayoutFormat:
        """Red then green."""
        return ColorLayoutFormat.RG


@dataclass(frozen=True)
class RGB8(_Color8):
    """Red, green and blue channels."""

    RED: ClassVar[RGB8]
    PURPLE: ClassVar[RGB8]
    BLUE: ClassVar[RGB8]
    GREEN: ClassVar[RGB8]
    YELLOW: ClassVar[RGB8]
    ORANGE: ClassVar[RGB8]
    MAGENTA: ClassVar[RGB8]
    WHITE: ClassVar[RGB8]
    BLACK: ClassVar[RGB8]

    r: int = 0
    g: int = 0
    b: int = 0

    @classmethod
    def from_f32(cls, red: float, green: float, blue: float) -> RGB8:
        return cls(_unit_to_u8(red), _unit_to_u8(green), _unit_to_u8(blue))

    def to_f32(self) -> tuple[float, float, float]:
        return _u8_to_unit(self.r), _u8_to_unit(self.g), _u8_to_unit(self.b)

    @classmethod
    def component_type(cls) -> ColorComponentType:
        """Every component is an unsigned byte."""
        return ColorComponentType.U8

    @classmethod
    def layout(cls) -> ColorLayoutFormat:
        """Red, green, then blue."""
        return ColorLayoutFormat.RGB


RGB8.RED = RGB8(255, 0, 0)
RGB8.PURPLE = RGB8(128, 0, 128)
RGB8.BLUE = RGB8(0, 0, 255)
RGB8.GREEN = RGB8(0, 255, 0)
RGB8.YELLOW = RGB8(255, 255, 0)
RGB8.ORANGE = RGB8(255, 164, 0)
RGB8.MAGENTA = RGB8(255, 0, 255)
RGB8.WHITE = RGB8(255, 255, 255)
RGB8.BLACK = RGB8(0, 0, 0)


@dataclass(frozen=True)
class RGBA8(_Color8):
    """Red, green, blue and alpha channels."""

    RED: ClassVar[RGBA8]
    PURPLE: ClassVar[RGBA8]
    BLUE: ClassVar[RGBA8]
    GREEN: ClassVar[RGBA8]
    YELLOW: ClassVar[RGBA8]
    ORANGE: ClassVar[RGBA8]
    MAGENTA: ClassVar[RGBA8]
    WHITE: ClassVar[RGBA8]
    BLACK: ClassVar[RGBA8]
    TRANSPARENT: ClassVar[RGBA8]

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    @classmethod
    def from_f32(cls, red: float, green: float, blue: float, alpha: float) -> RGBA8:
        return cls(
            _unit_to_u8(red),
            _unit_to_u8(green),
            _unit_to_u8(blue),
            _unit_to_u8(alpha),
        )

    def to_f32(self) -> tuple[float, float, float, float]:
        return (
            _u8_to_unit(self.r),
            _u8_to_unit(self.g),
            _u8_to_unit(self.b),
            _u8_to_unit(self.a),
        )

    @classmethod
    def component_type(cls) -> ColorComponentType:
        """Every component is an unsigned byte."""
        return ColorComponentType.U8

    @classmethod
    def layout(cls) -> ColorLayoutFormat:
        """Red, green, blue, then alpha."""
        return ColorLayoutFormat.RGBA


RGBA8.RED = RGBA8(255, 0, 0, 255)
RGBA8.PURPLE = RGBA8(128, 0, 128, 255)
RGBA8.BLUE = RGBA8(0, 0, 255, 255)
RGBA8.GREEN = RGBA8(0, 255, 0, 255)
RGBA8.YELLOW = RGBA8(255, 255, 0, 255)
RGBA8.ORANGE = RGBA8(255, 164, 0, 255)
RGBA8.MAGENTA = RGBA8(255, 0, 255, 255)
RGBA8.WHITE = RGBA8(255, 255, 255, 255)
RGBA8.BLACK = RGBA8(0, 0, 0, 255)
RGBA8.TRANSPARENT = RGBA8(0, 0, 0, 0)