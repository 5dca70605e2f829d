import math

import pytest

from storm.color import (
    R8,
    RG8,
    RGB8,
    RGBA8,
    ColorComponentType,
    ColorLayoutFormat,
    GpuFormat,
)


def test_rgba_named_constants():
    assert RGBA8.RED == RGBA8(255, 0, 0, 255)
    assert RGBA8.ORANGE == RGBA8(255, 164, 0, 255)
    assert RGBA8.PURPLE == RGBA8(128, 0, 128, 255)
    assert RGBA8.TRANSPARENT == RGBA8(0, 0, 0, 0)
    assert RGBA8.BLACK.a == 255


def test_rgb_named_constants():
    assert RGB8.MAGENTA == RGB8(255, 0, 255)
    assert RGB8.YELLOW == RGB8(255, 255, 0)
    assert RGB8.WHITE == RGB8(255, 255, 255)


@pytest.mark.parametrize(
    "cls, expected",
    [
        (R8, ColorLayoutFormat.R),
        (RG8, ColorLayoutFormat.RG),
        (RGB8, ColorLayoutFormat.RGB),
        (RGBA8, ColorLayoutFormat.RGBA),
    ],
)
def test_layout_and_component_type(cls, expected):
    assert cls.layout() is expected
    assert cls.component_type() is ColorComponentType.U8


@pytest.mark.parametrize(
    "layout, expected",
    [
        (ColorLayoutFormat.R, GpuFormat.R8),
        (ColorLayoutFormat.RG, GpuFormat.RG8),
        (ColorLayoutFormat.RGB, GpuFormat.RGB8),
        (ColorLayoutFormat.RGBA, GpuFormat.RGBA8),
        (ColorLayoutFormat.BGRA, GpuFormat.RGBA8),
    ],
)
def test_gpu_format(layout, expected):
    assert layout.gpu_format() is expected


def test_from_f32_extremes():
    assert RGBA8.from_f32(1.0, 0.0, 1.0, 0.0) == RGBA8(255, 0, 255, 0)
    assert R8.from_f32(1.0) == R8(255)
    assert RG8.from_f32(0.0, 1.0) == RG8(0, 255)


def test_from_f32_saturates_out_of_range_and_nan():
    assert RGB8.from_f32(2.0, -1.0, math.nan) == RGB8(255, 0, 0)
    assert R8.from_f32(math.inf) == R8(255)
    assert R8.from_f32(-math.inf) == R8(0)


def test_to_f32_extremes():
    assert RGBA8.WHITE.to_f32() == (1.0, 1.0, 1.0, 1.0)
    assert RGBA8.TRANSPARENT.to_f32() == (0.0, 0.0, 0.0, 0.0)
    assert R8(255).to_f32() == 1.0


def test_to_f32_is_monotonic_and_in_unit_range():
    values = [R8(v).to_f32() for v in range(256)]
    assert values == sorted(values)
    assert all(0.0 <= v <= 1.0 for v in values)
    assert len(set(values)) == 256


def test_from_f32_matches_exact_byte_fractions():
    for value in (0, 1, 127, 128, 200, 255):
        assert R8.from_f32(value / 255.0 + 1e-9) == R8(value)


def test_rejects_out_of_range_components():
    with pytest.raises(ValueError):
        RGBA8(256, 0, 0, 0)
    with pytest.raises(ValueError):
        RG8(-1, 0)


def test_rejects_non_integer_components():
    with pytest.raises(TypeError):
        RGB8(1.5, 0, 0)
    with pytest.raises(TypeError):
        R8(True)


def test_colors_are_immutable_and_hashable():
    color = RGBA8(1, 2, 3, 4)
    with pytest.raises(AttributeError):
        color.r = 5
    assert {color, RGBA8(1, 2, 3, 4)} == {color}