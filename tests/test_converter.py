import math

import pytest

from storm.converter import (
    CharacterInput,
    CursorEnteredWindow,
    CursorLeftWindow,
    CursorPosition,
    EventConverter,
    KeyboardInput,
    MouseInput,
    MouseWheel,
    ScaleFactorChanged,
    WindowClosed,
    WindowResizedRaw,
)
from storm.events import (
    CloseRequested,
    CursorButton,
    CursorEntered,
    CursorLeft,
    CursorMoved,
    CursorPressed,
    CursorReleased,
    CursorScroll,
    KeyPressed,
    KeyReleased,
    ReceivedCharacter,
    ScrollDirection,
    WindowResized,
)


def test_initial_logical_size_divides_by_scale():
    converter = EventConverter(2.0, (800, 600))
    assert converter.logical_size == (400.0, 300.0)


def test_invalid_scale_factor_rejected():
    with pytest.raises(ValueError):
        EventConverter(0.0, (800, 600))


def test_close_requested():
    assert EventConverter(1.0, (10, 10)).convert(WindowClosed()) == [CloseRequested()]


def test_resize_reports_sizes_and_calls_back():
    calls = []
    converter = EventConverter(2.0, (800, 600), lambda p, l: calls.append((p, l)))
    events = converter.convert(WindowResizedRaw(1000, 500))
    assert events == [WindowResized((1000.0, 500.0), (500.0, 250.0))]
    assert calls == [((1000.0, 500.0), (500.0, 250.0))]


def test_scale_factor_change_updates_logical_size():
    converter = EventConverter(1.0, (800, 600))
    events = converter.convert(ScaleFactorChanged(2.0, 800, 600))
    assert events == [WindowResized((800.0, 600.0), (400.0, 300.0))]
    assert converter.scale_factor == 2.0


def test_character_and_keys():
    converter = EventConverter(1.0, (10, 10))
    assert converter.convert(CharacterInput("a")) == [ReceivedCharacter("a")]
    assert converter.convert(KeyboardInput("Escape", True)) == [KeyPressed("Escape")]
    assert converter.convert(KeyboardInput("Escape", False)) == [KeyReleased("Escape")]
    assert converter.convert(KeyboardInput(None, True)) == []


def test_cursor_centre_is_normalized_origin():
    converter = EventConverter(1.0, (800, 600))
    [event] = converter.convert(CursorPosition(400, 300))
    assert isinstance(event, CursorMoved)
    assert event.physical_pos == (400.0, 300.0)
    assert event.normalized_pos == (0.0, 0.0)
    assert event.delta == (400.0, 300.0)


def test_cursor_top_left_flips_y():
    converter = EventConverter(1.0, (800, 600))
    [event] = converter.convert(CursorPosition(0, 0))
    assert event.physical_pos == (0.0, 600.0)
    assert event.normalized_pos == (-1.0, 1.0)


def test_cursor_delta_is_logical():
    converter = EventConverter(2.0, (800, 600))
    converter.convert(CursorPosition(100, 100))
    [event] = converter.convert(CursorPosition(140, 80))
    assert event.delta == (20.0, 10.0)


def test_cursor_with_zero_size_window_does_not_raise_division():
    converter = EventConverter(1.0, (0, 0))
    [event] = converter.convert(CursorPosition(5, 0))
    assert event.physical_pos == (5.0, 0.0)
    nx, ny = event.normalized_pos
    assert nx == math.inf
    assert math.isnan(ny)


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (-1.0, 1.0, [ScrollDirection.LEFT, ScrollDirection.UP]),
        (2.0, -3.0, [ScrollDirection.RIGHT, ScrollDirection.DOWN]),
        (0.0, 1.0, [ScrollDirection.UP]),
        (0.0, 0.0, []),
    ],
)
def test_wheel_directions(x, y, expected):
    events = EventConverter(1.0, (10, 10)).convert(MouseWheel(x, y))
    assert events == [CursorScroll(d) for d in expected]


def test_mouse_buttons_carry_cursor_position():
    converter = EventConverter(1.0, (800, 600))
    converter.convert(CursorPosition(10, 100))
    assert converter.convert(MouseInput(CursorButton.LEFT, True)) == [
        CursorPressed(CursorButton.LEFT, (10.0, 500.0))
    ]
    assert converter.convert(MouseInput(CursorButton.LEFT, False)) == [
        CursorReleased(CursorButton.LEFT, (10.0, 500.0))
    ]


def test_enter_leave_and_unknown():
    converter = EventConverter(1.0, (10, 10))
    assert converter.convert(CursorEnteredWindow()) == [CursorEntered()]
    assert converter.convert(CursorLeftWindow()) == [CursorLeft()]
    assert converter.convert(object()) == []