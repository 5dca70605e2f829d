"""Turning raw window-system events into application events."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional, Union

from storm.events import (
    CloseRequested,
    CursorButton,
    CursorEntered,
    CursorLeft,
    CursorMoved,
    CursorPressed,
    CursorReleased,
    CursorScroll,
    Event,
    KeyPressed,
    KeyReleased,
    ReceivedCharacter,
    ScrollDirection,
    WindowResized,
)

Vector2 = tuple[float, float]
ResizeCallback = Callable[[Vector2, Vector2], None]


@dataclass(frozen=True)
class WindowClosed:
    """The window system asked the window to close."""


@dataclass(frozen=True)
class WindowResizedRaw:
    """The window's inner size changed, in physical pixels."""

    width: float
    height: float


@dataclass(frozen=True)
class ScaleFactorChanged:
    """The window moved to a display with another scale factor."""

    scale_factor: float
    width: float
    height: float


@dataclass(frozen=True)
class CharacterInput:
    """A character was typed."""

    char: str


@dataclass(frozen=True)
class KeyboardInput:
    """A key changed state; key is None when the key has no virtual code."""

    key: Optional[str]
    pressed: bool


@dataclass(frozen=True)
class CursorPosition:
    """The cursor is at a position in physical pixels, origin at the top left."""

    x: float
    y: float


@dataclass(frozen=True)
class MouseWheel:
    """The wheel moved by a line or pixel delta on each axis."""

    x: float
    y: float


@dataclass(frozen=True)
class MouseInput:
    """A mouse button changed state."""

    button: Union[CursorButton, int]
    pressed: bool


@dataclass(frozen=True)
class CursorEnteredWindow:
    """The cursor entered the window."""


@dataclass(frozen=True)
class CursorLeftWindow:
    """The cursor left the window."""


def _fdiv(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


class EventConverter:
    """Tracks window size and cursor state while translating raw events."""

    def __init__(
        self,
        scale_factor: float,
        physical_size: Vector2,
        on_resize: Optional[ResizeCallback] = None,
    ) -> None:
        if not scale_factor > 0:
            raise ValueError(f"scale factor must be positive, got {scale_factor!r}")
        self.scale_factor = float(scale_factor)
        width, height = physical_size
        self.physical_size: Vector2 = (float(width), float(height))
        self.logical_size: Vector2 = self._logical(self.physical_size)
        self.cursor_pos: Vector2 = (0.0, 0.0)
        self._on_resize = on_resize

    def _logical(self, physical: Vector2) -> Vector2:
        return physical[0] / self.scale_factor, physical[1] / self.scale_factor

    def _resized(self, width: float, height: float) -> WindowResized:
        self.physical_size = (float(width), float(height))
        self.logical_size = self._logical(self.physical_size)
        if self._on_resize is not None:
            self._on_resize(self.physical_size, self.logical_size)
        return WindowResized(self.physical_size, self.logical_size)

    def convert(self, event: object) -> list[Event]:
        """Translate one raw event into the application events it produces."""
        if isinstance(event, WindowClosed):
            return [CloseRequested()]
        if isinstance(event, WindowResizedRaw):
            return [self._resized(event.width, event.height)]
        if isinstance(event, ScaleFactorChanged):
            if not event.scale_factor > 0:
                raise ValueError(f"scale factor must be positive, got {event.scale_factor!r}")
            self.scale_factor = float(event.scale_factor)
            return [self._resized(event.width, event.height)]
        if isinstance(event, CharacterInput):
            return [ReceivedCharacter(event.char)]
        if isinstance(event, KeyboardInput):
            if event.key is None:
                return []
            return [KeyPressed(event.key) if event.pressed else KeyReleased(event.key)]
        if isinstance(event, CursorPosition):
            return [self._cursor_moved(event)]
        if isinstance(event, MouseWheel):
            return self._scroll(event)
        if isinstance(event, MouseInput):
            kind = CursorPressed if event.pressed else CursorReleased
            return [kind(event.button, self.cursor_pos)]
        if isinstance(event, CursorEnteredWindow):
            return [CursorEntered()]
        if isinstance(event, CursorLeftWindow):
            return [CursorLeft()]
        return []

    def _cursor_moved(self, event: CursorPosition) -> CursorMoved:
        width, height = self.physical_size
        cursor = (float(event.x), height - float(event.y))
        normalized = (
            _fdiv(cursor[0], width) * 2.0 - 1.0,
            _fdiv(cursor[1], height) * 2.0 - 1.0,
        )
        delta = (
            (cursor[0] - self.cursor_pos[0]) / self.scale_factor,
            (cursor[1] - self.cursor_pos[1]) / self.scale_factor,
        )
        self.cursor_pos = cursor
        return CursorMoved(cursor, normalized, delta)

    @staticmethod
    def _scroll(event: MouseWheel) -> list[Event]:
        events: list[Event] = []
        if event.x < 0.0:
            events.append(CursorScroll(ScrollDirection.LEFT))
        elif event.x > 0.0:
            events.append(CursorScroll(ScrollDirection.RIGHT))
        if event.y < 0.0:
            events.append(CursorScroll(ScrollDirection.DOWN))
        elif event.y > 0.0:
            events.append(CursorScroll(ScrollDirection.UP))
        return events