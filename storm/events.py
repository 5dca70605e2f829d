"""Input and lifecycle events delivered to an application's event handler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from storm.assets import Asset

Vector2 = tuple[float, float]


class ScrollDirection(Enum):
    """A cursor wheel movement."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class CursorButton(Enum):
    """A mouse button; other buttons are reported by their number."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


@dataclass(frozen=True)
class CloseRequested:
    """The window asked to close."""


@dataclass(frozen=True)
class ReceivedCharacter:
    """A character was typed, control characters included."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"expected a single character, got {self.char!r}")


@dataclass(frozen=True)
class KeyPressed:
    key: str


@dataclass(frozen=True)
class KeyReleased:
    key: str


@dataclass(frozen=True)
class CursorPressed:
    """A cursor button was pressed at a position."""

    button: Union[CursorButton, int]
    pos: Vector2


@dataclass(frozen=True)
class CursorReleased:
    """A cursor button was released at a position."""

    button: Union[CursorButton, int]
    pos: Vector2


@dataclass(frozen=True)
class CursorScroll:
    direction: ScrollDirection


@dataclass(frozen=True)
class CursorMoved:
    """The cursor moved.

    physical_pos has its origin at the bottom left of the window; normalized_pos
    spans -1..1 on both axes; delta is in logical units.
    """

    physical_pos: Vector2
    normalized_pos: Vector2
    delta: Vector2


@dataclass(frozen=True)
class CursorLeft:
    """The cursor left the window."""


@dataclass(frozen=True)
class CursorEntered:
    """The cursor entered the window."""


@dataclass(frozen=True)
class WindowResized:
    physical_size: Vector2
    logical_size: Vector2


@dataclass(frozen=True)
class Update:
    """Time to run the frame; delta is the seconds since the last update."""

    delta: float


@dataclass(frozen=True)
class AssetRead:
    """An asset requested earlier has finished reading."""

    asset: Asset


Event = Union[
    CloseRequested,
    ReceivedCharacter,
    KeyPressed,
    KeyReleased,
    CursorPressed,
    CursorReleased,
    CursorScroll,
    CursorMoved,
    CursorLeft,
    CursorEntered,
    WindowResized,
    Update,
    AssetRead,
]