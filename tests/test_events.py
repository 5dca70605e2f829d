import dataclasses

import pytest

from storm.assets import Asset, LoaderError
from storm.events import (
    AssetRead,
    CloseRequested,
    CursorButton,
    CursorMoved,
    CursorPressed,
    CursorScroll,
    KeyPressed,
    ReceivedCharacter,
    ScrollDirection,
    Update,
    WindowResized,
)


def _describe(event):
    match event:
        case CloseRequested():
            return "close"
        case CursorPressed(button=CursorButton.LEFT, pos=pos):
            return ("drag", pos)
        case CursorScroll(ScrollDirection.UP):
            return "zoom in"
        case Update(delta):
            return ("update", delta)
        case AssetRead(asset) if asset.is_ok():
            return ("loaded", asset.relative_path)
        case AssetRead(asset):
            return ("failed", asset.result)
        case _:
            return None


def test_pattern_matching_dispatch():
    assert _describe(CloseRequested()) == "close"
    assert _describe(CursorPressed(CursorButton.LEFT, (3.0, 4.0))) == ("drag", (3.0, 4.0))
    assert _describe(CursorPressed(CursorButton.RIGHT, (3.0, 4.0))) is None
    assert _describe(CursorScroll(ScrollDirection.UP)) == "zoom in"
    assert _describe(CursorScroll(ScrollDirection.DOWN)) is None
    assert _describe(Update(0.25)) == ("update", 0.25)


def test_asset_read_carries_result():
    ok = AssetRead(Asset.new_ok("a.bin", b"\x01\x02"))
    err = AssetRead(Asset.new_err("b.bin", LoaderError.NOT_FOUND))
    assert _describe(ok) == ("loaded", "a.bin")
    assert _describe(err) == ("failed", LoaderError.NOT_FOUND)


def test_events_compare_by_value():
    assert KeyPressed("Escape") == KeyPressed("Escape")
    assert KeyPressed("Escape") != KeyPressed("Tab")
    moved = CursorMoved((1.0, 2.0), (0.0, 0.5), (-1.0, 1.0))
    assert moved == CursorMoved((1.0, 2.0), (0.0, 0.5), (-1.0, 1.0))
    assert moved.delta == (-1.0, 1.0)


def test_events_are_immutable():
    resized = WindowResized((800.0, 600.0), (400.0, 300.0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        resized.logical_size = (1.0, 1.0)
    assert resized.logical_size == (400.0, 300.0)


def test_received_character_requires_one_character():
    assert ReceivedCharacter("\b").char == "\b"
    with pytest.raises(ValueError):
        ReceivedCharacter("ab")
    with pytest.raises(ValueError):
        ReceivedCharacter("")


def test_cursor_button_accepts_other_numbers():
    pressed = CursorPressed(7, (0.0, 0.0))
    assert pressed.button == 7
    assert _describe(pressed) is None


def test_scroll_directions():
    assert {d.name for d in ScrollDirection} == {"UP", "DOWN", "LEFT", "RIGHT"}
    scrolls = [CursorScroll(d) for d in ScrollDirection]
    assert len(set(scrolls)) == 4
    assert [_describe(s) for s in scrolls].count("zoom in") == 1