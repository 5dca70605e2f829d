"""Engine core for small games: colors, assets, audio mixing, input events and the update loop."""

__version__ = "0.1.0"
__all__ = ["assets", "audio", "color", "context", "converter", "events", "particles"]