# storm

The core pieces of a small game engine. The package holds the state behind a
frame and does no drawing. It provides color types, a background asset loader,
a software audio mixer, typed input events, a converter from raw window input
to those events, and a paced update loop.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What's inside

- `storm.color` has the frozen color types `R8`, `RG8`, `RGB8` and `RGBA8`.
  - Components are ints in 0..255. Other values raise `ValueError` or `TypeError`.
  - `from_f32` scales unit floats to bytes. It truncates, and it clamps values
    outside 0..1.
  - `to_f32` turns a color back into unit floats.
  - `component_type()` and `layout()` return `ColorComponentType` and
    `ColorLayoutFormat` values. `ColorLayoutFormat.gpu_format()` returns the
    matching `GpuFormat`.
  - `RGB8` and `RGBA8` carry named colors such as `RGBA8.WHITE` and
    `RGBA8.TRANSPARENT`.
- `storm.assets` reads files.
  - `read_asset(path)` reads a whole file into an `Asset`. If the read fails, the
    asset's `result` holds a `LoaderError` in place of the bytes. Check it with
    `is_ok()`.
  - `AssetLoader` does the same reads on a background thread. Queue a path with
    `push_read(path)` and poll `try_pop_read()`, which returns the next finished
    `Asset` or `None`. Use the loader as a context manager, or call `close()`.
    After the loader is closed, `push_read` raises `RuntimeError`.
  - `loader_error_from_os_error` and `loader_error_from_http_status` sort failures
    into `LoaderError` categories.
- `storm.audio` plays sounds in software.
  - `Sound(sample_rate, samples)` holds stereo frames.
  - `Mixer(sample_rate)` adds all active sounds together. `play(sound, volume,
    smooth)` starts a sound, fading in from silence, and returns its
    `SoundControl`. `sample(frames)` renders that many `(left, right)` frames.
  - `SoundControl` sets the volume (clamped to 0..1, faded over `smooth` seconds,
    at least 0.01) and can pause, resume or stop a sound.
  - `make_instance` and `SoundInstance` give lower-level control.
- `storm.events` defines the event types a handler receives: `CloseRequested`,
  `ReceivedCharacter`, `KeyPressed`, `KeyReleased`, `CursorPressed`,
  `CursorReleased`, `CursorScroll`, `CursorMoved`, `CursorLeft`, `CursorEntered`,
  `WindowResized`, `Update` and `AssetRead`. It also defines the
  `ScrollDirection` and `CursorButton` enums.
- `storm.converter` has `EventConverter(scale_factor, physical_size, on_resize)`.
  - `convert(raw)` turns a raw input record into a list of events. The raw
    records are `WindowClosed`, `WindowResizedRaw`, `ScaleFactorChanged`,
    `CharacterInput`, `KeyboardInput`, `CursorPosition`, `MouseWheel`,
    `MouseInput`, `CursorEnteredWindow` and `CursorLeftWindow`.
  - It tracks the scale factor, the physical and logical size, and the cursor
    position, with the origin at the bottom left.
- `storm.context` has `Context(assets, clock)`, which runs the frame loop.
  - `run(handler_creator, sleep)` calls `handler_creator` to get the handler, then
    loops until `request_stop()` is called.
  - Each pass delivers finished asset reads as `AssetRead` events, then sends
    `Update(delta)` once the next update is due.
  - `wait_for`, `wait_until` and `wait_periodic` set when the next update may
    come.
- `storm.particles` is a gravity demo. `create_field(extent, spacing)` builds a
  grid of `Particle`s around a central mass, and `Particle.tick(delta)` moves one
  particle forward in time.

## Example

```python
from storm.assets import AssetLoader
from storm.audio import Mixer, Sound
from storm.context import Context
from storm.events import Update

mixer = Mixer(44100)
sound = Sound(44100, [(0.5, 0.5)] * 44100)
control = mixer.play(sound, 0.8, 0.05)
frames = mixer.sample(512)   # list of 512 (left, right) tuples
control.stop()

with AssetLoader() as loader:
    context = Context(loader)
    context.wait_periodic(1.0 / 60.0)
    count = 0

    def make_handler():
        def handle(event):
            nonlocal count
            if isinstance(event, Update):
                count += 1
                if count == 10:
                    context.request_stop()
        return handle

    context.run(make_handler)
```

## What it does not do

The package opens no window and draws nothing. It has no shaders, textures,
sprites or text rendering. It does not talk to an audio device: `Mixer.sample`
returns frames, and you send them to an output yourself. It does not decode
audio files. Raw window input has to be built as `storm.converter` records by
whatever window library you use. The package has no command-line program.