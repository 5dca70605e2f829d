"""Sounds, per-sound playback controls and a mixer that combines playing sounds."""

from __future__ import annotations

import math
import struct
from collections import deque
from collections.abc import Iterable, Sequence

Frame = tuple[float, float]

_MIN_SMOOTH = 0.01
_WORD = 0xFFFFFFFF


def _f32_bits(value: float) -> int:
    try:
        packed = struct.pack("<f", value)
    except OverflowError:
        packed = struct.pack("<f", math.copysign(math.inf, value))
    return struct.unpack("<I", packed)[0]


def _f32_from_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits & _WORD))[0]


def pack_volume(volume: float, smooth: float) -> int:
    """Pack a clamped volume and a fade duration into one 64-bit word."""
    if volume < 0.0:
        volume = 0.0
    elif volume > 1.0:
        volume = 1.0
    if smooth < _MIN_SMOOTH:
        smooth = _MIN_SMOOTH
    return (_f32_bits(volume) << 32) | _f32_bits(smooth)


def unpack_volume(packed: int) -> tuple[float, float]:
    """Split a packed word back into its volume and fade duration."""
    return _f32_from_bits(packed >> 32), _f32_from_bits(packed)


class SoundControl:
    """Controls for a playing sound, shared between the caller and the mixer."""

    def __init__(self, volume: float, smooth: float, paused: bool) -> None:
        self._volume = pack_volume(volume, smooth)
        self._paused = bool(paused)
        self._stop = False

    def set_volume(self, volume: float, smooth: float) -> None:
        """Fade to a volume in [0, 1] over `smooth` seconds."""
        self._volume = pack_volume(volume, smooth)

    def pause(self) -> None:
        """Pause the sound; it can be resumed later."""
        self._paused = True

    def resume(self) -> None:
        """Resume a paused sound."""
        self._paused = False

    def stop(self) -> None:
        """Stop the sound for good."""
        self._stop = True

    def load_volume(self) -> tuple[float, float]:
        return unpack_volume(self._volume)

    def load_paused(self) -> bool:
        return self._paused

    def load_stop(self) -> bool:
        return self._stop


class Sound:
    """Stereo samples at a fixed sample rate."""

    def __init__(self, sample_rate: float, samples: Iterable[Sequence[float]]) -> None:
        if not sample_rate > 0:
            raise ValueError(f"sample rate must be positive, got {sample_rate!r}")
        frames = []
        for frame in samples:
            left, right = frame
            frames.append((float(left), float(right)))
        self._sample_rate = float(sample_rate)
        self._samples: tuple[Frame, ...] = tuple(frames)
        self._duration = len(self._samples) / self._sample_rate

    def duration(self) -> float:
        """The length of the sound in seconds."""
        return self._duration

    def sample_rate(self) -> float:
        """Samples per second."""
        return self._sample_rate

    def sample_at(self, sample: float, amplitude: float) -> Frame:
        """The frame at a fractional sample position, interpolated and scaled."""
        if sample < 0.0:
            return 0.0, 0.0
        whole = math.trunc(sample)
        if whole + 1 >= len(self._samples):
            return 0.0, 0.0
        t = sample - whole
        (al, ar), (bl, br) = self._samples[whole], self._samples[whole + 1]
        return (al + (bl - al) * t) * amplitude, (ar + (br - ar) * t) * amplitude


class _Fade:
    """A value moving from a start to an end as progress goes from 0 to 1."""

    def __init__(self, start: float, end: float) -> None:
        self.start = start
        self.end = end
        self.progress = 0.0

    def get(self) -> float:
        return self.start + (self.end - self.start) * self.progress

    def update(self, end: float) -> None:
        self.start = self.get()
        self.end = end
        self.progress = 0.0

    def advance(self, amount: float) -> None:
        self.progress = min(self.progress + amount, 1.0)


def _perceptual(amplitude: float) -> float:
    return amplitude * amplitude


class SoundInstance:
    """One playback of a sound, driven by the mixer."""

    def __init__(self, sound: Sound, control: SoundControl) -> None:
        volume, smooth = control.load_volume()
        self._control = control
        self._sound = sound
        self._volume = _Fade(0.0, volume)
        self._paused = control.load_paused()
        self._smooth = smooth
        self._time = 0.0

    def mix(self, interval: float, frames: int) -> tuple[list[Frame], bool]:
        """Render `frames` frames; returns them and whether the sound is finished."""
        if frames < 0:
            raise ValueError(f"frame count must not be negative, got {frames}")
        silent = [(0.0, 0.0)] * frames
        if self._control.load_stop():
            return silent, True

        volume, smooth = self._control.load_volume()
        if volume != self._volume.end or smooth != self._smooth:
            self._volume.update(volume)
            self._smooth = 1.0 / smooth

        paused = self._control.load_paused()
        if self._paused and paused:
            return silent, False

        rate = interval * self._sound.sample_rate()
        first = self._time * self._sound.sample_rate()
        positions = [first + rate * index for index in range(frames)]

        if self._paused != paused:
            level = self._volume.get()
            count = max(frames, 1)
            start, step = (level, -level / count) if paused else (0.0, level / count)
            out = [
                self._sound.sample_at(position, _perceptual(start + step * index))
                for index, position in enumerate(positions)
            ]
            self._paused = paused
        elif self._volume.progress == 1.0:
            amplitude = _perceptual(self._volume.get())
            out = [self._sound.sample_at(position, amplitude) for position in positions]
        else:
            step = interval / self._smooth
            out = []
            for position in positions:
                out.append(self._sound.sample_at(position, _perceptual(self._volume.get())))
                self._volume.advance(step)

        self._time += interval * frames
        return out, self._time >= self._sound.duration()


def make_instance(
    sound: Sound, volume: float, smooth: float, paused: bool
) -> tuple[SoundControl, SoundInstance]:
    """Create a control and the playback instance it governs."""
    control = SoundControl(volume, smooth, paused)
    return control, SoundInstance(sound, control)


class Mixer:
    """Sums all playing sounds into stereo frames."""

    def __init__(self, sample_rate: float) -> None:
        if not sample_rate > 0:
            raise ValueError(f"sample rate must be positive, got {sample_rate!r}")
        self._pending: deque[SoundInstance] = deque()
        self._active: list[SoundInstance] = []
        self._interval = 1.0 / sample_rate

    def __len__(self) -> int:
        return len(self._active)

    def push(self, instance: SoundInstance) -> None:
        """Queue an instance; it starts playing on the next call to sample."""
        self._pending.append(instance)

    def play(self, sound: Sound, volume: float, smooth: float) -> SoundControl:
        """Start a sound, fading in from silence, and return its control."""
        control, instance = make_instance(sound, volume, smooth, False)
        self.push(instance)
        return control

    def sample(self, frames: int) -> list[Frame]:
        """Render the next `frames` frames of all active sounds."""
        if frames < 0:
            raise ValueError(f"frame count must not be negative, got {frames}")
        while self._pending:
            self._active.append(self._pending.popleft())

        out: list[Frame] = [(0.0, 0.0)] * frames
        still_playing = []
        for instance in self._active:
            contribution, finished = instance.mix(self._interval, frames)
            out = [(a + c, b + d) for (a, b), (c, d) in zip(out, contribution)]
            if not finished:
                still_playing.append(instance)
        self._active = still_playing
        return out