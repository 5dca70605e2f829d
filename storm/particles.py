"""A field of particles falling toward a central mass."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

Vector2 = tuple[float, float]


@dataclass
class Particle:
    """A point mass pulled toward the origin."""

    G: ClassVar[float] = 10.674
    MASS: ClassVar[float] = 500.0
    _MIN_DISTANCE_SQUARED: ClassVar[float] = 1000.0

    pos: Vector2
    velocity: Vector2
    acceleration: Vector2 = (0.0, 0.0)

    @classmethod
    def spawn(cls, x: float, y: float) -> Particle:
        """A particle at rest acceleration, orbiting clockwise around the origin."""
        velocity = (20.0, 0.0) if y < 0.0 else (-20.0, 0.0)
        return cls((float(x), float(y)), velocity)

    def tick(self, delta: float) -> None:
        """Advance the particle by `delta` seconds."""
        x, y = self.pos
        length_squared = x * x + y * y
        length = math.sqrt(length_squared)
        if length == 0.0:
            nx = ny = math.nan
        else:
            nx, ny = x / length, y / length
        pull = self.G * self.MASS
        denominator = max(length_squared, self._MIN_DISTANCE_SQUARED)
        ax, ay = -(nx * pull) / denominator, -(ny * pull) / denominator
        self.acceleration = (ax, ay)
        vx, vy = self.velocity[0] + ax, self.velocity[1] + ay
        self.velocity = (vx, vy)
        self.pos = (x + vx * delta, y + vy * delta)


def create_field(extent: int = 100, spacing: float = 5.0) -> list[Particle]:
    """A square grid of particles covering -extent..extent-1 on both axes."""
    return [
        Particle.spawn(x * spacing, y * spacing)
        for x in range(-extent, extent)
        for y in range(-extent, extent)
    ]