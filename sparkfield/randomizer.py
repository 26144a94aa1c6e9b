"""Random values drawn from uniform, gaussian or Perlin-noise distributions."""

from __future__ import annotations

import math
import random
from enum import Enum

from sparkfield.particles import Vector2


class DistributionType(Enum):
    """How random values are drawn."""

    UNIFORM = "uniform"
    GAUSSIAN = "gaussian"
    PERLIN = "perlin"


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _grad(hash_value: int, x: float, y: float, z: float) -> float:
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


class Randomizer:
    """Source of random numbers with a selectable distribution."""

    def __init__(
        self,
        seed: int | None = None,
        distribution: DistributionType = DistributionType.UNIFORM,
    ) -> None:
        self._rng = random.Random(seed)
        self.distribution = distribution
        self.noise_index = 0
        self._permutation: list[int] | None = None

    def random_unsigned(self, low: int, high: int) -> int:
        """Random integer in [low, high] (both within 0..255)."""
        if self.distribution is DistributionType.GAUSSIAN:
            value = round(self._gaussian_float(float(low), float(high)))
        elif self.distribution is DistributionType.PERLIN:
            value = int(low + self._next_noise() * (high - low))
        else:
            value = self._rng.randint(low, high)
        return min(max(value, low), high)

    def random_float(self, low: float, high: float) -> float:
        """Random float between low and high."""
        if self.distribution is DistributionType.GAUSSIAN:
            return self._gaussian_float(low, high)
        if self.distribution is DistributionType.PERLIN:
            return low + self._next_noise() * (high - low)
        return self._rng.uniform(low, high)

    def random_vector(self, min_x: float, max_x: float, min_y: float, max_y: float) -> Vector2:
        """Vector whose components are drawn independently."""
        return Vector2(self.random_float(min_x, max_x), self.random_float(min_y, max_y))

    def random_directional_vector(self, direction: Vector2, angle: float) -> Vector2:
        """Rotate ``direction`` by a random amount within a cone of ``angle`` radians.

        A zero direction yields a unit vector pointing anywhere.
        """
        if direction.x == 0 and direction.y == 0:
            random_angle = self.random_float(0.0, 2 * math.pi)
            return Vector2(math.cos(random_angle), math.sin(random_angle))
        base_angle = math.atan2(direction.y, direction.x)
        random_angle = base_angle + self.random_float(-angle / 2, angle / 2)
        magnitude = direction.length()
        return Vector2(magnitude * math.cos(random_angle), magnitude * math.sin(random_angle))

    def perlin_noise_2d(self, x: float, y: float) -> float:
        """Classic gradient noise at (x, y)."""
        p = self._permutation_table()
        cell_x = math.floor(x) & 255
        cell_y = math.floor(y) & 255
        x -= math.floor(x)
        y -= math.floor(y)
        u = _fade(x)
        v = _fade(y)
        a = p[cell_x] + cell_y
        aa, ab = p[a], p[a + 1]
        b = p[cell_x + 1] + cell_y
        ba, bb = p[b], p[b + 1]
        return _lerp(
            v,
            _lerp(u, _grad(p[aa], x, y, 0), _grad(p[ba], x - 1, y, 0)),
            _lerp(u, _grad(p[ab], x, y - 1, 0), _grad(p[bb], x - 1, y - 1, 0)),
        )

    def reset_noise_index(self) -> None:
        """Restart the 1D noise sequence used by the Perlin distribution."""
        self.noise_index = 0

    def _permutation_table(self) -> list[int]:
        if self._permutation is None:
            perm = list(range(256))
            self._rng.shuffle(perm)
            self._permutation = perm + perm
        return self._permutation

    def _next_noise(self) -> float:
        value = self.perlin_noise_2d(float(self.noise_index), 0.0)
        self.noise_index += 1
        return value

    def _gaussian_float(self, low: float, high: float) -> float:
        mean = (low + high) / 2.0
        stddev = (high - low) / 6.0
        value = self._rng.gauss(mean, stddev)
        return min(max(value, low), high)