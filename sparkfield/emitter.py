"""Emitters that spawn bursts of particles into a particle system."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from sparkfield.particles import TRANSPARENT, WHITE, Color, Vector2
from sparkfield.randomizer import Randomizer

if TYPE_CHECKING:
    from sparkfield.system import ParticleSystem


class ParticleEmitter:
    """Spawns particles at a position for a limited duration."""

    def __init__(
        self,
        system: ParticleSystem,
        position: Vector2,
        randomizer: Randomizer | None = None,
    ) -> None:
        self._system = system
        self._randomizer = randomizer if randomizer is not None else Randomizer()

        self.position = position
        self.direction = Vector2(0.0, 0.0)
        self.angle = 2 * math.pi
        self.particles_per_emission = 10
        self.color: Color = WHITE
        self.start_color: Color = WHITE
        self.end_color: Color = TRANSPARENT
        self.min_lifetime = 1.0
        self.max_lifetime = 3.0
        self.min_velocity = 1.0
        self.max_velocity = 2.0

        self._duration = 2.0
        self._emission_rate = 10.0
        self._active = False
        self._time_elapsed = 0.0
        self._emission_accumulator = 0.0

    @property
    def duration(self) -> float:
        """Seconds the emitter stays active; setting it restarts the clock."""
        return self._duration

    @duration.setter
    def duration(self, value: float) -> None:
        self._duration = value
        self._time_elapsed = 0.0

    @property
    def emission_rate(self) -> float:
        """Emissions per second; setting it clears pending emission time."""
        return self._emission_rate

    @emission_rate.setter
    def emission_rate(self, value: float) -> None:
        self._emission_rate = value
        self._emission_accumulator = 0.0

    @property
    def active(self) -> bool:
        """Whether the emitter is still emitting; setting it restarts the clock."""
        return self._active

    @active.setter
    def active(self, value: bool) -> None:
        self._active = value
        self._time_elapsed = 0.0

    def set_velocity(self, low: float, high: float) -> None:
        """Range of initial particle speeds."""
        self.min_velocity = low
        self.max_velocity = high

    def set_lifetime(self, low: float, high: float) -> None:
        """Range of particle lifetimes in seconds."""
        self.min_lifetime = low
        self.max_lifetime = high

    def update(self, elapsed: float) -> None:
        """Advance the emitter clock and emit while it is active."""
        self._time_elapsed += elapsed
        self._active = self._time_elapsed < self._duration
        if self._active:
            self.emit(elapsed)

    def emit(self, elapsed: float) -> None:
        """Spawn as many bursts as the emission rate allows for ``elapsed`` seconds."""
        interval = 1.0 / self._emission_rate if self._emission_rate > 0 else math.inf
        self._emission_accumulator += elapsed
        if self._emission_accumulator < interval:
            return
        bursts = int(self._emission_accumulator / interval)
        self._emission_accumulator -= bursts * interval

        rand = self._randomizer
        for _ in range(bursts * self.particles_per_emission):
            heading = rand.random_directional_vector(self.direction, self.angle).normalized()
            velocity = heading * rand.random_float(self.min_velocity, self.max_velocity)
            lifetime = rand.random_float(self.min_lifetime, self.max_lifetime)
            self._system.spawn_particle(self.position, velocity, self.color, lifetime)