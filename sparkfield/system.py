"""Container that moves particles, culls dead ones and drives emitters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from sparkfield.particles import Color, Particle, Vector2

if TYPE_CHECKING:
    from sparkfield.emitter import ParticleEmitter


class ParticleSystem:
    """All live particles and emitters inside a rectangular area."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._particles: list[Particle] = []
        self._emitters: list[ParticleEmitter] = []

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)

    def spawn_particle(
        self, position: Vector2, velocity: Vector2, color: Color, lifetime: float
    ) -> Particle:
        """Add a particle and return it."""
        particle = Particle(position, velocity, color, lifetime, lifetime)
        self._particles.append(particle)
        return particle

    def is_out_of_bounds(self, particle: Particle) -> bool:
        """Whether the particle has left the area."""
        x, y = particle.position
        return x > self.width or y > self.height or x < 0 or y < 0

    def has_expired(self, particle: Particle) -> bool:
        """Whether the particle's life is used up."""
        return particle.remaining <= 0.0

    def spawn_emitter(self, emitter: ParticleEmitter) -> None:
        """Register an emitter to be driven by :meth:`update`."""
        self._emitters.append(emitter)

    def update(self, elapsed: float) -> None:
        """Advance the simulation by ``elapsed`` seconds."""
        self._particles = [
            p for p in self._particles if not (self.has_expired(p) or self.is_out_of_bounds(p))
        ]
        for particle in self._particles:
            particle.position = particle.position + particle.velocity * elapsed
            particle.remaining -= elapsed

        for emitter in self._emitters:
            emitter.update(elapsed)
        self._emitters = [e for e in self._emitters if e.active]