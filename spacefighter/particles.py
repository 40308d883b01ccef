"""Particles and the objects that emit, initialize, update and draw them."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

from spacefighter.vector2 import Vector2

Color = tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)

_log = logging.getLogger(__name__)


@dataclass
class Particle:
    """A basic particle with a position, velocity, colour, scale and life span."""

    position: Vector2 = Vector2.ZERO
    velocity: Vector2 = Vector2.ZERO
    color: Color = WHITE
    scale: float = 1.0
    life_span: float = 0.0
    life_remaining: float = 0.0
    life_percentage: float = 0.0

    @property
    def is_active(self) -> bool:
        """True while the particle has life remaining."""
        return self.life_remaining > 0

    def initialize(self, position: Vector2) -> None:
        """Place the particle and give it its full life span."""
        self.position = position
        self.life_remaining = self.life_span

    def update(self, elapsed: float) -> None:
        """Age the particle by elapsed seconds and move it along its velocity."""
        self.life_remaining = max(self.life_remaining - elapsed, 0.0)
        self.life_percentage = (
            self.life_remaining / self.life_span if self.life_span else 0.0
        )
        self.position = self.position + self.velocity * elapsed


@dataclass
class ParticleInitializer:
    """Gives new particles a fixed life span, velocity, scale and colour."""

    color: Color = WHITE
    scale: float = 1.0
    life_span: float = 0.5
    velocity: Vector2 = field(default_factory=lambda: Vector2.UNIT_Y * 50)

    def initialize(self, particle: Particle, position: Vector2) -> None:
        """Set the particle's properties and start it at position."""
        particle.life_span = self.life_span
        particle.velocity = self.velocity
        particle.scale = self.scale
        particle.color = self.color
        particle.initialize(position)


class ParticleUpdater:
    """Advances particles by letting each update itself."""

    def update(self, particle: Particle, elapsed: float) -> None:
        """Update the particle by elapsed seconds."""
        particle.update(elapsed)


class ParticleRenderer:
    """Draws particles with a single texture centred on each particle."""

    def __init__(self, texture: Any = None) -> None:
        self.texture = texture

    def draw(self, particle: Particle, sprite_batch: Any) -> None:
        """Draw the particle; nothing is drawn while no texture is set."""
        if self.texture is None:
            _log.warning("No texture set for particle renderer!")
            return
        sprite_batch.draw(
            self.texture,
            particle.position,
            particle.color,
            self.texture.center,
            Vector2.ONE * particle.scale,
        )


class ParticleEmitter:
    """Emits particles from a pool at up to a fixed rate per second."""

    def __init__(self, initializer: ParticleInitializer) -> None:
        self.initializer = initializer
        self.max_particles_per_second = 100
        self.pool: Optional[Iterable[Particle]] = None
        self.position: Vector2 = Vector2.ZERO
        self.remaining_particles = 0.0

    def _inactive_particle(self) -> Optional[Particle]:
        if self.pool is None:
            raise RuntimeError("no particle pool set for the emitter")
        return next((p for p in self.pool if not p.is_active), None)

    def emit(self, amount: float, elapsed: float) -> None:
        """Emit particles; amount between 0 and 1 scales the maximum rate.

        Whole particles are taken from the pool; the fractional part, and any
        particles the pool could not supply, are added to remaining_particles.
        """
        wanted = amount * self.max_particles_per_second * elapsed
        count = int(wanted)
        self.remaining_particles += wanted - count
        while count:
            particle = self._inactive_particle()
            if particle is None:
                self.remaining_particles += count
                return
            self.initializer.initialize(particle, self.position)
            count -= 1