"""Explosion animations."""

from __future__ import annotations

import math
import random
from typing import Any

from spacefighter.particles import WHITE
from spacefighter.vector2 import Vector2


class Explosion:
    """A one-shot explosion animation with an optional sound.

    The animation needs ``update(elapsed)``, ``get_frame(index)`` returning an
    object with a ``center``, a ``loop_count`` attribute, ``play()`` and an
    ``is_playing`` attribute.
    """

    def __init__(self, animation: Any = None, sound: Any = None) -> None:
        self.animation = animation
        self.sound = sound
        self.position: Vector2 = Vector2.ZERO
        self.rotation: float = 0.0
        self.scale: float = 1.0

    @property
    def is_active(self) -> bool:
        """True while the animation is playing."""
        return bool(self.animation.is_playing)

    def update(self, elapsed: float) -> None:
        """Advance the animation."""
        self.animation.update(elapsed)

    def draw(self, sprite_batch: Any) -> None:
        """Draw the current frame while the explosion is active."""
        if not self.is_active:
            return
        center = self.animation.get_frame(0).center
        sprite_batch.draw(
            self.animation,
            self.position,
            WHITE,
            center,
            Vector2.ONE * self.scale,
            self.rotation,
        )

    def activate(self, position: Vector2, scale: float = 1.0) -> None:
        """Start the explosion at position with a random rotation."""
        self.position = position
        self.scale = scale
        self.rotation = random.random() * 2 * math.pi
        self.animation.loop_count = 0
        self.animation.play()
        if self.sound is not None:
            self.sound.play()