"""Pairwise collision checks between game objects by collision type."""

from __future__ import annotations

from typing import Any, Callable

from spacefighter.masks import CollisionType

OnCollision = Callable[[Any, Any], None]


def _ordered(type1: CollisionType, type2: CollisionType) -> tuple[CollisionType, CollisionType]:
    return (type1, type2) if type1 < type2 else (type2, type1)


class CollisionManager:
    """Calls registered handlers when objects of two given types overlap.

    Objects need a ``collision_type``, a ``position`` and a ``collision_radius``.
    A handler receives the two objects ordered by ascending collision type.
    """

    def __init__(self) -> None:
        self._collisions: dict[tuple[CollisionType, CollisionType], OnCollision] = {}
        self._non_collisions: set[tuple[CollisionType, CollisionType]] = set()

    def add_collision_type(
        self, type1: CollisionType, type2: CollisionType, callback: OnCollision
    ) -> None:
        """Check objects of these two types for collisions, calling callback on a hit."""
        self._collisions.setdefault(_ordered(type1, type2), callback)

    def add_non_collision_type(self, type1: CollisionType, type2: CollisionType) -> None:
        """Never check objects of these two types against each other."""
        self._non_collisions.add(_ordered(type1, type2))

    def check_collision(self, first: Any, second: Any) -> None:
        """Check two objects and call the matching handler if they overlap.

        A pair of types with no handler is remembered as non-colliding.
        """
        t1 = first.collision_type
        t2 = second.collision_type
        if t1 == t2 or t1 == CollisionType.NONE or t2 == CollisionType.NONE:
            return

        if t1 > t2:
            t1, t2 = t2, t1
            first, second = second, first

        key = (t1, t2)
        if key in self._non_collisions:
            return

        callback = self._collisions.get(key)
        if callback is None:
            self.add_non_collision_type(t1, t2)
            return

        difference = first.position - second.position
        radii = first.collision_radius + second.collision_radius
        if difference.length_squared() <= radii * radii:
            callback(first, second)