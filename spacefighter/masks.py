"""Bit-mask types for collisions and weapon triggers."""

from __future__ import annotations

from enum import IntFlag


class CollisionType(IntFlag):
    """Collision categories that combine, e.g. PLAYER | PROJECTILE."""

    NONE = 0
    PLAYER = 1 << 0
    ENEMY = 1 << 1
    SHIP = 1 << 2
    PROJECTILE = 1 << 3

    def contains(self, other: CollisionType) -> bool:
        """Return True if the two masks share any bit."""
        return (int(self) & int(other)) > 0


class TriggerType(IntFlag):
    """Triggers that can fire weapons."""

    NONE = 0
    PRIMARY = 1 << 0
    SECONDARY = 1 << 1
    SPECIAL = 1 << 2
    ALL = 0xFFFF

    def contains(self, other: TriggerType) -> bool:
        """Return True if the two masks share any bit."""
        return (int(self) & int(other)) > 0