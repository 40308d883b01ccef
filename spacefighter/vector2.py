"""Two-component vector used for positions, velocities and directions."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import ClassVar, Iterator


def _fmt(value: float) -> str:
    return format(value, "g")


@dataclass(frozen=True)
class Vector2:
    """An immutable vector with an x and a y component."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vector2"]
    ONE: ClassVar["Vector2"]
    UNIT_X: ClassVar["Vector2"]
    UNIT_Y: ClassVar["Vector2"]

    def length_squared(self) -> float:
        """Return the squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Return the length of the vector."""
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vector2:
        """Return a unit vector in the same direction; the zero vector is returned unchanged."""
        if self.is_zero():
            return self
        length = self.length()
        return Vector2(self.x / length, self.y / length)

    def is_zero(self) -> bool:
        """Return True if both components are zero."""
        return self.x == 0 and self.y == 0

    def dot(self, other: Vector2) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """Return the two-dimensional cross product with another vector."""
        return self.x * other.y - self.y * other.x

    @staticmethod
    def distance(a: Vector2, b: Vector2) -> float:
        """Return the distance between two vectors."""
        return math.sqrt(Vector2.distance_squared(a, b))

    @staticmethod
    def distance_squared(a: Vector2, b: Vector2) -> float:
        """Return the squared distance between two vectors."""
        dx = b.x - a.x
        dy = b.y - a.y
        return dx * dx + dy * dy

    @staticmethod
    def lerp(start: Vector2, end: Vector2, value: float) -> Vector2:
        """Interpolate linearly from start to end; value is clamped to [0, 1]."""
        if value < 0:
            return start
        if value > 1:
            return end
        return start + (end - start) * value

    @staticmethod
    def random(normalize: bool = False) -> Vector2:
        """Return a vector with components in [-1, 1), optionally normalized."""
        result = Vector2(_random.random() * 2 - 1, _random.random() * 2 - 1)
        return result.normalized() if normalize else result

    def left(self) -> Vector2:
        """Return the left-hand orthogonal vector."""
        return Vector2(-self.y, self.x)

    def right(self) -> Vector2:
        """Return the right-hand orthogonal vector."""
        return Vector2(self.y, -self.x)

    def to_point(self) -> tuple[int, int]:
        """Return the integer point, truncating each component toward zero."""
        return int(self.x), int(self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if isinstance(scalar, Vector2):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        if isinstance(scalar, Vector2):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __str__(self) -> str:
        return "{ " + _fmt(self.x) + ", " + _fmt(self.y) + " }"


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.UNIT_X = Vector2(1.0, 0.0)
Vector2.UNIT_Y = Vector2(0.0, 1.0)