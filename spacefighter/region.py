"""Axis-aligned rectangular regions."""

from __future__ import annotations

from dataclasses import dataclass

from spacefighter.vector2 import Vector2

Point = tuple[int, int]


@dataclass
class Region:
    """A rectangle given by its top-left corner, width and height."""

    x: int = 0
    y: int = 0
    width: int = 1
    height: int = 1

    @classmethod
    def from_corner(cls, position: Point, size: Point) -> Region:
        """Build a region from its top-left corner and a (width, height) pair."""
        return cls(position[0], position[1], size[0], size[1])

    def set(self, x: int, y: int, width: int, height: int) -> None:
        """Replace all four components."""
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top_left(self) -> Point:
        return (self.left, self.top)

    @property
    def top_right(self) -> Point:
        return (self.right, self.top)

    @property
    def bottom_left(self) -> Point:
        return (self.left, self.bottom)

    @property
    def bottom_right(self) -> Point:
        return (self.right, self.bottom)

    @property
    def center(self) -> Vector2:
        """The centre of the region."""
        return Vector2(self.x, self.y) + Vector2(self.width, self.height) / 2

    def translate(self, x: int | Point, y: int | None = None) -> None:
        """Move the region by (x, y), or by a point given as the only argument."""
        if y is None:
            dx, dy = x  # type: ignore[misc]
        else:
            dx, dy = x, y
        self.x += dx
        self.y += dy