"""Integer coordinates in the plane."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point:
    """A mutable integer point."""

    x: int = 0
    y: int = 0

    def translate(self, dx: int | Point, dy: int | None = None) -> Point:
        """Shift the point in place, by (dx, dy) or by another point."""
        if isinstance(dx, Point):
            if dy is not None:
                raise TypeError("translate() takes a Point or two integers")
            dx, dy = dx.x, dx.y
        elif dy is None:
            raise TypeError("translate() needs both dx and dy")
        self.x += dx
        self.y += dy
        return self

    def __str__(self) -> str:
        return f"<Point {self.x} {self.y}>"