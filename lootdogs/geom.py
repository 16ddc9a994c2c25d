"""Plain 2D vector and point types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Vec2D:
    """A displacement on the plane."""

    x: float = 0.0
    y: float = 0.0

    def __mul__(self, scale: float) -> Vec2D:
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Vec2D(self.x * scale, self.y * scale)

    def __rmul__(self, scale: float) -> Vec2D:
        return self.__mul__(scale)


@dataclass(frozen=True, order=True)
class Point2D:
    """A position on the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, vec: Vec2D) -> Point2D:
        if not isinstance(vec, Vec2D):
            return NotImplemented
        return Point2D(self.x + vec.x, self.y + vec.y)

    def __radd__(self, vec: Vec2D) -> Point2D:
        return self.__add__(vec)