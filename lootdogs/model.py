"""Static geometry of a game map: roads, buildings, offices and loot types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, order=True)
class Point:
    """An integer position on the map grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Size:
    width: int
    height: int


@dataclass(frozen=True)
class Rectangle:
    position: Point
    size: Size


@dataclass(frozen=True)
class Offset:
    dx: int
    dy: int


@dataclass(frozen=True)
class Road:
    """A straight horizontal or vertical road segment."""

    start: Point
    end: Point

    @classmethod
    def horizontal(cls, start: Point, end_x: int) -> Road:
        return cls(start, Point(end_x, start.y))

    @classmethod
    def vertical(cls, start: Point, end_y: int) -> Road:
        return cls(start, Point(start.x, end_y))

    def is_horizontal(self) -> bool:
        return self.start.y == self.end.y

    def is_vertical(self) -> bool:
        return self.start.x == self.end.x


@dataclass(frozen=True)
class Building:
    bounds: Rectangle


@dataclass(frozen=True)
class Office:
    id: str
    position: Point
    offset: Offset


@dataclass
class LootGeneratorConfig:
    period: float = 0.0
    probability: float = 0.0


@dataclass
class LootType:
    """Description of a kind of loot; unset fields stay empty, None or NaN."""

    name: str = ""
    file: str = ""
    type: str = ""
    rotation: Optional[int] = None
    color: str = ""
    scale: float = math.nan
    value: Optional[int] = None