"""Loot lying on a map or carried in a bag."""

from __future__ import annotations

import itertools
from typing import ClassVar, Optional

from .geom import Point2D
from .model import Point


class LostObject:
    """A piece of loot with an id, a loot type index and a position."""

    _ids: ClassVar[itertools.count] = itertools.count()

    def __init__(self, object_id: Optional[int] = None) -> None:
        self.id = next(LostObject._ids) if object_id is None else object_id
        self.type = 0
        self.coordinate = Point2D(0.0, 0.0)

    def set_coordinate_by_point(self, point: Point) -> None:
        self.coordinate = Point2D(float(point.x), float(point.y))

    def __repr__(self) -> str:
        return f"LostObject(id={self.id}, type={self.type}, coordinate={self.coordinate})"