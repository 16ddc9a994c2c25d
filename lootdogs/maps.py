"""A game map with its roads, buildings, offices and loot types."""

from __future__ import annotations

import random
from collections import defaultdict
from typing import Optional

from .model import Building, LootType, Office, Point, Road

_NO_START = Point(-1, -1)


class Map:
    """A named map; roads are indexed by row and column for quick lookup."""

    def __init__(self, map_id: str, name: str) -> None:
        self.id = map_id
        self.name = name
        self.dog_speed = 1.0
        self.bag_capacity = 3
        self._roads: list[Road] = []
        self._buildings: list[Building] = []
        self._offices: dict[str, Office] = {}
        self._loot_types: list[LootType] = []
        self._start_point: Optional[Point] = None
        self._hor_roads: dict[int, list[Road]] = defaultdict(list)
        self._ver_roads: dict[int, list[Road]] = defaultdict(list)

    @property
    def roads(self) -> tuple[Road, ...]:
        return tuple(self._roads)

    @property
    def buildings(self) -> tuple[Building, ...]:
        return tuple(self._buildings)

    @property
    def offices(self) -> tuple[Office, ...]:
        return tuple(self._offices.values())

    @property
    def loot_types(self) -> tuple[LootType, ...]:
        return tuple(self._loot_types)

    def add_road(self, road: Road) -> None:
        self._roads.append(road)
        if self._start_point is None:
            self._start_point = road.start
        if road.is_horizontal():
            if road.start.x > road.end.x:
                road = Road.horizontal(road.end, road.start.x)
            self._hor_roads[road.start.y].append(road)
        else:
            if road.start.y > road.end.y:
                road = Road.vertical(road.end, road.start.y)
            self._ver_roads[road.start.x].append(road)

    def get_hor_road(self, x: int, y: int) -> Optional[Road]:
        """Return the horizontal road covering (x, y), normalised west to east."""
        for road in self._hor_roads.get(y, ()):
            if road.start.x <= x <= road.end.x:
                return road
        return None

    def get_ver_road(self, x: int, y: int) -> Optional[Road]:
        """Return the vertical road covering (x, y), normalised north to south."""
        for road in self._ver_roads.get(x, ()):
            if road.start.y <= y <= road.end.y:
                return road
        return None

    def add_building(self, building: Building) -> None:
        self._buildings.append(building)

    def add_office(self, office: Office) -> None:
        if office.id in self._offices:
            raise ValueError("Duplicate warehouse")
        self._offices[office.id] = office

    def add_loot_type(self, loot_type: LootType) -> None:
        self._loot_types.append(loot_type)

    def random_point_on_road(self, road: Road) -> Point:
        start, end = road.start, road.end
        if road.is_horizontal():
            low, high = sorted((start.x, end.x))
            return Point(random.randint(low, high), start.y)
        if road.is_vertical():
            low, high = sorted((start.y, end.y))
            return Point(start.x, random.randint(low, high))
        return start

    def random_point(self) -> Point:
        """Return a random grid point on a random road of the map."""
        if not self._roads:
            raise LookupError("Road list is empty")
        return self.random_point_on_road(random.choice(self._roads))

    def start_point(self) -> Point:
        """Return the start of the first road, or (-1, -1) if there is none."""
        return self._start_point if self._start_point is not None else _NO_START

    def score_by_loot_type(self, index: int) -> Optional[int]:
        return self._loot_types[index].value