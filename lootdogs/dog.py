"""A player's dog moving on a map and collecting loot."""

from __future__ import annotations

from datetime import timedelta
from typing import ClassVar, Optional

from .collision_detector import Gatherer
from .constants import WIDTH_PLAYER, Direction
from .geom import Point2D
from .lost_object import LostObject
from .model import Point

_MS = timedelta(milliseconds=1)


class Dog:
    """A dog with position, speed, bag and score; retires after standing still."""

    _next_id: ClassVar[int] = 0
    _retirement_time: ClassVar[timedelta] = timedelta(milliseconds=60000)

    def __init__(self, name: str, dog_id: Optional[int] = None) -> None:
        if dog_id is None:
            dog_id = Dog._next_id
            Dog._next_id += 1
        elif dog_id >= Dog._next_id:
            Dog._next_id = dog_id + 1
        self.id = dog_id
        self.name = name
        self.direction = Direction.NORTH
        self._coordinate = Point2D(0.0, 0.0)
        self._speed: tuple[float, float] = (0.0, 0.0)
        self._gatherer = Gatherer(Point2D(0.0, 0.0), Point2D(0.0, 0.0), WIDTH_PLAYER)
        self._bag: list[LostObject] = []
        self._score = 0
        self._stopped = True
        self._retired = False
        self._stopped_time = timedelta(0)
        self._game_time = timedelta(0)

    @classmethod
    def set_retirement_time(cls, retirement_time_ms: int) -> None:
        cls._retirement_time = timedelta(milliseconds=retirement_time_ms)

    @property
    def coordinate(self) -> Point2D:
        return self._coordinate

    @property
    def speed(self) -> tuple[float, float]:
        return self._speed

    @property
    def gatherer(self) -> Gatherer:
        return self._gatherer

    @property
    def bag(self) -> tuple[LostObject, ...]:
        return tuple(self._bag)

    @property
    def score(self) -> int:
        return self._score

    def set_coordinate(self, coordinates: Point2D) -> None:
        """Move the dog; the gatherer spans from the old to the new position."""
        self._gatherer = Gatherer(self._coordinate, coordinates, self._gatherer.width)
        self._coordinate = coordinates

    def set_coordinate_by_point(self, point: Point) -> None:
        self._coordinate = Point2D(float(point.x), float(point.y))

    def coordinate_after(self, time_delta: timedelta) -> Point2D:
        """Position the dog would reach after ``time_delta`` at its current speed."""
        seconds = (time_delta // _MS) / 1000
        return Point2D(
            self._coordinate.x + self._speed[0] * seconds,
            self._coordinate.y + self._speed[1] * seconds,
        )

    def set_speed(self, speed: tuple[float, float]) -> None:
        self._speed = (float(speed[0]), float(speed[1]))
        self._stopped = self._speed == (0.0, 0.0)

    def add_to_bag(self, lost_object: LostObject) -> None:
        self._bag.append(lost_object)

    def clear_bag(self) -> None:
        self._bag.clear()

    def add_score(self, score: int) -> None:
        self._score += score

    def add_time(self, time_delta: timedelta) -> None:
        self._game_time += time_delta
        if self._stopped:
            self._stopped_time += time_delta
        else:
            self._stopped_time = timedelta(0)
        if self._stopped_time >= Dog._retirement_time:
            self._retired = True

    def is_retired(self) -> bool:
        return self._retired

    def game_time(self) -> int:
        """Total time in the game, in milliseconds."""
        return self._game_time // _MS

    def __repr__(self) -> str:
        return f"Dog(id={self.id}, name={self.name!r})"