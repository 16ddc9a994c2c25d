"""Saving and restoring game state as plain dictionaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .constants import Direction
from .dog import Dog
from .game_session import GameSession
from .geom import Point2D
from .lost_object import LostObject


def point_to_dict(point: Point2D) -> dict[str, float]:
    return {"x": point.x, "y": point.y}


def point_from_dict(data: dict[str, Any]) -> Point2D:
    return Point2D(float(data["x"]), float(data["y"]))


@dataclass(frozen=True)
class LostObjectRepr:
    """Saved state of a lost object."""

    id: int
    type: int
    coordinates: Point2D

    @classmethod
    def from_lost_object(cls, lost_object: LostObject) -> LostObjectRepr:
        return cls(lost_object.id, lost_object.type, lost_object.coordinate)

    def restore(self) -> LostObject:
        lost_object = LostObject(self.id)
        lost_object.type = self.type
        lost_object.coordinate = self.coordinates
        return lost_object

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "coordinates": point_to_dict(self.coordinates),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LostObjectRepr:
        return cls(int(data["id"]), int(data["type"]), point_from_dict(data["coordinates"]))


@dataclass(frozen=True)
class DogRepr:
    """Saved state of a dog, including its bag."""

    id: int
    name: str
    coordinates: Point2D = Point2D(0.0, 0.0)
    speed: tuple[float, float] = (0.0, 0.0)
    direction: Direction = Direction.NORTH
    bag: tuple[LostObjectRepr, ...] = ()
    score: int = 0

    @classmethod
    def from_dog(cls, dog: Dog) -> DogRepr:
        return cls(
            id=dog.id,
            name=dog.name,
            coordinates=dog.coordinate,
            speed=dog.speed,
            direction=dog.direction,
            bag=tuple(LostObjectRepr.from_lost_object(obj) for obj in dog.bag),
            score=dog.score,
        )

    def restore(self) -> Dog:
        dog = Dog(self.name, self.id)
        dog.set_coordinate(self.coordinates)
        dog.set_speed(self.speed)
        dog.direction = self.direction
        dog.add_score(self.score)
        for item in self.bag:
            dog.add_to_bag(item.restore())
        return dog

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "coordinates": point_to_dict(self.coordinates),
            "speed": list(self.speed),
            "direction": self.direction.name,
            "bag": [item.to_dict() for item in self.bag],
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DogRepr:
        speed_x, speed_y = data["speed"]
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            coordinates=point_from_dict(data["coordinates"]),
            speed=(float(speed_x), float(speed_y)),
            direction=Direction[data["direction"]],
            bag=tuple(LostObjectRepr.from_dict(item) for item in data["bag"]),
            score=int(data["score"]),
        )


@dataclass(frozen=True)
class GameSessionRepr:
    """Saved state of a session: its map id, loot and dogs."""

    map_id: str
    lost_objects: tuple[LostObjectRepr, ...] = field(default_factory=tuple)
    dogs: tuple[DogRepr, ...] = field(default_factory=tuple)

    @classmethod
    def from_session(cls, session: GameSession) -> GameSessionRepr:
        return cls(
            map_id=session.map_id(),
            lost_objects=tuple(
                LostObjectRepr.from_lost_object(obj) for obj in session.lost_objects
            ),
            dogs=tuple(DogRepr.from_dog(dog) for dog in session.dogs),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "map_id": self.map_id,
            "lost_objects": [obj.to_dict() for obj in self.lost_objects],
            "dogs": [dog.to_dict() for dog in self.dogs],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSessionRepr:
        return cls(
            map_id=str(data["map_id"]),
            lost_objects=tuple(LostObjectRepr.from_dict(obj) for obj in data["lost_objects"]),
            dogs=tuple(DogRepr.from_dict(dog) for dog in data["dogs"]),
        )


@dataclass(frozen=True)
class PlayerRepr:
    """Saved link between a player id and its authorisation token."""

    player_id: int
    token: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.player_id, "token": self.token}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlayerRepr:
        return cls(int(data["id"]), str(data["token"]))