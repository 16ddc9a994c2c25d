"""A running game on one map: dogs, loot, collection and retirement."""

from __future__ import annotations

import math
import random
import threading
import weakref
from datetime import timedelta
from typing import Callable, Optional

from .collision_detector import Item, ItemGathererDogProvider, find_gather_events
from .constants import MAX_DISTANCE_FROM_CENTER, WIDTH_BASE, WIDTH_ITEM, Direction
from .dog import Dog
from .geom import Point2D
from .loot_generator import LootGenerator
from .lost_object import LostObject
from .maps import Map
from .model import LootGeneratorConfig
from .retired_players import RetiredPlayer
from .ticker import Ticker

RetiredPlayersCallback = Callable[[list[RetiredPlayer]], None]

_LOOT_ITEM = 0
_OFFICE_ITEM = 1


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _clamp_move(dog: Dog, target: float, bound: float, sign: int) -> float:
    """Keep ``target`` within the allowed distance past ``bound`` in direction ``sign``."""
    if sign * (target - bound) <= MAX_DISTANCE_FROM_CENTER:
        return target
    dog.set_speed((0.0, 0.0))
    return bound + sign * MAX_DISTANCE_FROM_CENTER


class GameSession:
    """Dogs and loot on one map, advanced in time by ``update``."""

    def __init__(
        self,
        game_map: Map,
        tick_period: timedelta,
        loot_gen_config: LootGeneratorConfig,
        random_generator: Optional[Callable[[], float]] = None,
    ) -> None:
        self._map = game_map
        self._tick_period = tick_period
        self._loot_generator = LootGenerator(
            timedelta(milliseconds=int(loot_gen_config.period * 1000)),
            loot_gen_config.probability,
            random_generator,
        )
        self._dogs: list[Dog] = []
        self._lost_objects: list[LostObject] = []
        self._callbacks: list[RetiredPlayersCallback] = []
        self._ticker: Optional[Ticker] = None
        self._lock = threading.RLock()

    @property
    def game_map(self) -> Map:
        return self._map

    @property
    def lock(self) -> threading.RLock:
        """Lock held while the session state changes."""
        return self._lock

    @property
    def dogs(self) -> tuple[Dog, ...]:
        return tuple(self._dogs)

    @property
    def lost_objects(self) -> tuple[LostObject, ...]:
        return tuple(self._lost_objects)

    @property
    def running(self) -> bool:
        return self._ticker is not None and self._ticker.running

    def add_dog(self, dog: Dog, randomize_spawn_points: Optional[bool] = None) -> None:
        """Add a dog; with a spawn flag it is placed on a road first."""
        with self._lock:
            if randomize_spawn_points is not None:
                if randomize_spawn_points:
                    dog.set_coordinate_by_point(self._map.random_point())
                else:
                    dog.set_coordinate_by_point(self._map.start_point())
            if not any(existing is dog for existing in self._dogs):
                self._dogs.append(dog)

    def map_name(self) -> str:
        return self._map.name

    def map_id(self) -> str:
        return self._map.id

    def dogs_count(self) -> int:
        return len(self._dogs)

    def add_lost_object(self, lost_object: LostObject) -> None:
        with self._lock:
            if not any(existing is lost_object for existing in self._lost_objects):
                self._lost_objects.append(lost_object)

    def random_loot_type(self) -> int:
        """Return a random index into the map's loot types."""
        count = len(self._map.loot_types)
        if count == 0:
            raise LookupError("map has no loot types")
        return random.randint(0, count - 1)

    def update(self, time_delta: timedelta) -> None:
        """Advance the session by ``time_delta``."""
        with self._lock:
            self.update_dogs_coordinates(time_delta)
            self.update_loot_generation(time_delta)
            self.collect()
            self.delete_retired_dogs()

    def update_dogs_coordinates(self, time_delta: timedelta) -> None:
        with self._lock:
            for dog in self._dogs:
                dog.add_time(time_delta)
                dog.set_coordinate(self._next_position(dog, time_delta))

    def _next_position(self, dog: Dog, time_delta: timedelta) -> Point2D:
        start = dog.coordinate
        start_x = _round_half_away(start.x)
        start_y = _round_half_away(start.y)
        target = dog.coordinate_after(time_delta)
        direction = dog.direction

        if direction in (Direction.EAST, Direction.WEST):
            road = self._map.get_hor_road(start_x, start_y)
            if direction is Direction.EAST:
                bound = road.end.x if road else start_x
                x = _clamp_move(dog, target.x, float(bound), 1)
            else:
                bound = road.start.x if road else start_x
                x = _clamp_move(dog, target.x, float(bound), -1)
            return Point2D(x, start.y)

        if direction in (Direction.NORTH, Direction.SOUTH):
            road = self._map.get_ver_road(start_x, start_y)
            if direction is Direction.SOUTH:
                bound = road.end.y if road else start_y
                y = _clamp_move(dog, target.y, float(bound), 1)
            else:
                bound = road.start.y if road else start_y
                y = _clamp_move(dog, target.y, float(bound), -1)
            return Point2D(start.x, y)

        return start

    def update_loot_generation(self, time_delta: timedelta) -> None:
        with self._lock:
            new_count = self._loot_generator.generate(
                time_delta, len(self._lost_objects), len(self._dogs)
            )
            for _ in range(new_count):
                lost_object = LostObject()
                lost_object.set_coordinate_by_point(self._map.random_point())
                lost_object.type = self.random_loot_type()
                self._lost_objects.append(lost_object)

    def collect(self) -> None:
        """Let dogs pick up loot along their last move and hand it in at offices."""
        with self._lock:
            provider = ItemGathererDogProvider()
            loot_refs: dict[int, Optional[LostObject]] = {}

            for index, lost_object in enumerate(self._lost_objects):
                provider.add_item(Item(lost_object.coordinate, WIDTH_ITEM, _LOOT_ITEM))
                loot_refs[index] = lost_object

            for office in self._map.offices:
                position = Point2D(float(office.position.x), float(office.position.y))
                provider.add_item(Item(position, WIDTH_BASE, _OFFICE_ITEM))

            dogs = list(self._dogs)
            for dog in dogs:
                provider.add_gatherer(dog.gatherer)

            for event in find_gather_events(provider):
                item = provider.get_item(event.item_id)
                dog = dogs[event.gatherer_id]
                if item.kind == _LOOT_ITEM:
                    lost_object = loot_refs.get(event.item_id)
                    if lost_object is None:
                        continue
                    if len(dog.bag) < self._map.bag_capacity:
                        dog.add_to_bag(lost_object)
                        loot_refs[event.item_id] = None
                        self._lost_objects = [
                            obj for obj in self._lost_objects if obj is not lost_object
                        ]
                elif item.kind == _OFFICE_ITEM:
                    for carried in dog.bag:
                        dog.add_score(carried.type)
                    dog.clear_bag()

    def delete_retired_dogs(self) -> None:
        """Remove retired dogs and report them to the connected callbacks."""
        with self._lock:
            retired = [dog for dog in self._dogs if dog.is_retired()]
            if not retired:
                return
            self._dogs = [dog for dog in self._dogs if not dog.is_retired()]
            records = [
                RetiredPlayer(
                    name=dog.name,
                    player_id=dog.id,
                    score=dog.score,
                    play_time=dog.game_time(),
                )
                for dog in retired
            ]
            callbacks = list(self._callbacks)
        for callback in callbacks:
            callback(list(records))

    def connect_retired_players(self, callback: RetiredPlayersCallback) -> Callable[[], None]:
        """Register ``callback``; the returned function disconnects it."""
        self._callbacks.append(callback)

        def disconnect() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return disconnect

    def run(self) -> None:
        """Start automatic updates when the tick period is non-zero."""
        if self._tick_period == timedelta(0) or self._ticker is not None:
            return
        session_ref = weakref.ref(self)

        def on_tick(delta: timedelta) -> None:
            session = session_ref()
            if session is not None:
                session.update(delta)

        self._ticker = Ticker(self._tick_period, on_tick)
        self._ticker.start()

    def stop(self) -> None:
        """Stop automatic updates."""
        if self._ticker is not None:
            self._ticker.stop()
            self._ticker = None