"""Loading of the game configuration from a JSON file."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from . import constants
from .dog import Dog
from .game import Game
from .maps import Map
from .model import (
    Building,
    LootGeneratorConfig,
    LootType,
    Office,
    Offset,
    Point,
    Rectangle,
    Road,
    Size,
)


def _get(obj: Any, key: str) -> Any:
    if not isinstance(obj, dict):
        raise ValueError("expected a JSON object")
    try:
        return obj[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _int(obj: Any, key: str) -> int:
    value = _get(obj, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _float(obj: Any, key: str) -> float:
    value = _get(obj, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number")
    return float(value)


def _str(obj: Any, key: str) -> str:
    value = _get(obj, key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _list(obj: Any, key: str) -> list:
    value = _get(obj, key)
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array")
    return value


def load_game(json_path: str | os.PathLike) -> Game:
    """Build a game from the configuration file at ``json_path``."""
    path = Path(json_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Failed to open file: {path}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Failed to parse JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("Failed to parse JSON: top level must be an object")

    game = Game()
    if "defaultDogSpeed" in data:
        game.default_dog_speed = _float(data, "defaultDogSpeed")
    if "defaultBagCapacity" in data:
        game.default_bag_capacity = _int(data, "defaultBagCapacity")
    if "lootGeneratorConfig" in data:
        config = _get(data, "lootGeneratorConfig")
        game.loot_generator_config = LootGeneratorConfig(
            period=_float(config, "period"),
            probability=_float(config, "probability"),
        )
    if "dogRetirementTime" in data:
        seconds = _float(data, "dogRetirementTime")
        Dog.set_retirement_time(int(seconds * 1000))

    for map_data in _list(data, constants.MAPS):
        map_id = _str(map_data, constants.ID)
        game_map = Map(map_id, _str(map_data, constants.NAME))
        game_map.dog_speed = (
            _float(map_data, "dogSpeed") if "dogSpeed" in map_data else game.default_dog_speed
        )
        game_map.bag_capacity = (
            _int(map_data, "bagCapacity")
            if "bagCapacity" in map_data
            else game.default_bag_capacity
        )
        try:
            parse_roads(map_data, game_map)
            parse_buildings(map_data, game_map)
            parse_offices(map_data, game_map)
            parse_loot_types(map_data, game_map)
        except (ValueError, TypeError) as exc:
            raise ValueError(
                f"Error while parsing map data in map: {map_id}: {exc}"
            ) from exc
        game.add_map(game_map)
    return game


def parse_roads(map_data: dict, game_map: Map) -> None:
    for road_data in _list(map_data, constants.ROADS):
        x0 = _int(road_data, constants.X0)
        y0 = _int(road_data, constants.Y0)
        x1 = _int(road_data, constants.X1) if constants.X1 in road_data else x0
        y1 = _int(road_data, constants.Y1) if constants.Y1 in road_data else y0
        start = Point(x0, y0)
        if x0 == x1:
            game_map.add_road(Road.vertical(start, y1))
        elif y0 == y1:
            game_map.add_road(Road.horizontal(start, x1))
        else:
            raise ValueError("Invalid road data in map")


def parse_buildings(map_data: dict, game_map: Map) -> None:
    for building_data in _list(map_data, constants.BUILDINGS):
        bounds = Rectangle(
            Point(_int(building_data, constants.X), _int(building_data, constants.Y)),
            Size(_int(building_data, constants.W), _int(building_data, constants.H)),
        )
        game_map.add_building(Building(bounds))


def parse_offices(map_data: dict, game_map: Map) -> None:
    for office_data in _list(map_data, constants.OFFICES):
        game_map.add_office(
            Office(
                _str(office_data, constants.ID),
                Point(_int(office_data, constants.X), _int(office_data, constants.Y)),
                Offset(
                    _int(office_data, constants.OFFSET_X),
                    _int(office_data, constants.OFFSET_Y),
                ),
            )
        )


def parse_loot_types(map_data: dict, game_map: Map) -> None:
    for loot_data in _list(map_data, constants.LOOT_TYPES):
        loot_type = LootType()
        if constants.NAME in loot_data:
            loot_type.name = _str(loot_data, constants.NAME)
        if constants.FILE in loot_data:
            loot_type.file = _str(loot_data, constants.FILE)
        if constants.TYPE in loot_data:
            loot_type.type = _str(loot_data, constants.TYPE)
        if constants.ROTATION in loot_data:
            loot_type.rotation = _int(loot_data, constants.ROTATION)
        if constants.COLOR in loot_data:
            loot_type.color = _str(loot_data, constants.COLOR)
        if constants.SCALE in loot_data:
            loot_type.scale = _float(loot_data, constants.SCALE)
        if constants.VALUE in loot_data:
            loot_type.value = _int(loot_data, constants.VALUE)
        game_map.add_loot_type(loot_type)