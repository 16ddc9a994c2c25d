"""JSON representations used by the game API."""

from __future__ import annotations

import math
from typing import Any

from . import constants
from .maps import Map
from .model import Building, LootType, Office, Road


def parse_query(query: str) -> dict[str, str]:
    """Split a URL query into parameters; a parameter without '=' maps to itself."""
    parts = query.split("&")
    if parts[-1] == "":
        parts.pop()
    params: dict[str, str] = {}
    for param in parts:
        key, sep, value = param.partition("=")
        params[key] = value if sep else param
    return params


def map_to_json(game_map: Map) -> dict[str, Any]:
    return {
        constants.ID: game_map.id,
        constants.NAME: game_map.name,
        constants.ROADS: [road_to_json(road) for road in game_map.roads],
        constants.BUILDINGS: [building_to_json(b) for b in game_map.buildings],
        constants.OFFICES: [office_to_json(o) for o in game_map.offices],
        constants.LOOT_TYPES: [loot_type_to_json(t) for t in game_map.loot_types],
    }


def road_to_json(road: Road) -> dict[str, int]:
    result = {constants.X0: road.start.x, constants.Y0: road.start.y}
    if road.is_horizontal():
        result[constants.X1] = road.end.x
    else:
        result[constants.Y1] = road.end.y
    return result


def building_to_json(building: Building) -> dict[str, int]:
    bounds = building.bounds
    return {
        constants.X: bounds.position.x,
        constants.Y: bounds.position.y,
        constants.W: bounds.size.width,
        constants.H: bounds.size.height,
    }


def office_to_json(office: Office) -> dict[str, Any]:
    return {
        constants.ID: office.id,
        constants.X: office.position.x,
        constants.Y: office.position.y,
        constants.OFFSET_X: office.offset.dx,
        constants.OFFSET_Y: office.offset.dy,
    }


def loot_type_to_json(loot_type: LootType) -> dict[str, Any]:
    """Serialise a loot type, leaving out the fields that are not set."""
    result: dict[str, Any] = {}
    if loot_type.name:
        result[constants.NAME] = loot_type.name
    if loot_type.file:
        result[constants.FILE] = loot_type.file
    if loot_type.type:
        result[constants.TYPE] = loot_type.type
    if loot_type.rotation is not None:
        result[constants.ROTATION] = loot_type.rotation
    if loot_type.color:
        result[constants.COLOR] = loot_type.color
    if not math.isnan(loot_type.scale):
        result[constants.SCALE] = loot_type.scale
    if loot_type.value is not None:
        result[constants.VALUE] = loot_type.value
    return result