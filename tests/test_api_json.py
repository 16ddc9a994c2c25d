import json

from lootdogs.api_json import (
    building_to_json,
    loot_type_to_json,
    map_to_json,
    office_to_json,
    parse_query,
    road_to_json,
)
from lootdogs.json_loader import (
    parse_buildings,
    parse_loot_types,
    parse_offices,
    parse_roads,
)
from lootdogs.maps import Map
from lootdogs.model import (
    Building,
    LootType,
    Office,
    Offset,
    Point,
    Rectangle,
    Road,
    Size,
)


def _sample_map():
    game_map = Map("town", "Town")
    game_map.add_road(Road.horizontal(Point(0, 0), 40))
    game_map.add_road(Road.vertical(Point(40, 0), 30))
    game_map.add_building(Building(Rectangle(Point(5, 5), Size(30, 20))))
    game_map.add_office(Office("o0", Point(40, 30), Offset(5, 0)))
    game_map.add_loot_type(
        LootType(name="key", file="key.obj", type="obj", rotation=90, color="#338844", scale=0.03, value=10)
    )
    return game_map


def test_parse_query_pairs():
    assert parse_query("start=5&maxItems=10") == {"start": "5", "maxItems": "10"}


def test_parse_query_empty_and_bare_parameter():
    assert parse_query("") == {}
    assert parse_query("flag") == {"flag": "flag"}


def test_parse_query_value_keeps_extra_equals():
    assert parse_query("a=b=c") == {"a": "b=c"}


def test_road_to_json_uses_end_coordinate_of_axis():
    horizontal = road_to_json(Road.horizontal(Point(1, 2), 7))
    vertical = road_to_json(Road.vertical(Point(1, 2), 9))
    assert horizontal == {"x0": 1, "y0": 2, "x1": 7}
    assert vertical == {"x0": 1, "y0": 2, "y1": 9}


def test_building_and_office_keys():
    building = building_to_json(Building(Rectangle(Point(1, 2), Size(3, 4))))
    office = office_to_json(Office("o1", Point(6, 7), Offset(8, 9)))
    assert building == {"x": 1, "y": 2, "w": 3, "h": 4}
    assert office == {"id": "o1", "x": 6, "y": 7, "offsetX": 8, "offsetY": 9}


def test_unset_loot_type_fields_are_left_out():
    assert loot_type_to_json(LootType()) == {}
    assert loot_type_to_json(LootType(name="wallet", value=0)) == {"name": "wallet", "value": 0}


def test_map_to_json_round_trips_through_loader():
    original = _sample_map()
    data = json.loads(json.dumps(map_to_json(original)))
    assert data["id"] == "town"
    assert data["name"] == "Town"

    restored = Map(data["id"], data["name"])
    parse_roads(data, restored)
    parse_buildings(data, restored)
    parse_offices(data, restored)
    parse_loot_types(data, restored)

    assert restored.roads == original.roads
    assert restored.buildings == original.buildings
    assert restored.offices == original.offices
    assert restored.loot_types == original.loot_types