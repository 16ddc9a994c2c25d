import dataclasses
import math

import pytest

from lootdogs.model import (
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


def test_horizontal_road():
    road = Road.horizontal(Point(0, 2), 10)
    assert road.end == Point(10, 2)
    assert road.is_horizontal()
    assert not road.is_vertical()


def test_vertical_road():
    road = Road.vertical(Point(4, 1), 7)
    assert road.end == Point(4, 7)
    assert road.is_vertical()
    assert not road.is_horizontal()


def test_point_ordering():
    assert Point(1, 2) < Point(2, 0)
    assert Point(1, 2) < Point(1, 3)
    assert Point(3, 3) > Point(1, 9)


def test_point_hashable_and_equal():
    assert {Point(1, 1), Point(1, 1)} == {Point(1, 1)}


def test_road_is_frozen():
    road = Road.horizontal(Point(0, 0), 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        road.start = Point(1, 1)


def test_loot_type_defaults():
    loot = LootType()
    assert loot.name == ""
    assert loot.rotation is None
    assert loot.value is None
    assert math.isnan(loot.scale)


def test_office_and_building_fields():
    office = Office("o1", Point(5, 6), Offset(1, -1))
    assert office.id == "o1"
    assert office.position == Point(5, 6)
    assert office.offset.dy == -1
    building = Building(Rectangle(Point(1, 2), Size(3, 4)))
    assert building.bounds.size.width == 3
    assert building.bounds.position == Point(1, 2)


def test_loot_generator_config():
    config = LootGeneratorConfig(period=5.0, probability=0.5)
    assert config.period == 5.0
    assert config.probability == 0.5