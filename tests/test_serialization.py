import json
from datetime import timedelta

from lootdogs.constants import Direction
from lootdogs.dog import Dog
from lootdogs.game_session import GameSession
from lootdogs.geom import Point2D
from lootdogs.lost_object import LostObject
from lootdogs.maps import Map
from lootdogs.model import LootGeneratorConfig, Point, Road
from lootdogs.serialization import (
    DogRepr,
    GameSessionRepr,
    LostObjectRepr,
    PlayerRepr,
    point_from_dict,
    point_to_dict,
)


def _through_json(data):
    return json.loads(json.dumps(data))


def test_point_serialization():
    p = Point2D(10, 20)
    restored = point_from_dict(_through_json(point_to_dict(p)))
    assert restored == p


def test_lost_object_serialization():
    lost_object = LostObject(2)
    lost_object.type = 1
    lost_object.coordinate = Point2D(42.2, 12.5)

    repr_ = LostObjectRepr.from_lost_object(lost_object)
    restored = LostObjectRepr.from_dict(_through_json(repr_.to_dict())).restore()

    assert restored.id == lost_object.id
    assert restored.type == lost_object.type
    assert restored.coordinate == lost_object.coordinate


def _make_dog():
    dog = Dog("rex", 7)
    dog.set_coordinate(Point2D(1.5, 2.0))
    dog.set_speed((0.0, -3.0))
    dog.direction = Direction.SOUTH
    dog.add_score(12)
    item = LostObject(4)
    item.type = 2
    dog.add_to_bag(item)
    return dog


def test_dog_round_trip():
    dog = _make_dog()
    repr_ = DogRepr.from_dog(dog)
    loaded = DogRepr.from_dict(_through_json(repr_.to_dict()))
    assert loaded == repr_

    restored = loaded.restore()
    assert restored.id == 7
    assert restored.name == "rex"
    assert restored.coordinate == Point2D(1.5, 2.0)
    assert restored.speed == (0.0, -3.0)
    assert restored.direction is Direction.SOUTH
    assert restored.score == 12
    assert [(obj.id, obj.type) for obj in restored.bag] == [(4, 2)]


def test_restored_dog_id_advances_counter():
    DogRepr(id=500, name="old").restore()
    assert Dog("new").id > 500


def test_game_session_round_trip():
    game_map = Map("map1", "Map 1")
    game_map.add_road(Road.horizontal(Point(0, 0), 10))
    session = GameSession(game_map, timedelta(0), LootGeneratorConfig(1.0, 0.5))
    session.add_dog(_make_dog())
    loot = LostObject(9)
    loot.coordinate = Point2D(3.0, 0.0)
    session.add_lost_object(loot)

    repr_ = GameSessionRepr.from_session(session)
    loaded = GameSessionRepr.from_dict(_through_json(repr_.to_dict()))

    assert loaded == repr_
    assert loaded.map_id == "map1"
    assert [obj.id for obj in loaded.lost_objects] == [9]
    assert [dog.name for dog in loaded.dogs] == ["rex"]


def test_player_round_trip():
    player = PlayerRepr(player_id=3, token="token")
    assert PlayerRepr.from_dict(_through_json(player.to_dict())) == player