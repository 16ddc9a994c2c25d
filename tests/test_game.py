from datetime import timedelta

import pytest

from lootdogs.constants import MAX_PLAYERS_IN_MAP
from lootdogs.dog import Dog
from lootdogs.game import Game
from lootdogs.maps import Map
from lootdogs.model import LootGeneratorConfig, Point, Road


def _game_with_map():
    game = Game()
    game.loot_generator_config = LootGeneratorConfig(5.0, 0.5)
    game_map = Map("map1", "Map 1")
    game_map.add_road(Road.horizontal(Point(0, 0), 10))
    game.add_map(game_map)
    return game, game_map


def test_defaults():
    game = Game()
    assert game.default_dog_speed == 1.0
    assert game.default_bag_capacity == 3
    assert game.maps == ()


def test_find_map():
    game, game_map = _game_with_map()
    assert game.find_map("map1") is game_map
    assert game.find_map("missing") is None


def test_duplicate_map_rejected():
    game, _ = _game_with_map()
    with pytest.raises(ValueError, match="map1"):
        game.add_map(Map("map1", "Other"))
    assert len(game.maps) == 1


def test_find_valid_session_creates_and_reuses():
    game, game_map = _game_with_map()
    first = game.find_valid_session(game_map, timedelta(0))
    second = game.find_valid_session(game_map, timedelta(0))
    assert first is second
    assert game.sessions == (first,)
    assert first.map_id() == "map1"


def test_full_session_causes_new_one():
    game, game_map = _game_with_map()
    first = game.find_valid_session(game_map, timedelta(0))
    for number in range(MAX_PLAYERS_IN_MAP):
        first.add_dog(Dog(f"dog{number}"), False)
    second = game.find_valid_session(game_map, timedelta(0))
    assert second is not first
    assert len(game.sessions) == 2


def test_add_session():
    game, game_map = _game_with_map()
    session = game.find_valid_session(game_map, timedelta(0))
    other = Game()
    other.add_session(session)
    assert other.sessions == (session,)


def test_running_session_started():
    game, game_map = _game_with_map()
    session = game.find_valid_session(game_map, timedelta(milliseconds=50))
    try:
        assert session.running
    finally:
        session.stop()
    assert not session.running