import dataclasses
import uuid

import pytest

from lootdogs.retired_players import RetiredPlayer, RetiredPlayersRepository


def test_id_string_round_trip():
    player = RetiredPlayer(name="rex", player_id=1, score=10, play_time=2000)
    assert uuid.UUID(player.id_string()) == player.id


def test_explicit_id():
    text = "12345678-1234-5678-1234-567812345678"
    player = RetiredPlayer(name="rex", id=uuid.UUID(text))
    assert player.id_string() == text


def test_default_ids_are_unique():
    ids = {RetiredPlayer(name="rex").id for _ in range(50)}
    assert len(ids) == 50


def test_fields():
    player = RetiredPlayer(name="rex", player_id=3, score=15, play_time=4200)
    assert (player.name, player.player_id, player.score, player.play_time) == (
        "rex",
        3,
        15,
        4200,
    )


def test_record_is_frozen():
    player = RetiredPlayer(name="rex", score=3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        player.score = 5
    assert player.score == 3


def test_repository_is_abstract():
    with pytest.raises(TypeError):
        RetiredPlayersRepository()