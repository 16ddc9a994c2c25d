"""The game: its maps, defaults and running sessions."""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from .constants import MAX_PLAYERS_IN_MAP
from .game_session import GameSession
from .maps import Map
from .model import LootGeneratorConfig


class Game:
    """Holds the maps and the sessions played on them."""

    def __init__(self) -> None:
        self._maps: dict[str, Map] = {}
        self._sessions: list[GameSession] = []
        self.default_dog_speed = 1.0
        self.default_bag_capacity = 3
        self.loot_generator_config = LootGeneratorConfig()

    @property
    def maps(self) -> tuple[Map, ...]:
        return tuple(self._maps.values())

    @property
    def sessions(self) -> tuple[GameSession, ...]:
        return tuple(self._sessions)

    def add_map(self, game_map: Map) -> None:
        if game_map.id in self._maps:
            raise ValueError(f"Map with id {game_map.id} already exists")
        self._maps[game_map.id] = game_map

    def add_session(self, session: GameSession) -> None:
        self._sessions.append(session)

    def find_map(self, map_id: str) -> Optional[Map]:
        return self._maps.get(map_id)

    def find_valid_session(self, game_map: Map, tick_period: timedelta) -> GameSession:
        """Return a session on ``game_map`` with room for a player, starting one if needed."""
        for session in self._sessions:
            if (
                session.map_name() == game_map.name
                and session.dogs_count() < MAX_PLAYERS_IN_MAP
            ):
                return session
        session = GameSession(game_map, tick_period, self.loot_generator_config)
        self.add_session(session)
        session.run()
        return session