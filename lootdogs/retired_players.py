"""Records of players who left the game and their storage interface."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True)
class RetiredPlayer:
    """Final result of a player: name, score and play time in milliseconds."""

    name: str
    player_id: int = 0
    score: int = 0
    play_time: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def id_string(self) -> str:
        return str(self.id)


class RetiredPlayersRepository(ABC):
    """Storage of retired players' records."""

    @abstractmethod
    def save_retired_players(self, retired_players: Sequence[RetiredPlayer]) -> None:
        """Store the given records."""

    @abstractmethod
    def get_table_records(self, start: int, max_items: int) -> list[RetiredPlayer]:
        """Return records by score descending, then play time, then name."""