"""Detection of items picked up by moving gatherers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .geom import Point2D


@dataclass(frozen=True)
class CollectionResult:
    """Squared distance to a point and the travelled fraction of the segment."""

    sq_distance: float
    proj_ratio: float

    def is_collected(self, collect_radius: float) -> bool:
        return (
            0 <= self.proj_ratio <= 1
            and self.sq_distance <= collect_radius * collect_radius
        )


def try_collect_point(a: Point2D, b: Point2D, c: Point2D) -> CollectionResult:
    """Move from ``a`` to ``b`` and try to pick up point ``c``."""
    if a.x == b.x and a.y == b.y:
        raise ValueError("gatherer movement must be non-zero")
    u_x = c.x - a.x
    u_y = c.y - a.y
    v_x = b.x - a.x
    v_y = b.y - a.y
    u_dot_v = u_x * v_x + u_y * v_y
    u_len2 = u_x * u_x + u_y * u_y
    v_len2 = v_x * v_x + v_y * v_y
    proj_ratio = u_dot_v / v_len2
    sq_distance = u_len2 - (u_dot_v * u_dot_v) / v_len2
    return CollectionResult(sq_distance, proj_ratio)


@dataclass(frozen=True)
class Item:
    position: Point2D
    width: float
    kind: int = 0


@dataclass(frozen=True)
class Gatherer:
    start_pos: Point2D
    end_pos: Point2D
    width: float


@dataclass(frozen=True)
class GatheringEvent:
    item_id: int
    gatherer_id: int
    sq_distance: float
    time: float


class ItemGathererProvider(ABC):
    """Source of items and gatherers for collision detection."""

    @abstractmethod
    def items_count(self) -> int: ...

    @abstractmethod
    def get_item(self, idx: int) -> Item: ...

    @abstractmethod
    def gatherers_count(self) -> int: ...

    @abstractmethod
    def get_gatherer(self, idx: int) -> Gatherer: ...


class ItemGathererDogProvider(ItemGathererProvider):
    """List-backed provider filled by the game session."""

    def __init__(self) -> None:
        self._items: list[Item] = []
        self._gatherers: list[Gatherer] = []

    def items_count(self) -> int:
        return len(self._items)

    def get_item(self, idx: int) -> Item:
        if not 0 <= idx < len(self._items):
            raise IndexError("Index out of range")
        return self._items[idx]

    def add_item(self, item: Item) -> None:
        self._items.append(item)

    def gatherers_count(self) -> int:
        return len(self._gatherers)

    def get_gatherer(self, idx: int) -> Gatherer:
        if not 0 <= idx < len(self._gatherers):
            raise IndexError("Index out of range")
        return self._gatherers[idx]

    def add_gatherer(self, gatherer: Gatherer) -> None:
        self._gatherers.append(gatherer)


def find_gather_events(provider: ItemGathererProvider) -> list[GatheringEvent]:
    """Return all pick-up events ordered by the time they happen."""
    events: list[GatheringEvent] = []
    for g in range(provider.gatherers_count()):
        gatherer = provider.get_gatherer(g)
        start, end = gatherer.start_pos, gatherer.end_pos
        if start.x == end.x and start.y == end.y:
            continue
        for i in range(provider.items_count()):
            item = provider.get_item(i)
            result = try_collect_point(start, end, item.position)
            if result.is_collected(gatherer.width + item.width):
                events.append(
                    GatheringEvent(
                        item_id=i,
                        gatherer_id=g,
                        sq_distance=result.sq_distance,
                        time=result.proj_ratio,
                    )
                )
    events.sort(key=lambda event: event.time)
    return events