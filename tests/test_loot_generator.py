import math
from datetime import timedelta

import pytest

from lootdogs.loot_generator import LootGenerator

ONE_SECOND = timedelta(seconds=1)


def short_interval():
    seconds = 1.0 / (math.log(1 - 0.5) / math.log(1.0 - 0.25))
    return timedelta(milliseconds=int(seconds * 1000))


def test_no_loot_when_enough_for_every_looter():
    gen = LootGenerator(ONE_SECOND, 1.0)
    for looters in range(10):
        for loot in range(looters, looters + 10):
            assert gen.generate(ONE_SECOND, loot, looters) == 0


def test_loot_proportional_to_difference():
    gen = LootGenerator(ONE_SECOND, 1.0)
    for loot in range(10):
        for looters in range(loot, loot + 10):
            assert gen.generate(ONE_SECOND, loot, looters) == looters - loot


def test_longer_time_increases_loot():
    gen = LootGenerator(ONE_SECOND, 0.5)
    assert gen.generate(ONE_SECOND * 2, 0, 4) == 3


def test_shorter_time_decreases_loot():
    gen = LootGenerator(ONE_SECOND, 0.5)
    assert gen.generate(short_interval(), 0, 4) == 1


def test_custom_random_generator():
    gen = LootGenerator(ONE_SECOND, 0.5, lambda: 0.5)
    interval = short_interval()
    assert gen.generate(interval, 0, 4) == 0
    assert gen.generate(interval, 0, 4) == 1


def test_period_is_base_interval():
    assert LootGenerator(ONE_SECOND, 0.5).period == ONE_SECOND


def test_non_positive_interval_rejected():
    with pytest.raises(ValueError):
        LootGenerator(timedelta(0), 0.5)