from __future__ import annotations

import random

import pytest

from calong_tick.core.exceptions import AllocationExhaustedError
from calong_tick.employees.pin_allocator import PinAllocator


class FakePins:
    def __init__(self, taken=()):
        self.taken = set(taken)
        self.lookups = 0

    def pin_exists(self, pin, *, exclude_id=None):
        self.lookups += 1
        return pin in self.taken


class ScriptedRng:
    def __init__(self, values):
        self._values = list(values)

    def randint(self, a, b):
        return self._values.pop(0)


def test_pins_are_six_digits_and_never_repeat():
    pins = FakePins()
    alloc = PinAllocator(pins, rng=random.Random(7))

    for _ in range(200):
        pin = alloc.allocate()
        assert len(pin) == 6 and pin.isdigit()
        assert 100000 <= int(pin) <= 999999
        assert pin not in pins.taken
        pins.taken.add(pin)

    assert len(pins.taken) == 200


def test_retries_past_collisions():
    pins = FakePins(taken={"111111", "222222"})
    alloc = PinAllocator(pins, rng=ScriptedRng([111111, 222222, 333333]))

    assert alloc.allocate() == "333333"
    assert pins.lookups == 3


def test_gives_up_after_the_bound():
    pins = FakePins(taken={"111111"})
    alloc = PinAllocator(pins, max_attempts=5, rng=ScriptedRng([111111] * 10))

    with pytest.raises(AllocationExhaustedError):
        alloc.allocate()
    assert pins.lookups == 5


def test_unbounded_allocator_keeps_drawing():
    pins = FakePins(taken={"111111"})
    alloc = PinAllocator(pins, max_attempts=None, rng=ScriptedRng([111111] * 50 + [444444]))

    assert alloc.allocate() == "444444"


def test_rejects_non_positive_bound():
    with pytest.raises(ValueError):
        PinAllocator(FakePins(), max_attempts=0)


class CollidingRng:
    """Replays an already assigned PIN ``repeats`` times before every fresh value."""

    def __init__(self, pins, repeats):
        self._pins = pins
        self._repeats = repeats
        self._pending = 0
        self._fresh = 100000

    def randint(self, a, b):
        if self._pending and self._pins.taken:
            self._pending -= 1
            return int(min(self._pins.taken))
        self._pending = self._repeats
        self._fresh += 1
        return self._fresh


def test_many_employees_get_distinct_pins_despite_collisions():
    pins = FakePins()
    alloc = PinAllocator(pins, max_attempts=5, rng=CollidingRng(pins, repeats=3))

    for _ in range(50):
        pins.taken.add(alloc.allocate())

    assert len(pins.taken) == 50
    # every allocation after the first had to skip three taken PINs
    assert pins.lookups == 50 + 49 * 3
