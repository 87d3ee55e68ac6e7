"""Shared source of random numbers."""

from __future__ import annotations

import random
import time

_generator = random.Random()


def initialise(seed: int | None = None) -> None:
    """Seed the generator; without a seed, use the current time and report it."""
    if seed is not None:
        _generator.seed(seed)
        return
    _generator.seed(int(time.time()))
    samples = " ".join(str(rand(0, 100)) for _ in range(10))
    print(f"random initialised: {samples}")


def unit() -> float:
    """Return a number in [0, 1)."""
    return _generator.random()


def rand(minimum: float, maximum: float) -> float:
    """Return a number in [minimum, maximum)."""
    return minimum + unit() * (maximum - minimum)


def randi(minimum: int, maximum: int) -> int:
    """Return an integer in [minimum, maximum], rounded from a uniform draw."""
    return minimum + int(unit() * (maximum - minimum) + 0.5)