from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float: ...


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_unit(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def choose(rng: RandomSource, candidates: Sequence[T]) -> T:
    if not candidates:
        raise ValueError("Cannot choose from an empty candidate list")
    index = int(rng.random() * len(candidates))
    return candidates[min(index, len(candidates) - 1)]


def ensure_rng(rng: Optional[RandomSource]) -> RandomSource:
    if rng is None:
        return random.Random()
    return rng
