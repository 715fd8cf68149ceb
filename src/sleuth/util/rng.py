"""Seedable RNG wrapper for minigame shuffles."""

from __future__ import annotations

from dataclasses import dataclass
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Rng:
    seed: int | None = None

    def __post_init__(self) -> None:
        self._random = random.Random(self.seed)

    def shuffle(self, seq: list[T]) -> None:
        self._random.shuffle(seq)

    def shuffled(self, seq: Sequence[T]) -> list[T]:
        items = list(seq)
        self._random.shuffle(items)
        return items
