"""Invariant checks for case data."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def ensure_unique_ids(ids: Iterable[str], label: str) -> None:
    counts = Counter(ids)
    duplicates = sorted(key for key, count in counts.items() if count > 1)
    if duplicates:
        raise ValueError(f"Duplicate {label} id(s): {', '.join(duplicates)}")


def ensure_single_match(target: str, ids: Iterable[str], label: str) -> None:
    matches = sum(1 for value in ids if value == target)
    if matches != 1:
        raise ValueError(f"{label} id {target!r} must match exactly one entry, found {matches}")


def ensure_permutation(order: Iterable[str], ids: Iterable[str], label: str) -> None:
    if sorted(order) != sorted(ids):
        raise ValueError(f"{label} must list every item id exactly once")


def ensure_index(index: int, size: int, label: str) -> None:
    if not 0 <= index < size:
        raise ValueError(f"{label} {index} is out of range for {size} option(s)")
