"""
Identifier allocation for the in-memory stores.

``SequentialIdAllocator`` is the default: a per-store counter that only moves
forward and always lands past the highest identifier present, so an
identifier is never handed out twice in a process.

``LengthIdAllocator`` reproduces the original dashboard, which used the
collection length plus one. After a deletion that value can collide with a
record still in the store. It is kept for compatibility only
(``ID_STRATEGY=length``).
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class HasId(Protocol):
    id: int


class IdAllocator(Protocol):
    def next_id(self, records: Sequence[HasId]) -> int:
        ...


class SequentialIdAllocator:
    def __init__(self) -> None:
        self._last_issued = 0

    def next_id(self, records: Sequence[HasId]) -> int:
        highest = max((record.id for record in records), default=0)
        self._last_issued = max(self._last_issued, highest) + 1
        return self._last_issued


class LengthIdAllocator:
    def next_id(self, records: Sequence[HasId]) -> int:
        return len(records) + 1


def build_id_allocator(strategy: str) -> IdAllocator:
    if strategy == "sequence":
        return SequentialIdAllocator()
    if strategy == "length":
        return LengthIdAllocator()
    raise ValueError(f"Unknown id strategy '{strategy}'")
