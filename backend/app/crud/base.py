from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from app.domain.ids import HasId, IdAllocator, SequentialIdAllocator

RecordT = TypeVar("RecordT", bound=HasId)

logger = logging.getLogger(__name__)


class InMemoryStore(Generic[RecordT]):
    """Ordered collection of records addressed by integer identifier.

    Each mutation builds a new tuple and swaps it in with a single
    assignment. Update and delete ignore identifiers that are not present.
    """

    entity_name = "record"

    def __init__(
        self,
        records: Iterable[RecordT] = (),
        id_allocator: IdAllocator | None = None,
    ) -> None:
        self._records: tuple[RecordT, ...] = tuple(records)
        self._id_allocator = id_allocator or SequentialIdAllocator()

    def __len__(self) -> int:
        return len(self._records)

    def list_all(self) -> list[RecordT]:
        return list(self._records)

    def get(self, record_id: int) -> RecordT | None:
        return next(
            (record for record in self._records if record.id == record_id),
            None,
        )

    def _insert(self, build: Callable[[int], RecordT]) -> RecordT:
        record = build(self._id_allocator.next_id(self._records))
        self._records = self._records + (record,)
        logger.info("operation=%s:add id=%s", self.entity_name, record.id)
        return record

    def update(self, record: RecordT) -> None:
        if self.get(record.id) is None:
            logger.debug(
                "idempotent_skip operation=%s:update id=%s reason=not_found",
                self.entity_name,
                record.id,
            )
            return
        self._records = tuple(
            record if existing.id == record.id else existing
            for existing in self._records
        )
        logger.info("operation=%s:update id=%s", self.entity_name, record.id)

    def delete(self, record_id: int) -> None:
        remaining = tuple(
            record for record in self._records if record.id != record_id
        )
        if len(remaining) == len(self._records):
            logger.debug(
                "idempotent_skip operation=%s:delete id=%s reason=not_found",
                self.entity_name,
                record_id,
            )
            return
        self._records = remaining
        logger.info("operation=%s:delete id=%s", self.entity_name, record_id)
