# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
In-memory location store.

Thread-safe dict keyed by location id. Useful for tests and for holding
a generated tree before it is written out.
"""
import logging
import threading
from typing import Iterable

from cosmogen.domain.records import LocationRecord
from cosmogen.ports import LocationStore

logger = logging.getLogger(__name__)


class InMemoryLocationStore(LocationStore):
    """Keeps location records in a lock-guarded dict."""

    def __init__(self, records: Iterable[LocationRecord] = ()) -> None:
        self._lock = threading.Lock()
        self._records: dict[str, LocationRecord] = {}
        for record in records:
            self.save(record)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def save(self, record: LocationRecord) -> None:
        with self._lock:
            self._records[record.id] = record
        logger.debug("stored %s (%s)", record.id, record.structure_type.name)

    def get(self, location_id: str) -> LocationRecord | None:
        with self._lock:
            return self._records.get(location_id)

    def children_of(self, parent_id: str) -> list[LocationRecord]:
        with self._lock:
            return [r for r in self._records.values() if r.parent_id == parent_id]

    def records(self) -> list[LocationRecord]:
        with self._lock:
            return list(self._records.values())
