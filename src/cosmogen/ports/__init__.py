# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for location persistence.

Adapters implement these to keep captured locations in memory or on disk.
"""
from typing import Iterable, Protocol, runtime_checkable

from cosmogen.domain.records import LocationRecord


@runtime_checkable
class LocationStore(Protocol):
    """Port for keeping captured locations by id."""

    def save(self, record: LocationRecord) -> None:
        """Store or replace a record."""
        ...

    def get(self, location_id: str) -> LocationRecord | None:
        """Record with the given id, or None."""
        ...

    def children_of(self, parent_id: str) -> list[LocationRecord]:
        """Records whose parent is ``parent_id``."""
        ...


@runtime_checkable
class SnapshotWriter(Protocol):
    """Port for writing a set of records to a file."""

    def write_snapshot(self, records: Iterable[LocationRecord], path: str) -> int:
        """
        Write records to ``path``.

        Returns:
            Number of records written.
        """
        ...


@runtime_checkable
class SnapshotReader(Protocol):
    """Port for reading records written by a SnapshotWriter."""

    def read_snapshot(self, path: str) -> list[LocationRecord]:
        """Read and parse a snapshot file."""
        ...
