# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON snapshot file I/O adapter.

A snapshot is a JSON object with a format version and a flat list of
location records; the tree is rebuilt from parent ids.
"""
import json
import logging
from typing import Iterable

from cosmogen.domain.records import LocationRecord
from cosmogen.ports import SnapshotReader, SnapshotWriter

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class JsonSnapshotReader(SnapshotReader):
    """Reads location records from JSON files."""

    def read_snapshot(self, path: str) -> list[LocationRecord]:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        version = data.get('version')
        if version != SNAPSHOT_VERSION:
            raise ValueError(f"snapshot version must be {SNAPSHOT_VERSION}, got {version}")
        return [LocationRecord.from_dict(item) for item in data.get('locations', [])]


class JsonSnapshotWriter(SnapshotWriter):
    """Writes location records to JSON files."""

    def write_snapshot(self, records: Iterable[LocationRecord], path: str) -> int:
        items = [record.to_dict() for record in records]
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(
                {'version': SNAPSHOT_VERSION, 'locations': items},
                f, indent=2, ensure_ascii=False,
            )
        logger.info("wrote %d locations to %s", len(items), path)
        return len(items)
