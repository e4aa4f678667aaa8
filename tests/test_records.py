# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for capture, rehydration and record serialization."""
import json

import pytest

from cosmogen.domain.cosmic_location import CosmicLocation, restore_tree
from cosmogen.domain.derivation import StarSystemParams
from cosmogen.domain.randomness import RandomSource
from cosmogen.domain.records import LocationRecord, record_from_dict
from cosmogen.domain.structure import CosmicStructureType

_T = CosmicStructureType


@pytest.fixture(scope="module")
def system():
    return CosmicLocation.create(
        _T.STAR_SYSTEM, params=StarSystemParams(binary=True), rng=RandomSource(12)
    )


# ── Capture and rehydrate ────────────────────────────────────────────

class TestCapture:

    def test_capture_fields(self, system):
        record = system.capture()
        assert record.id == system.id
        assert record.seed == system.seed
        assert record.structure_type is _T.STAR_SYSTEM
        assert record.parent_id is None
        assert record.params == system.params

    def test_rehydrate_rederives_material(self, system):
        for node in system.walk():
            restored = CosmicLocation.from_record(node.capture())
            assert restored.material == node.material
            assert restored.orbit == node.orbit
            assert restored.position == node.position
            assert restored.absolute_position == node.absolute_position

    def test_rehydrate_keeps_ambient_temperature(self, system):
        planets = [c for c in system.children if c.structure_type is _T.PLANETOID]
        planet = planets[0]
        restored = CosmicLocation.from_record(planet.capture())
        assert restored.temperature == planet.temperature
        assert restored.ambient_temperature == planet.ambient_temperature

    def test_rehydrate_position_from_chain(self):
        node = CosmicLocation.rehydrate(
            "abc", 5, _T.GALAXY_CLUSTER, "parent",
            [(0.0, 0.0, 0.0), (1e23, 0.0, 0.0)], "Cluster",
        )
        assert node.position == (1e23, 0.0, 0.0)
        assert node.parent_id == "parent"
        assert node.material == CosmicLocation.create(_T.GALAXY_CLUSTER, seed=5).material


# ── Tree restoration ─────────────────────────────────────────────────

class TestRestoreTree:

    def test_restores_structure(self, system):
        records = [n.capture() for n in system.walk()]
        (root,) = restore_tree(records)
        assert root.id == system.id
        assert [n.id for n in root.walk()] == [n.id for n in system.walk()]
        for restored, original in zip(root.walk(), system.walk()):
            assert restored.parent_id == original.parent_id
            assert restored.mass == original.mass

    def test_orphan_records_become_roots(self, system):
        records = [n.capture() for n in system.children]
        roots = restore_tree(records)
        assert len(roots) == len(system.children)

    def test_restored_tree_is_usable(self):
        single = CosmicLocation.create(
            _T.STAR_SYSTEM, params=StarSystemParams(binary=False), rng=RandomSource(4)
        )
        (root,) = restore_tree([n.capture() for n in single.walk()])
        cloud = next(c for c in root.children if c.structure_type is _T.OORT_CLOUD)
        assert cloud.generate_children(limit=2, rng=RandomSource(3))


# ── Dict form ────────────────────────────────────────────────────────

class TestDictForm:

    def test_json_round_trip(self, system):
        for node in system.walk():
            record = node.capture()
            data = json.loads(json.dumps(record.to_dict()))
            assert LocationRecord.from_dict(data) == record

    def test_enums_stored_by_name(self, system):
        data = system.capture().to_dict()
        assert data["structure_type"] == "STAR_SYSTEM"
        assert data["params"]["star"]["star_type"] == "MAIN_SEQUENCE"

    def test_vectors_stored_as_lists(self, system):
        data = system.capture().to_dict()
        assert data["position"] == [0.0, 0.0, 0.0]
        assert data["absolute_position"] == [[0.0, 0.0, 0.0]]

    def test_minimal_dict(self):
        record = record_from_dict({"id": "x", "seed": 3, "structure_type": "NEBULA"})
        assert record.position == (0.0, 0.0, 0.0)
        assert record.params is None
        assert record.temperature == 2.73

    def test_unknown_type_raises(self):
        with pytest.raises(KeyError):
            record_from_dict({"id": "x", "seed": 3, "structure_type": "WORMHOLE"})
