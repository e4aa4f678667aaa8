# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for density tables and child count sampling."""
import pytest

from cosmogen.domain.child_definitions import ChildDefinition, child_definitions_for
from cosmogen.domain.population import choose_definition, draw_counts, expected_counts
from cosmogen.domain.randomness import RandomSource
from cosmogen.domain.structure import CosmicStructureType

_T = CosmicStructureType


def _definition(density, structure_type=_T.STAR_SYSTEM):
    return ChildDefinition(structure_type, 1.0, density)


# ── Density tables ───────────────────────────────────────────────────

class TestChildDefinitions:

    @pytest.mark.parametrize("structure_type", [
        _T.UNIVERSE, _T.SUPERCLUSTER, _T.GALAXY_CLUSTER, _T.GALAXY_SUBGROUP,
        _T.SPIRAL_GALAXY, _T.ELLIPTICAL_GALAXY, _T.DWARF_GALAXY,
        _T.GLOBULAR_CLUSTER, _T.HII_REGION, _T.ASTEROID_FIELD, _T.OORT_CLOUD,
    ])
    def test_populated_types_have_tables(self, structure_type):
        assert len(child_definitions_for(structure_type)) > 0

    @pytest.mark.parametrize("structure_type", [
        _T.GALAXY_GROUP, _T.STAR_SYSTEM, _T.STAR, _T.PLANETOID,
        _T.BLACK_HOLE, _T.NEBULA, _T.PLANETARY_NEBULA,
    ])
    def test_leaf_and_interior_types_have_none(self, structure_type):
        assert child_definitions_for(structure_type) == ()

    def test_star_system_entries_carry_star_params(self):
        for d in child_definitions_for(_T.SPIRAL_GALAXY):
            if d.structure_type is _T.STAR_SYSTEM:
                assert d.star is not None
            if d.structure_type is _T.PLANETOID:
                assert d.planet_type is not None

    @pytest.mark.parametrize("space,density", [(0.0, 1.0), (1.0, 0.0), (1.0, float("inf"))])
    def test_invalid_definition_raises(self, space, density):
        with pytest.raises(ValueError):
            ChildDefinition(_T.STAR, space, density)


# ── Counts ───────────────────────────────────────────────────────────

class TestCounts:

    def test_expected_counts(self):
        defs = [_definition(1e-3), _definition(2e-3)]
        assert expected_counts(defs, 1000.0) == pytest.approx([1.0, 2.0])

    def test_mean_converges(self):
        defs = [_definition(0.5)]
        rng = RandomSource(4)
        total = sum(draw_counts(defs, 10.0, rng)[0] for _ in range(2000))
        assert total / 2000 == pytest.approx(5.0, rel=0.05)

    def test_huge_expectation_does_not_raise(self):
        counts = draw_counts([_definition(1.0)], 1e12, RandomSource(1))
        assert counts[0] == pytest.approx(1e12, rel=1e-4)

    def test_counts_never_negative(self):
        rng = RandomSource(2)
        for _ in range(100):
            assert all(n >= 0 for n in draw_counts([_definition(0.1)], 1.0, rng))


# ── Choosing a definition ────────────────────────────────────────────

class TestChooseDefinition:

    def test_none_when_exhausted(self):
        defs = [_definition(1.0), _definition(2.0)]
        assert choose_definition(defs, [0, 0], RandomSource(1)) is None

    def test_only_remaining_chosen(self):
        defs = [_definition(1.0), _definition(2.0)]
        rng = RandomSource(1)
        for _ in range(50):
            assert choose_definition(defs, [0, 3], rng) == 1

    def test_weighted_by_density(self):
        defs = [_definition(3.0), _definition(1.0)]
        rng = RandomSource(6)
        picks = [choose_definition(defs, [1, 1], rng) for _ in range(4000)]
        assert picks.count(0) / len(picks) == pytest.approx(0.75, abs=0.03)
