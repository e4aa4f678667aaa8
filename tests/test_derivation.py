# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for seed-driven material derivation and parameter resolution."""
import math

import pytest

from cosmogen.domain.derivation import (
    MINIMAL_TORUS_RADIUS,
    STAR_SYSTEM_BASE_RADIUS,
    AsteroidFieldParams,
    BlackHoleParams,
    GalaxyParams,
    RegionParams,
    StarSystemParams,
    SubgroupParams,
    black_hole_mass,
    derive_material,
    event_horizon_radius,
    hawking_temperature,
    params_type_for,
    resolve_params,
)
from cosmogen.domain.errors import ConstructionError
from cosmogen.domain.shapes import Ellipsoid, HollowSphere, Sphere, Torus
from cosmogen.domain.stars import StarParams, StarType
from cosmogen.domain.structure import CosmicStructureType

_T = CosmicStructureType

ALL_TYPES = list(CosmicStructureType)


# ── Reproducibility ──────────────────────────────────────────────────

class TestReproducibility:

    @pytest.mark.parametrize("structure_type", ALL_TYPES, ids=lambda t: t.value)
    def test_same_seed_same_material(self, structure_type):
        a = derive_material(structure_type, 12345)
        b = derive_material(structure_type, 12345)
        assert a == b

    @pytest.mark.parametrize("structure_type", [
        _T.SUPERCLUSTER, _T.GALAXY_CLUSTER, _T.SPIRAL_GALAXY, _T.NEBULA, _T.STAR,
    ])
    def test_different_seeds_differ(self, structure_type):
        assert derive_material(structure_type, 1) != derive_material(structure_type, 2)

    @pytest.mark.parametrize("structure_type", [
        _T.SPIRAL_GALAXY, _T.GLOBULAR_CLUSTER, _T.GALAXY_SUBGROUP,
        _T.PLANETARY_NEBULA, _T.STAR_SYSTEM, _T.ASTEROID_FIELD, _T.STAR,
    ])
    def test_resolved_params_give_same_material(self, structure_type):
        resolved = resolve_params(structure_type, 99)
        assert derive_material(structure_type, 99, resolved) == derive_material(structure_type, 99)

    @pytest.mark.parametrize("structure_type", [
        _T.SPIRAL_GALAXY, _T.GALAXY_SUBGROUP, _T.STAR_SYSTEM, _T.ASTEROID_FIELD,
    ])
    def test_resolution_is_idempotent(self, structure_type):
        once = resolve_params(structure_type, 7)
        assert resolve_params(structure_type, 7, once) == once


# ── Parameter handling ───────────────────────────────────────────────

class TestParams:

    def test_wrong_params_type_raises(self):
        with pytest.raises(ConstructionError):
            derive_material(_T.BLACK_HOLE, 1, GalaxyParams())

    def test_region_types_use_region_params(self):
        assert params_type_for(_T.NEBULA) is RegionParams
        assert params_type_for(_T.UNIVERSE) is RegionParams

    def test_explicit_core_seed_kept(self):
        assert resolve_params(_T.SPIRAL_GALAXY, 1, GalaxyParams(core_seed=5)).core_seed == 5

    def test_core_seed_filled(self):
        assert resolve_params(_T.SPIRAL_GALAXY, 1).core_seed is not None

    def test_subgroup_main_galaxy_resolved(self):
        p = resolve_params(_T.GALAXY_SUBGROUP, 3)
        assert p.main_galaxy_seed is not None
        assert p.main_galaxy_type in (_T.SPIRAL_GALAXY, _T.ELLIPTICAL_GALAXY)

    def test_explicit_main_galaxy_type_kept(self):
        p = resolve_params(_T.GALAXY_SUBGROUP, 3, SubgroupParams(main_galaxy_type=_T.ELLIPTICAL_GALAXY))
        assert p.main_galaxy_type is _T.ELLIPTICAL_GALAXY

    def test_single_star_system_has_no_companion(self):
        p = resolve_params(_T.STAR_SYSTEM, 3, StarSystemParams(binary=False))
        assert p.companion_seed is None
        assert p.companion_separation is None
        assert p.star.is_resolved


# ── Black holes ──────────────────────────────────────────────────────

class TestBlackHoles:

    def test_stellar_mass_range(self):
        for seed in range(20):
            assert 6e30 <= black_hole_mass(seed, False) < 4e31

    def test_supermassive_mass_range(self):
        for seed in range(20):
            assert 2e35 <= black_hole_mass(seed, True) < 2e40

    def test_material(self):
        m = derive_material(_T.BLACK_HOLE, 4, BlackHoleParams())
        assert isinstance(m.shape, Sphere)
        assert m.shape.radius == pytest.approx(event_horizon_radius(m.mass))
        assert m.temperature == pytest.approx(hawking_temperature(m.mass))

    def test_event_horizon_of_ten_suns(self):
        assert event_horizon_radius(1.98847e31) == pytest.approx(29_530, rel=1e-3)


# ── Regions and galaxies ─────────────────────────────────────────────

class TestRegions:

    def test_universe(self):
        m = derive_material(_T.UNIVERSE, 1)
        assert math.isinf(m.mass)
        assert m.temperature == 2.73

    def test_ambient_temperature_passthrough(self):
        assert derive_material(_T.GALAXY_CLUSTER, 1, ambient_temperature=100.0).temperature == 100.0

    def test_hii_region_is_hot(self):
        assert derive_material(_T.HII_REGION, 1, ambient_temperature=3.0).temperature == 10_000.0

    def test_supercluster_is_elongated(self):
        shape = derive_material(_T.SUPERCLUSTER, 5).shape
        assert isinstance(shape, Ellipsoid)
        assert max(shape.axes) / min(shape.axes) > 5

    def test_spiral_galaxy_is_flat(self):
        shape = derive_material(_T.SPIRAL_GALAXY, 5).shape
        assert 2.4e20 <= shape.axis_x < 2.5e21
        assert shape.axis_z < shape.axis_x * 0.05

    def test_globular_cluster_size(self):
        shape = derive_material(_T.GLOBULAR_CLUSTER, 5).shape
        assert 8e16 <= shape.axis_x < 2.1e17

    def test_subgroup_wraps_main_galaxy(self):
        params = resolve_params(_T.GALAXY_SUBGROUP, 11)
        galaxy = derive_material(
            params.main_galaxy_type, params.main_galaxy_seed, GalaxyParams(params.main_galaxy_core_seed)
        )
        subgroup = derive_material(_T.GALAXY_SUBGROUP, 11, params)
        assert subgroup.mass == pytest.approx(galaxy.mass * 1.25)
        assert subgroup.shape.radius == pytest.approx(galaxy.shape.containing_radius * 10)

    def test_nebula_within_space(self):
        for seed in range(10):
            assert derive_material(_T.NEBULA, seed).shape.axis_x <= 5.5e18


# ── Asteroid fields and Oort clouds ──────────────────────────────────

class TestFields:

    def test_default_major_radius_range(self):
        shape = derive_material(_T.ASTEROID_FIELD, 3).shape
        assert isinstance(shape, Ellipsoid)
        assert 1.5e11 <= shape.axis_x < 3.15e12

    def test_explicit_major_radius(self):
        shape = derive_material(_T.ASTEROID_FIELD, 3, AsteroidFieldParams(major_radius=1.5e11)).shape
        assert shape.axis_x == 1.5e11
        assert 0.75e11 <= shape.axis_y < 2.25e11

    def test_toroidal_default_minor(self):
        m = derive_material(_T.ASTEROID_FIELD, 3, AsteroidFieldParams(major_radius=1e11, toroidal=True))
        assert m.shape == Torus(1e11, 1e10)
        assert m.mass == pytest.approx(m.shape.volume * 7e-8)

    def test_toroidal_without_radius_is_minimal(self):
        m = derive_material(_T.ASTEROID_FIELD, 3, AsteroidFieldParams(toroidal=True))
        assert isinstance(m.shape, Torus)
        assert m.shape.major_radius == MINIMAL_TORUS_RADIUS
        assert m.shape.minor_radius == pytest.approx(MINIMAL_TORUS_RADIUS * 0.1)
        assert m.mass > 0

    def test_toroidal_minor_too_large_raises(self):
        with pytest.raises(ConstructionError):
            derive_material(
                _T.ASTEROID_FIELD, 3,
                AsteroidFieldParams(major_radius=1e11, minor_radius=2e11, toroidal=True),
            )

    def test_oort_cloud_default(self):
        m = derive_material(_T.OORT_CLOUD, 3)
        assert m.shape == HollowSphere(3e15, 7.5e15)
        assert m.mass == 3e25

    def test_oort_cloud_around_wide_system(self):
        m = derive_material(_T.OORT_CLOUD, 3, AsteroidFieldParams(major_radius=1e15))
        assert m.shape.inner_radius == pytest.approx(4e15)
        assert m.shape.outer_radius == pytest.approx(8.5e15)


# ── Star systems ─────────────────────────────────────────────────────

class TestStarSystems:

    def test_single_system_radius(self):
        m = derive_material(_T.STAR_SYSTEM, 3, StarSystemParams(binary=False))
        assert m.shape.radius == STAR_SYSTEM_BASE_RADIUS

    def test_binary_system_larger(self):
        params = resolve_params(_T.STAR_SYSTEM, 3, StarSystemParams(binary=True))
        m = derive_material(_T.STAR_SYSTEM, 3, params)
        expected = STAR_SYSTEM_BASE_RADIUS + params.companion_separation * (1 + params.companion_eccentricity)
        assert m.shape.radius == pytest.approx(expected)

    def test_mass_exceeds_primary(self):
        params = resolve_params(_T.STAR_SYSTEM, 3, StarSystemParams(StarParams(StarType.WHITE_DWARF), binary=False))
        primary = derive_material(_T.STAR, params.primary_seed, params.star)
        assert derive_material(_T.STAR_SYSTEM, 3, params).mass > primary.mass
