# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for star classification and star/planetoid material."""
import pytest

from cosmogen.domain.constants import CosmicConstants
from cosmogen.domain.material import PhysicalMaterial, Substance
from cosmogen.domain.planetoids import (
    GIANT_MAX_MASS,
    GIANT_MIN_MASS,
    MINIMUM_DWARF_RADIUS,
    SMALL_BODY_TYPES,
    PlanetoidParams,
    PlanetType,
    derive_planetoid_material,
    planetoid_space,
)
from cosmogen.domain.shapes import Ellipsoid, Sphere
from cosmogen.domain.stars import (
    GIANT_LUMINOSITY_CLASSES,
    LuminosityClass,
    SpectralClass,
    StarParams,
    StarType,
    derive_star_material,
    luminosity_of,
    resolve_star_params,
    spectral_class_for_temperature,
)


# ── Classification ───────────────────────────────────────────────────

class TestStarClassification:

    def test_resolution_deterministic(self):
        assert resolve_star_params(5, StarParams()) == resolve_star_params(5, StarParams())

    def test_resolved_params_unchanged(self):
        p = StarParams(StarType.MAIN_SEQUENCE, SpectralClass.G, LuminosityClass.V)
        assert resolve_star_params(5, p) is p

    def test_white_dwarf(self):
        p = resolve_star_params(5, StarParams(StarType.WHITE_DWARF))
        assert p.luminosity_class is LuminosityClass.DEGENERATE
        assert p.spectral_class in (SpectralClass.B, SpectralClass.OTHER)

    def test_neutron(self):
        p = resolve_star_params(5, StarParams(StarType.NEUTRON))
        assert p.luminosity_class is LuminosityClass.DEGENERATE
        assert p.spectral_class is SpectralClass.OTHER

    @pytest.mark.parametrize("star_type,spectral_class", [
        (StarType.RED_GIANT, SpectralClass.M),
        (StarType.YELLOW_GIANT, SpectralClass.A),
        (StarType.BLUE_GIANT, SpectralClass.B),
    ])
    def test_giants(self, star_type, spectral_class):
        for seed in range(10):
            p = resolve_star_params(seed, StarParams(star_type))
            assert p.spectral_class is spectral_class
            assert p.luminosity_class in GIANT_LUMINOSITY_CLASSES

    def test_brown_dwarf_is_cool_class(self):
        for seed in range(10):
            p = resolve_star_params(seed, StarParams(StarType.BROWN_DWARF))
            assert p.spectral_class in (SpectralClass.M, SpectralClass.L, SpectralClass.T, SpectralClass.Y)

    def test_main_sequence_mostly_m_dwarfs(self):
        classes = [resolve_star_params(s, StarParams()).spectral_class for s in range(300)]
        assert classes.count(SpectralClass.M) / len(classes) > 0.6

    @pytest.mark.parametrize("temperature,expected", [
        (40_000, SpectralClass.O),
        (5_778, SpectralClass.G),
        (3_000, SpectralClass.M),
        (100, SpectralClass.Y),
    ])
    def test_spectral_class_for_temperature(self, temperature, expected):
        assert spectral_class_for_temperature(temperature) is expected


# ── Star material ────────────────────────────────────────────────────

class TestStarMaterial:

    @pytest.mark.parametrize("star_type", list(StarType), ids=lambda t: t.value)
    def test_every_type_derives(self, star_type):
        a = derive_star_material(21, StarParams(star_type))
        assert a == derive_star_material(21, StarParams(star_type))
        assert a.mass > 0
        assert a.temperature > 0

    def test_g_dwarf_temperature(self):
        m = derive_star_material(3, StarParams(StarType.MAIN_SEQUENCE, SpectralClass.G, LuminosityClass.V))
        assert 5_200 <= m.temperature < 6_000
        assert m.substance is Substance.STELLAR_PLASMA

    def test_neutron_star(self):
        m = derive_star_material(3, StarParams(StarType.NEUTRON))
        assert isinstance(m.shape, Sphere)
        assert 10_000 <= m.shape.radius < 13_000
        assert m.substance is Substance.NEUTRONIUM

    def test_white_dwarf_is_small(self):
        m = derive_star_material(3, StarParams(StarType.WHITE_DWARF))
        assert m.shape.containing_radius < CosmicConstants.SOLAR_RADIUS / 10

    def test_solar_luminosity(self):
        sun = PhysicalMaterial(
            Substance.STELLAR_PLASMA,
            CosmicConstants.SOLAR_MASS,
            Sphere(CosmicConstants.SOLAR_RADIUS),
            CosmicConstants.SOLAR_TEMPERATURE,
        )
        assert luminosity_of(sun) == pytest.approx(CosmicConstants.SOLAR_LUMINOSITY, rel=0.01)


# ── Planetoids ───────────────────────────────────────────────────────

class TestPlanetoids:

    @pytest.mark.parametrize("planet_type", list(PlanetType), ids=lambda t: t.value)
    def test_every_type_derives(self, planet_type):
        m = derive_planetoid_material(8, PlanetoidParams(planet_type), 150.0)
        assert m == derive_planetoid_material(8, PlanetoidParams(planet_type), 150.0)
        assert m.temperature == 150.0
        assert isinstance(m.shape, Ellipsoid)

    @pytest.mark.parametrize("planet_type", [PlanetType.DWARF, PlanetType.ROCKY_DWARF])
    def test_dwarf_above_hydrostatic_minimum(self, planet_type):
        for seed in range(10):
            m = derive_planetoid_material(seed, PlanetoidParams(planet_type), 40.0)
            assert m.shape.axis_x >= MINIMUM_DWARF_RADIUS

    def test_gas_giant_mass_band(self):
        for seed in range(10):
            m = derive_planetoid_material(seed, PlanetoidParams(PlanetType.GAS_GIANT), 100.0)
            assert GIANT_MIN_MASS <= m.mass <= GIANT_MAX_MASS

    def test_small_bodies_irregular(self):
        for planet_type in SMALL_BODY_TYPES:
            m = derive_planetoid_material(2, PlanetoidParams(planet_type), 50.0)
            assert len(set(m.shape.axes)) == 3

    def test_space(self):
        assert planetoid_space(PlanetType.GAS_GIANT) == 2.5e8
        assert planetoid_space(PlanetType.COMET) == 25_000.0
