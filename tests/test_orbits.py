# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for orbit descriptors, derivation and two-body helpers."""
import math

import pytest

from cosmogen.domain.constants import CosmicConstants
from cosmogen.domain.errors import ConstructionError
from cosmogen.domain.orbital_mechanics import (
    escape_velocity,
    hill_sphere_radius,
    mean_to_true_anomaly,
    true_to_mean_anomaly,
)
from cosmogen.domain.orbits import OrbitalParameters, derive_orbit
from cosmogen.domain.randomness import RandomSource
from cosmogen.domain.vectors import ORIGIN, vec_norm

SUN = CosmicConstants.SOLAR_MASS
AU = CosmicConstants.AU


def _derive(position, parameters, mass=1.0, seed=1):
    return derive_orbit(position, mass, parameters, RandomSource(seed))


# ── OrbitalParameters validation ─────────────────────────────────────

class TestOrbitalParameters:

    @pytest.mark.parametrize("kwargs", [
        dict(orbited_mass=0.0),
        dict(orbited_mass=-1.0),
        dict(orbited_mass=float("inf")),
        dict(orbited_mass=SUN, eccentricity=1.0),
        dict(orbited_mass=SUN, eccentricity=-0.1),
        dict(orbited_mass=SUN, eccentricity=0.1, circular=True),
        dict(orbited_mass=SUN, periapsis=0.0),
    ])
    def test_invalid_raises(self, kwargs):
        with pytest.raises(ConstructionError):
            OrbitalParameters(**kwargs)

    def test_circular_orbit(self):
        p = OrbitalParameters.circular_orbit(SUN, orbited_id="sun")
        assert p.circular
        assert p.eccentricity == 0.0
        assert p.orbited_id == "sun"
        assert not p.has_elements

    def test_from_eccentricity(self):
        p = OrbitalParameters.from_eccentricity(SUN, (1, 2, 3), 0.3)
        assert p.orbited_position == (1.0, 2.0, 3.0)
        assert p.eccentricity == 0.3


# ── Orbits through the current position ──────────────────────────────

class TestDeriveFromPosition:

    def test_zero_distance_raises(self):
        with pytest.raises(ConstructionError):
            _derive(ORIGIN, OrbitalParameters.circular_orbit(SUN))

    def test_position_unchanged(self):
        position = (AU, 0.0, 0.0)
        _, new_position, _ = _derive(position, OrbitalParameters.circular_orbit(SUN))
        assert new_position == position

    def test_circular_speed(self):
        orbit, _, velocity = _derive((AU, 0.0, 0.0), OrbitalParameters.circular_orbit(SUN))
        expected = math.sqrt(CosmicConstants.G * (SUN + 1.0) / AU)
        assert vec_norm(velocity) == pytest.approx(expected, rel=1e-9)
        assert orbit.semi_major_axis == pytest.approx(AU)
        assert orbit.radius == pytest.approx(AU)

    def test_one_year_period(self):
        orbit, _, _ = _derive((AU, 0.0, 0.0), OrbitalParameters.circular_orbit(SUN))
        assert orbit.period == pytest.approx(3.156e7, rel=1e-3)
        assert orbit.mean_motion == pytest.approx(2 * math.pi / orbit.period)

    @pytest.mark.parametrize("position", [
        (1e11, 0.0, 0.0),
        (0.0, -1e11, 0.0),
        (3e10, 4e10, 5e10),
        (0.0, 0.0, 1e11),
    ])
    def test_state_at_zero_is_current_position(self, position):
        orbit, _, velocity = _derive(position, OrbitalParameters.circular_orbit(SUN))
        pos, vel = orbit.state_at(0.0)
        for got, want in zip(pos, position):
            assert got == pytest.approx(want, abs=1e-3 * vec_norm(position))
        for got, want in zip(vel, velocity):
            assert got == pytest.approx(want, abs=1e-3 * vec_norm(velocity))

    def test_half_period_is_opposite_side(self):
        position = (1e11, 0.0, 0.0)
        orbit, _, _ = _derive(position, OrbitalParameters.circular_orbit(SUN))
        pos, _ = orbit.state_at(orbit.period / 2)
        assert pos[0] == pytest.approx(-1e11, rel=1e-6)
        assert abs(pos[1]) < 1e5

    def test_offset_orbited_position(self):
        center = (5e11, 0.0, 0.0)
        position = (6e11, 0.0, 0.0)
        orbit, _, _ = _derive(position, OrbitalParameters.circular_orbit(SUN, center))
        assert orbit.radius == pytest.approx(1e11)
        pos, _ = orbit.state_at(0.0)
        assert pos[0] == pytest.approx(6e11, rel=1e-6)

    def test_eccentric_at_periapsis(self):
        params = OrbitalParameters(SUN, ORIGIN, 0.5, true_anomaly=0.0)
        orbit, _, _ = _derive((1e11, 0.0, 0.0), params)
        assert orbit.semi_major_axis == pytest.approx(2e11)
        assert orbit.periapsis == pytest.approx(1e11)
        assert orbit.apoapsis == pytest.approx(3e11)
        assert orbit.true_anomaly == 0.0

    def test_barycenter_weighted_by_mass(self):
        params = OrbitalParameters.circular_orbit(1e30)
        orbit, _, _ = _derive((1e11, 0.0, 0.0), params, mass=1e30)
        assert orbit.barycenter[0] == pytest.approx(5e10)

    def test_true_anomaly_drawn_reproducibly(self):
        params = OrbitalParameters.from_eccentricity(SUN, ORIGIN, 0.2)
        a, _, _ = _derive((AU, 0.0, 0.0), params, seed=9)
        b, _, _ = _derive((AU, 0.0, 0.0), params, seed=9)
        assert a == b


# ── Orbits from a full element set ───────────────────────────────────

class TestDeriveFromElements:

    def test_position_at_periapsis(self):
        params = OrbitalParameters(
            SUN, (1e9, 0.0, 0.0), 0.2,
            periapsis=1e11, inclination=0.0, angle_ascending=0.0,
            arg_periapsis=0.0, true_anomaly=0.0,
        )
        orbit, position, _ = _derive((5.0, 5.0, 5.0), params)
        assert position[0] == pytest.approx(1e9 + 1e11)
        assert position[1] == pytest.approx(0.0, abs=1.0)
        assert orbit.semi_major_axis == pytest.approx(1e11 / 0.8)

    def test_inclination_lifts_out_of_plane(self):
        params = OrbitalParameters(
            SUN, ORIGIN, 0.0,
            periapsis=1e11, inclination=math.pi / 2, angle_ascending=0.0,
            arg_periapsis=math.pi / 2, true_anomaly=0.0,
        )
        orbit, position, _ = _derive(ORIGIN, params)
        assert position[2] == pytest.approx(1e11)
        assert orbit.inclination == pytest.approx(math.pi / 2)


# ── Two-body helpers ─────────────────────────────────────────────────

class TestOrbitalMechanics:

    def test_anomaly_conversion_inverts(self):
        mean = true_to_mean_anomaly(1.0, 0.3)
        assert mean_to_true_anomaly(mean, 0.3) == pytest.approx(1.0, abs=1e-9)

    def test_circular_anomalies_equal(self):
        assert true_to_mean_anomaly(2.0, 0.0) == pytest.approx(2.0)

    def test_earth_hill_sphere(self):
        assert hill_sphere_radius(AU, 0.0, 5.972e24, SUN) == pytest.approx(1.5e9, rel=0.01)

    def test_earth_escape_velocity(self):
        assert escape_velocity(5.972e24, 6.371e6) == pytest.approx(11186, rel=1e-3)
