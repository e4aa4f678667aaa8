# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Star system interiors.

A new star system gets its primary star at the center, an optional
binary companion on a fixed orbit around the primary, a planetary
system, a debris disc beyond the outermost terrestrial planet and, for
single stars, an Oort cloud.

Planet distances scale with the primary's luminosity. Planets inside the
frost line are rocky, those beyond it are giants.
"""
import logging
import math

from cosmogen.domain.constants import CosmicConstants
from cosmogen.domain.derivation import AsteroidFieldParams, StarSystemParams
from cosmogen.domain.errors import ConstructionError
from cosmogen.domain.orbits import OrbitalParameters
from cosmogen.domain.placement import overlaps
from cosmogen.domain.planetoids import PlanetoidParams, PlanetType, planetoid_space
from cosmogen.domain.randomness import RandomSource
from cosmogen.domain.stars import StarType
from cosmogen.domain.structure import CosmicStructureType
from cosmogen.domain.vectors import ORIGIN

logger = logging.getLogger(__name__)

_T = CosmicStructureType
_AU = CosmicConstants.AU

FROST_LINE = 2.7 * _AU              # at one solar luminosity
INNER_ORBIT = 0.05 * _AU            # at one solar luminosity
MAX_PLANET_DISTANCE = 1e14          # m, inside any Oort cloud
BOND_ALBEDO = 0.3
# Companions closer than this leave room for circumbinary planets only
CLOSE_BINARY_SEPARATION = 5 * _AU


def planet_count(star_type: StarType, rng: RandomSource) -> int:
    """Number of planets around a primary of the given type."""
    if star_type is not StarType.WHITE_DWARF and rng.next_real() < 0.45:
        return round(rng.next_real(4.2, 8.0))
    return math.ceil(1 + abs(rng.normal_sample(0.0, 1.0)))


def equilibrium_temperature(luminosity: float, distance: float) -> float:
    """Blackbody temperature (K) of a planet at ``distance`` from a star."""
    if luminosity <= 0 or distance <= 0:
        return CosmicConstants.COSMIC_BACKGROUND_TEMPERATURE
    flux = luminosity * (1 - BOND_ALBEDO) / (16 * math.pi * CosmicConstants.STEFAN_BOLTZMANN * distance**2)
    return max(CosmicConstants.COSMIC_BACKGROUND_TEMPERATURE, flux**0.25)


def _rocky_type(star_type: StarType, distance: float, inner: float, rng: RandomSource) -> PlanetType:
    chance = rng.next_real()
    if chance <= 0.01 or distance < inner * 1.05:
        return PlanetType.LAVA
    if distance < inner * 4 and chance <= 0.5:
        return PlanetType.IRON
    if (star_type is StarType.NEUTRON and chance <= 0.2) or (
        star_type is StarType.BROWN_DWARF and chance <= 0.75
    ):
        return PlanetType.CARBON
    if chance <= 0.25:
        return PlanetType.OCEAN
    return PlanetType.TERRESTRIAL


def _giant_type(distance: float, frost_line: float, rng: RandomSource) -> PlanetType:
    ice_chance = 0.7 if distance > frost_line * 4 else 0.3
    return PlanetType.ICE_GIANT if rng.next_real() < ice_chance else PlanetType.GAS_GIANT


def build_star_system(system, rng: RandomSource) -> None:
    """Populate a freshly created star system node in place."""
    params: StarSystemParams = system.params
    factory = type(system)

    primary = system.child_with_seed(params.primary_seed)
    if primary is None:
        primary = factory.create(
            _T.STAR, parent=system, position=ORIGIN, params=params.star,
            seed=params.primary_seed, assign_orbit=False, rng=rng,
        )

    inner_limit = 0.0
    outer_limit = MAX_PLANET_DISTANCE
    if params.binary:
        separation = params.companion_separation
        eccentricity = params.companion_eccentricity
        _add_companion(system, primary, rng)
        if separation < CLOSE_BINARY_SEPARATION:
            inner_limit = 3 * separation * (1 + eccentricity)
        else:
            outer_limit = min(outer_limit, separation * (1 - eccentricity) / 3)

    _add_planets(system, primary, inner_limit, outer_limit, rng)

    if not params.binary or params.companion_separation < CLOSE_BINARY_SEPARATION:
        _add_oort_cloud(system, primary, rng)


def _add_companion(system, primary, rng: RandomSource):
    params: StarSystemParams = system.params
    existing = system.child_with_seed(params.companion_seed)
    if existing is not None:
        return existing
    e = params.companion_eccentricity
    orbit = OrbitalParameters(
        orbited_mass=primary.mass,
        orbited_position=primary.position,
        eccentricity=e,
        orbited_id=primary.id,
        periapsis=params.companion_separation * (1 - e),
        inclination=rng.next_real(0.0, math.pi),
        angle_ascending=rng.next_real(0.0, 2 * math.pi),
        arg_periapsis=rng.next_real(0.0, 2 * math.pi),
        true_anomaly=rng.next_real(0.0, 2 * math.pi),
    )
    return type(system).create(
        _T.STAR, parent=system, position=ORIGIN, orbit=orbit,
        params=params.companion_star, seed=params.companion_seed, rng=rng,
    )


def _add_planets(system, primary, inner_limit: float, outer_limit: float, rng: RandomSource) -> None:
    star_type = system.params.star.star_type
    luminosity = primary.luminosity
    scale = math.sqrt(luminosity / CosmicConstants.SOLAR_LUMINOSITY)
    frost_line = FROST_LINE * scale
    inner = max(INNER_ORBIT * scale, 5 * primary.bounding_radius, inner_limit)

    distance = inner * rng.next_real(1.0, 2.0)
    outermost_rocky = None
    last = None
    for _ in range(planet_count(star_type, rng)):
        if distance > outer_limit:
            break
        if distance < frost_line:
            planet_type = _rocky_type(star_type, distance, inner, rng)
        else:
            planet_type = _giant_type(distance, frost_line, rng)
        angle = rng.next_real(0.0, 2 * math.pi)
        position = (
            distance * math.cos(angle),
            distance * math.sin(angle),
            distance * rng.normal_sample(0.0, 0.01),
        )
        space = planetoid_space(planet_type)
        if overlaps(position, space, system.occupied()):
            logger.debug("%s: skipped planet at %g m", system.name, distance)
        else:
            try:
                type(system).create(
                    _T.PLANETOID, parent=system, position=position,
                    params=PlanetoidParams(planet_type), rng=rng,
                    ambient_temperature=equilibrium_temperature(luminosity, distance),
                )
            except ConstructionError as exc:
                logger.warning("%s: skipped %s planet: %s", system.name, planet_type.name, exc)
            else:
                if distance < frost_line:
                    outermost_rocky = distance
                last = distance
        distance *= rng.next_real(1.4, 2.0)

    if outermost_rocky is not None:
        _add_debris_disc(system, primary, max(outermost_rocky, last or 0.0), outer_limit, rng)


def _add_debris_disc(system, primary, outermost: float, outer_limit: float, rng: RandomSource) -> None:
    inner_edge = outermost * rng.next_real(1.3, 2.0)
    width = rng.next_real(3e12, 4.5e12) * min(1.0, outermost / _AU)
    major = inner_edge + width / 2
    minor = width / 2
    if major + minor > outer_limit:
        return
    child_orbit = OrbitalParameters.from_eccentricity(
        primary.mass, ORIGIN, min(0.5, rng.positive_normal_sample(0.0, 0.05)), primary.id
    )
    type(system).create(
        _T.ASTEROID_FIELD, parent=system, position=ORIGIN,
        params=AsteroidFieldParams(major, minor, toroidal=True, child_orbit=child_orbit),
        rng=rng,
    )


def _add_oort_cloud(system, primary, rng: RandomSource) -> None:
    child_orbit = OrbitalParameters.from_eccentricity(
        primary.mass, ORIGIN, min(0.9, rng.positive_normal_sample(0.0, 0.1)), primary.id
    )
    type(system).create(
        _T.OORT_CLOUD, parent=system, position=ORIGIN,
        params=AsteroidFieldParams(child_orbit=child_orbit), rng=rng,
    )
