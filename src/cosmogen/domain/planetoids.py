# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Planetoids: planets, dwarf planets, asteroids and comets.

Bulk properties only. Mass is drawn log-uniformly inside the type's mass
band, radius follows from the type's bulk density, and small bodies get
an irregular ellipsoid.
"""
import math
from dataclasses import dataclass
from enum import Enum

from cosmogen.domain.material import PhysicalMaterial, Substance
from cosmogen.domain.randomness import RandomSource
from cosmogen.domain.shapes import Ellipsoid


class PlanetType(Enum):
    GAS_GIANT = "gas_giant"
    ICE_GIANT = "ice_giant"
    TERRESTRIAL = "terrestrial"
    OCEAN = "ocean"
    IRON = "iron"
    CARBON = "carbon"
    LAVA = "lava"
    DWARF = "dwarf"
    ROCKY_DWARF = "rocky_dwarf"
    ASTEROID_C = "asteroid_c"
    ASTEROID_S = "asteroid_s"
    ASTEROID_M = "asteroid_m"
    COMET = "comet"


GIANT_TYPES = frozenset({PlanetType.GAS_GIANT, PlanetType.ICE_GIANT})
TERRESTRIAL_TYPES = frozenset({
    PlanetType.TERRESTRIAL, PlanetType.OCEAN, PlanetType.IRON,
    PlanetType.CARBON, PlanetType.LAVA,
})
DWARF_TYPES = frozenset({PlanetType.DWARF, PlanetType.ROCKY_DWARF})
SMALL_BODY_TYPES = frozenset({
    PlanetType.ASTEROID_C, PlanetType.ASTEROID_S, PlanetType.ASTEROID_M, PlanetType.COMET,
})

# Hydrostatic equilibrium lower bound for dwarf planets (m)
MINIMUM_DWARF_RADIUS = 600_000.0
DWARF_MIN_MASS = 3.4e20
TERRESTRIAL_MIN_MASS = 2e22
GIANT_MIN_MASS = 6e25
GIANT_MAX_MASS = 2.5e28


@dataclass(frozen=True)
class _PlanetClass:
    substance: Substance
    mass_range: tuple[float, float]   # kg, log-uniform
    density_range: tuple[float, float]  # kg/m³
    flattening: tuple[float, float]
    space: float                      # m


_CLASSES: dict[PlanetType, _PlanetClass] = {
    PlanetType.GAS_GIANT: _PlanetClass(
        Substance.HYDROGEN_HELIUM, (GIANT_MIN_MASS, GIANT_MAX_MASS), (1100, 1650), (0.02, 0.1), 2.5e8),
    PlanetType.ICE_GIANT: _PlanetClass(
        Substance.ICE_VOLATILES, (GIANT_MIN_MASS, 2e26), (1100, 1650), (0.01, 0.03), 2.5e8),
    PlanetType.TERRESTRIAL: _PlanetClass(
        Substance.SILICATE_ROCK, (TERRESTRIAL_MIN_MASS, GIANT_MIN_MASS), (3750, 6000), (0.0, 0.01), 1.75e7),
    PlanetType.OCEAN: _PlanetClass(
        Substance.ICE_VOLATILES, (TERRESTRIAL_MIN_MASS, GIANT_MIN_MASS), (3000, 4500), (0.0, 0.01), 1.75e7),
    PlanetType.IRON: _PlanetClass(
        Substance.IRON_NICKEL, (TERRESTRIAL_MIN_MASS, GIANT_MIN_MASS), (5000, 8000), (0.0, 0.01), 1.75e7),
    PlanetType.CARBON: _PlanetClass(
        Substance.CARBONACEOUS_ROCK, (TERRESTRIAL_MIN_MASS, GIANT_MIN_MASS), (3750, 5500), (0.0, 0.01), 1.75e7),
    PlanetType.LAVA: _PlanetClass(
        Substance.SILICATE_ROCK, (TERRESTRIAL_MIN_MASS, GIANT_MIN_MASS), (3750, 6000), (0.0, 0.01), 1.75e7),
    PlanetType.DWARF: _PlanetClass(
        Substance.ICE_VOLATILES, (DWARF_MIN_MASS, TERRESTRIAL_MIN_MASS), (1500, 2000), (0.0, 0.05), 1.5e6),
    PlanetType.ROCKY_DWARF: _PlanetClass(
        Substance.SILICATE_ROCK, (DWARF_MIN_MASS, TERRESTRIAL_MIN_MASS), (2000, 3500), (0.0, 0.05), 1.5e6),
    PlanetType.ASTEROID_C: _PlanetClass(
        Substance.CARBONACEOUS_ROCK, (5.9e8, 1e20), (1380, 1380), (0.0, 0.0), 400_000.0),
    PlanetType.ASTEROID_S: _PlanetClass(
        Substance.SILICATE_ROCK, (5.9e8, 1e20), (2710, 2710), (0.0, 0.0), 400_000.0),
    PlanetType.ASTEROID_M: _PlanetClass(
        Substance.IRON_NICKEL, (5.9e8, 1e20), (5320, 5320), (0.0, 0.0), 400_000.0),
    PlanetType.COMET: _PlanetClass(
        Substance.ICE_VOLATILES, (1e10, 1e16), (600, 600), (0.0, 0.0), 25_000.0),
}


def planetoid_space(planet_type: PlanetType) -> float:
    """Open space a planetoid of this type needs."""
    return _CLASSES[planet_type].space


@dataclass(frozen=True)
class PlanetoidParams:
    planet_type: PlanetType = PlanetType.TERRESTRIAL


def _log_uniform(rng: RandomSource, low: float, high: float) -> float:
    return math.exp(rng.next_real(math.log(low), math.log(high)))


def derive_planetoid_material(
    seed: int,
    params: PlanetoidParams,
    ambient_temperature: float,
) -> PhysicalMaterial:
    """
    Physical material of a planetoid.

    Args:
        seed: Node seed.
        params: Planet type.
        ambient_temperature: Equilibrium temperature at the body's location (K).
    """
    planet_class = _CLASSES[params.planet_type]
    rng = RandomSource(seed)
    density = rng.next_real(*planet_class.density_range)

    if params.planet_type in DWARF_TYPES:
        # Radius-first so the body stays above the hydrostatic minimum
        radius = rng.next_real(MINIMUM_DWARF_RADIUS, 1.2e6)
        mass = 4.0 / 3.0 * math.pi * radius**3 * density
    else:
        mass = _log_uniform(rng, *planet_class.mass_range)
        radius = (3 * mass / (4 * math.pi * density)) ** (1.0 / 3.0)

    if params.planet_type in SMALL_BODY_TYPES:
        shape = Ellipsoid(
            radius * rng.next_real(0.5, 1.5),
            radius * rng.next_real(0.5, 1.5),
            radius * rng.next_real(0.5, 1.5),
        )
        mass = shape.volume * density
    else:
        flattening = rng.next_real(*planet_class.flattening)
        shape = Ellipsoid(radius, radius, radius * (1 - flattening))

    return PhysicalMaterial(planet_class.substance, mass, shape, ambient_temperature)
