# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Star classification and material derivation.

Classification (type, spectral class, luminosity class) is resolved once
at creation and stored with the node. Physical properties are then
derived from the seed and the resolved classification, so both steps
are reproducible but independent of each other.
"""
import math
from dataclasses import dataclass, replace
from enum import Enum

from cosmogen.domain.constants import CosmicConstants
from cosmogen.domain.material import PhysicalMaterial, Substance
from cosmogen.domain.randomness import RandomSource
from cosmogen.domain.shapes import Ellipsoid, Sphere


class StarType(Enum):
    MAIN_SEQUENCE = "main_sequence"
    BROWN_DWARF = "brown_dwarf"
    WHITE_DWARF = "white_dwarf"
    NEUTRON = "neutron"
    RED_GIANT = "red_giant"
    YELLOW_GIANT = "yellow_giant"
    BLUE_GIANT = "blue_giant"

    @property
    def is_giant(self) -> bool:
        return self in GIANTS


GIANTS = frozenset({StarType.RED_GIANT, StarType.YELLOW_GIANT, StarType.BLUE_GIANT})


class SpectralClass(Enum):
    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"
    L = "L"
    T = "T"
    Y = "Y"
    W = "W"
    OTHER = "other"


class LuminosityClass(Enum):
    ZERO = "0"
    IA = "Ia"
    IB = "Ib"
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"
    SUBDWARF = "sd"
    DEGENERATE = "D"


GIANT_LUMINOSITY_CLASSES = frozenset({
    LuminosityClass.ZERO,
    LuminosityClass.IA,
    LuminosityClass.IB,
    LuminosityClass.II,
    LuminosityClass.III,
})

# Cumulative main-sequence spectral distribution.
_MAIN_SEQUENCE_CLASSES = (
    (3e-7, SpectralClass.O),
    (0.0013, SpectralClass.B),
    (0.0073, SpectralClass.A),
    (0.0373, SpectralClass.F),
    (0.1133, SpectralClass.G),
    (0.2343, SpectralClass.K),
    (1.0, SpectralClass.M),
)

_BROWN_DWARF_CLASSES = (
    (0.29, SpectralClass.M),
    (0.79, SpectralClass.L),
    (0.99, SpectralClass.T),
    (1.0, SpectralClass.Y),
)

_TEMPERATURE_RANGES = {
    SpectralClass.B: (10_000.0, 30_000.0),
    SpectralClass.A: (7_500.0, 10_000.0),
    SpectralClass.F: (6_000.0, 7_500.0),
    SpectralClass.G: (5_200.0, 6_000.0),
    SpectralClass.K: (3_700.0, 5_200.0),
    SpectralClass.M: (2_400.0, 3_700.0),
    SpectralClass.L: (1_300.0, 2_400.0),
    SpectralClass.T: (500.0, 1_300.0),
    SpectralClass.Y: (250.0, 500.0),
}

# Bolometric luminosity (W) by giant class: (mean, stddev, half-normal?)
_GIANT_LUMINOSITY = {
    LuminosityClass.ZERO: (3.846e31, 3.0768e32, True),
    LuminosityClass.IA: (1.923e31, 3.846e29, False),
    LuminosityClass.IB: (3.846e30, 3.846e29, False),
    LuminosityClass.II: (3.846e29, 2.3076e29, True),
    LuminosityClass.III: (1.5384e29, 4.9998e28, False),
}

_SUPERGIANTS = frozenset({LuminosityClass.ZERO, LuminosityClass.IA, LuminosityClass.IB})


@dataclass(frozen=True)
class StarParams:
    """Classification of a star. ``None`` fields are resolved from the seed."""
    star_type: StarType = StarType.MAIN_SEQUENCE
    spectral_class: SpectralClass | None = None
    luminosity_class: LuminosityClass | None = None
    population_ii: bool = False

    @property
    def is_resolved(self) -> bool:
        return self.spectral_class is not None and self.luminosity_class is not None


def _pick(table, chance: float):
    for threshold, value in table:
        if chance <= threshold:
            return value
    return table[-1][1]


def spectral_class_for_temperature(temperature: float) -> SpectralClass:
    """Harvard class for an effective temperature."""
    if temperature >= 30_000:
        return SpectralClass.O
    for spectral_class, (low, _high) in _TEMPERATURE_RANGES.items():
        if temperature >= low:
            return spectral_class
    return SpectralClass.Y


def _resolution_source(seed: int) -> RandomSource:
    # Separate stream from material derivation
    return RandomSource(seed ^ 0xA5A5A5A5)


def resolve_star_params(seed: int, params: StarParams) -> StarParams:
    """Fill unset classification fields deterministically from the seed."""
    if params.is_resolved:
        return params
    rng = _resolution_source(seed)
    luminosity_class = params.luminosity_class
    spectral_class = params.spectral_class
    star_type = params.star_type

    if luminosity_class is None:
        if star_type is StarType.WHITE_DWARF or star_type is StarType.NEUTRON:
            luminosity_class = LuminosityClass.DEGENERATE
        elif star_type.is_giant:
            luminosity_class = _pick((
                (0.001, LuminosityClass.ZERO),
                (0.02, LuminosityClass.IA),
                (0.05, LuminosityClass.IB),
                (0.12, LuminosityClass.II),
                (1.0, LuminosityClass.III),
            ), rng.next_real())
        elif star_type is StarType.MAIN_SEQUENCE and rng.next_bool(0.05):
            luminosity_class = LuminosityClass.IV if rng.next_bool() else LuminosityClass.SUBDWARF
        else:
            luminosity_class = LuminosityClass.V

    if spectral_class is None:
        if star_type is StarType.BROWN_DWARF:
            spectral_class = _pick(_BROWN_DWARF_CLASSES, rng.next_real())
        elif star_type is StarType.MAIN_SEQUENCE:
            spectral_class = _pick(_MAIN_SEQUENCE_CLASSES, rng.next_real())
        elif star_type is StarType.WHITE_DWARF:
            spectral_class = SpectralClass.OTHER if rng.next_bool(0.01) else SpectralClass.B
        elif star_type is StarType.NEUTRON:
            spectral_class = SpectralClass.OTHER
        else:
            spectral_class = {
                StarType.RED_GIANT: SpectralClass.M,
                StarType.YELLOW_GIANT: SpectralClass.A,
                StarType.BLUE_GIANT: SpectralClass.B,
            }[star_type]

    return replace(
        params,
        spectral_class=spectral_class,
        luminosity_class=luminosity_class,
    )


def _temperature(rng: RandomSource, params: StarParams) -> float:
    star_type = params.star_type
    if star_type is StarType.WHITE_DWARF:
        return rng.normal_sample(16_850, 600, minimum=4_000)
    if star_type is StarType.NEUTRON:
        return rng.normal_sample(600_000, 133_333, minimum=100_000)
    if star_type is StarType.RED_GIANT:
        return rng.normal_sample(3_800, 466, minimum=2_400)
    if star_type is StarType.YELLOW_GIANT:
        return rng.normal_sample(7_600, 800, minimum=5_000)
    if star_type is StarType.BLUE_GIANT:
        return rng.positive_normal_sample(10_000, 13_333)
    if params.spectral_class is SpectralClass.O:
        return rng.positive_normal_sample(30_000, 6_666)
    if params.spectral_class is SpectralClass.W:
        return rng.positive_normal_sample(30_000, 56_666)
    low, high = _TEMPERATURE_RANGES.get(params.spectral_class, _TEMPERATURE_RANGES[SpectralClass.G])
    return rng.next_real(low, high)


def _radius_from_luminosity(luminosity: float, temperature: float) -> float:
    return math.sqrt(
        luminosity / (4 * math.pi * CosmicConstants.STEFAN_BOLTZMANN * temperature**4)
    )


def _flattened(rng: RandomSource, radius: float) -> Ellipsoid:
    flattening = min(0.9, rng.normal_sample(0.15, 0.05, minimum=0.0))
    return Ellipsoid(radius, radius, radius * (1 - flattening))


def _giant_mass(rng: RandomSource, params: StarParams, luminosity: float) -> float:
    star_type = params.star_type
    luminosity_class = params.luminosity_class
    if star_type is StarType.RED_GIANT:
        if luminosity_class in _SUPERGIANTS:
            return rng.next_real(1.592e31, 4.975e31)
        return rng.next_real(5.97e29, 1.592e31)
    if star_type is StarType.YELLOW_GIANT:
        if luminosity_class is LuminosityClass.ZERO:
            return rng.next_real(1e31, 8.96e31)
        if luminosity_class in _SUPERGIANTS:
            return rng.next_real(5.97e31, 6.97e31)
        return rng.next_real(5.97e29, 1.592e31)
    if luminosity_class is LuminosityClass.ZERO:
        # Eddington limit caps the mass at this luminosity
        limit = luminosity / 1.23072e31 * 1.99e30
        floor = 7.96e31
        return limit if limit <= floor else rng.next_real(floor, limit)
    if luminosity_class in _SUPERGIANTS:
        return rng.next_real(9.95e30, 2.0895e32)
    return rng.next_real(3.98e30, 1.99e31)


def derive_star_material(seed: int, params: StarParams) -> PhysicalMaterial:
    """
    Physical material of a star.

    Args:
        seed: Node seed.
        params: Resolved classification (see resolve_star_params).

    Returns:
        PhysicalMaterial whose temperature is the effective surface
        temperature.
    """
    params = resolve_star_params(seed, params)
    rng = RandomSource(seed)
    temperature = _temperature(rng, params)
    star_type = params.star_type
    c = CosmicConstants

    if star_type is StarType.BROWN_DWARF:
        mass = rng.next_real(2.468e28, 1.7088e29)
        radius = rng.normal_sample(c.JUPITER_RADIUS, 3_495_550, minimum=c.JUPITER_RADIUS / 2)
        return PhysicalMaterial(Substance.HYDROGEN_HELIUM, mass, _flattened(rng, radius), temperature)

    if star_type is StarType.WHITE_DWARF:
        mass = rng.normal_sample(1.194e30, 9.95e28, minimum=3.0e29)
        radius = (c.JUPITER_MASS / mass) ** (1.0 / 3.0) * c.JUPITER_RADIUS
        return PhysicalMaterial(Substance.DEGENERATE_MATTER, mass, _flattened(rng, radius), temperature)

    if star_type is StarType.NEUTRON:
        mass = rng.normal_sample(4.4178e30, 5.174e29, minimum=2.86e30)
        radius = rng.next_real(10_000, 13_000)
        return PhysicalMaterial(Substance.NEUTRONIUM, mass, Sphere(radius), temperature)

    if star_type.is_giant:
        mean, stddev, half_normal = _GIANT_LUMINOSITY[params.luminosity_class]
        if half_normal:
            luminosity = mean + rng.positive_normal_sample(0.0, stddev)
        else:
            luminosity = rng.normal_sample(mean, stddev, minimum=mean / 10)
        shape = _flattened(rng, _radius_from_luminosity(luminosity, temperature))
        mass = _giant_mass(rng, params, luminosity)
        return PhysicalMaterial(Substance.STELLAR_PLASMA, mass, shape, temperature)

    luminosity = (temperature / c.SOLAR_TEMPERATURE) ** 5.6 * c.SOLAR_LUMINOSITY
    if params.luminosity_class is LuminosityClass.SUBDWARF:
        luminosity /= rng.next_real(55, 100)
    elif params.luminosity_class is LuminosityClass.IV:
        luminosity *= rng.next_real(55, 100)
    shape = _flattened(rng, _radius_from_luminosity(luminosity, temperature))
    ratio = shape.containing_radius / c.SOLAR_RADIUS
    mass = ratio ** (1.25 if ratio < 1 else 1.75) * c.SOLAR_MASS
    return PhysicalMaterial(Substance.STELLAR_PLASMA, mass, shape, temperature)


def luminosity_of(material: PhysicalMaterial) -> float:
    """Bolometric luminosity (W) from radius and effective temperature."""
    radius = material.shape.containing_radius
    return (
        4 * math.pi * radius**2
        * CosmicConstants.STEFAN_BOLTZMANN * material.temperature**4
    )
