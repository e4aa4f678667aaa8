# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Material derivation per structural type.

A node's physical material is a pure function of (structural type, seed,
structural parameters, ambient temperature). Every deriver builds its own
RandomSource from the seed, so calling it twice gives identical results.

Parameters that may be left unset (e.g. a galaxy's core black hole seed)
are filled by ``resolve_params`` from a second stream keyed on the same
seed. Derivation calls it first, so results do not depend on whether a
caller passed resolved or unresolved parameters.
"""
import math
from dataclasses import dataclass, field, replace
from typing import Callable

from cosmogen.domain.child_definitions import (
    GALAXY_SYSTEM_DENSITY,
    GLOBULAR_CLUSTER_SYSTEM_DENSITY,
)
from cosmogen.domain.constants import CosmicConstants
from cosmogen.domain.errors import ConstructionError
from cosmogen.domain.material import PhysicalMaterial, Substance
from cosmogen.domain.orbits import OrbitalParameters
from cosmogen.domain.planetoids import PlanetoidParams, derive_planetoid_material
from cosmogen.domain.randomness import RandomSource
from cosmogen.domain.shapes import Ellipsoid, HollowSphere, Sphere, Torus
from cosmogen.domain.stars import (
    StarParams,
    StarType,
    derive_star_material,
    resolve_star_params,
)
from cosmogen.domain.structure import OORT_CLOUD_SPACE, SPACE, CosmicStructureType

_T = CosmicStructureType

UNIVERSE_RADIUS = 1.89214e33
ASTEROID_FIELD_MASS_DENSITY = 7e-8      # kg/m³
OORT_CLOUD_MASS = 3e25                  # kg
OORT_CLOUD_INNER_OFFSET = 3e15          # m
TORUS_MINOR_FRACTION = 0.1
# Default ring for a field at a star system center with no radius given
MINIMAL_TORUS_RADIUS = 1.0              # m
STAR_SYSTEM_BASE_RADIUS = 1.125e16      # m
SUPERMASSIVE_THRESHOLD = 1e33           # kg


# ── Parameter payloads ──────────────────────────────────────────────

@dataclass(frozen=True)
class RegionParams:
    """Types whose material depends on the seed alone."""


@dataclass(frozen=True)
class AsteroidFieldParams:
    major_radius: float | None = None
    minor_radius: float | None = None
    toroidal: bool = False
    child_orbit: OrbitalParameters | None = None


@dataclass(frozen=True)
class BlackHoleParams:
    supermassive: bool = False


@dataclass(frozen=True)
class GalaxyParams:
    core_seed: int | None = None


@dataclass(frozen=True)
class GlobularClusterParams:
    core_seed: int | None = None


@dataclass(frozen=True)
class SubgroupParams:
    main_galaxy_seed: int | None = None
    main_galaxy_type: CosmicStructureType | None = None
    main_galaxy_core_seed: int | None = None


@dataclass(frozen=True)
class PlanetaryNebulaParams:
    central_star_seed: int | None = None


@dataclass(frozen=True)
class StarSystemParams:
    star: StarParams = field(default_factory=StarParams)
    primary_seed: int | None = None
    binary: bool | None = None
    companion_seed: int | None = None
    companion_separation: float | None = None
    companion_eccentricity: float | None = None

    @property
    def companion_star(self) -> StarParams:
        return StarParams(StarType.MAIN_SEQUENCE)


StructureParams = (
    RegionParams | AsteroidFieldParams | BlackHoleParams | GalaxyParams
    | GlobularClusterParams | SubgroupParams | PlanetaryNebulaParams
    | StarParams | StarSystemParams | PlanetoidParams
)

_PARAM_TYPES: dict[CosmicStructureType, type] = {
    _T.ASTEROID_FIELD: AsteroidFieldParams,
    _T.OORT_CLOUD: AsteroidFieldParams,
    _T.BLACK_HOLE: BlackHoleParams,
    _T.SPIRAL_GALAXY: GalaxyParams,
    _T.ELLIPTICAL_GALAXY: GalaxyParams,
    _T.DWARF_GALAXY: GalaxyParams,
    _T.GLOBULAR_CLUSTER: GlobularClusterParams,
    _T.GALAXY_SUBGROUP: SubgroupParams,
    _T.PLANETARY_NEBULA: PlanetaryNebulaParams,
    _T.STAR: StarParams,
    _T.STAR_SYSTEM: StarSystemParams,
    _T.PLANETOID: PlanetoidParams,
}


def params_type_for(structure_type: CosmicStructureType) -> type:
    return _PARAM_TYPES.get(structure_type, RegionParams)


def default_params(structure_type: CosmicStructureType) -> StructureParams:
    return params_type_for(structure_type)()


def _check_params(structure_type: CosmicStructureType, params: StructureParams) -> None:
    expected = params_type_for(structure_type)
    if not isinstance(params, expected):
        raise ConstructionError(
            f"{structure_type.name} needs {expected.__name__}, got {type(params).__name__}"
        )


# ── Resolution ──────────────────────────────────────────────────────

def _resolution_source(seed: int) -> RandomSource:
    return RandomSource(seed ^ 0x5EED5EED)


def resolve_params(
    structure_type: CosmicStructureType,
    seed: int,
    params: StructureParams | None = None,
) -> StructureParams:
    """
    Fill seed-derived parameters that the caller left unset.

    Idempotent: resolving resolved parameters returns them unchanged.
    """
    if params is None:
        params = default_params(structure_type)
    _check_params(structure_type, params)
    rng = _resolution_source(seed)

    if isinstance(params, (GalaxyParams, GlobularClusterParams)):
        core_seed = rng.next_uint()
        return params if params.core_seed is not None else replace(params, core_seed=core_seed)

    if isinstance(params, SubgroupParams):
        spiral = rng.next_bool(0.7)
        galaxy_seed = rng.next_uint()
        return replace(
            params,
            main_galaxy_seed=params.main_galaxy_seed if params.main_galaxy_seed is not None else galaxy_seed,
            main_galaxy_type=params.main_galaxy_type or (
                _T.SPIRAL_GALAXY if spiral else _T.ELLIPTICAL_GALAXY
            ),
        )

    if isinstance(params, PlanetaryNebulaParams):
        star_seed = rng.next_uint()
        return params if params.central_star_seed is not None else replace(params, central_star_seed=star_seed)

    if isinstance(params, StarParams):
        return resolve_star_params(seed, params)

    if isinstance(params, StarSystemParams):
        primary_seed = rng.next_uint()
        binary = rng.next_bool(1.0 / 3.0)
        companion_seed = rng.next_uint()
        separation = math.exp(rng.next_real(math.log(0.05), math.log(50.0))) * CosmicConstants.AU
        eccentricity = min(0.9, rng.positive_normal_sample(0.0, 0.05))
        p = replace(
            params,
            primary_seed=params.primary_seed if params.primary_seed is not None else primary_seed,
            binary=params.binary if params.binary is not None else binary,
        )
        p = replace(p, star=resolve_star_params(p.primary_seed, p.star))
        if not p.binary:
            return replace(p, companion_seed=None, companion_separation=None, companion_eccentricity=None)
        return replace(
            p,
            companion_seed=p.companion_seed if p.companion_seed is not None else companion_seed,
            companion_separation=p.companion_separation or separation,
            companion_eccentricity=(
                p.companion_eccentricity if p.companion_eccentricity is not None else eccentricity
            ),
        )

    if isinstance(params, AsteroidFieldParams) and structure_type is _T.ASTEROID_FIELD:
        major = rng.next_real(1.5e11, 3.15e12)
        if params.major_radius is None:
            if params.toroidal:
                major = MINIMAL_TORUS_RADIUS
            return replace(params, major_radius=major)

    return params


# ── Black holes ─────────────────────────────────────────────────────

def black_hole_mass(seed: int, supermassive: bool) -> float:
    """Mass drawn from the seed: supermassive [2e35, 2e40], else [6e30, 4e31]."""
    rng = RandomSource(seed)
    if supermassive:
        return rng.next_real(2e35, 2e40)
    return rng.next_real(6e30, 4e31)


def event_horizon_radius(mass: float) -> float:
    """Schwarzschild radius 2Gm/c²."""
    c = CosmicConstants
    return 2 * c.G * mass / c.SPEED_OF_LIGHT**2


def hawking_temperature(mass: float) -> float:
    return CosmicConstants.HAWKING_COEFFICIENT / mass


def _black_hole(seed, params: BlackHoleParams, ambient):
    mass = black_hole_mass(seed, params.supermassive)
    return PhysicalMaterial(
        Substance.SINGULARITY,
        mass,
        Sphere(event_horizon_radius(mass)),
        hawking_temperature(mass),
    )


# ── Large-scale structure ───────────────────────────────────────────

def _universe(seed, params, ambient):
    return PhysicalMaterial(
        Substance.INTERGALACTIC_MEDIUM,
        math.inf,
        Sphere(UNIVERSE_RADIUS),
        CosmicConstants.COSMIC_BACKGROUND_TEMPERATURE,
    )


def _supercluster(seed, params, ambient):
    rng = RandomSource(seed)
    mass = rng.next_real(2e46, 2e47)
    major = rng.next_real(9.4607e23, 9.4607e25)
    minor1 = major * rng.next_real(0.02, 0.15)
    filament = rng.next_bool()
    sheet_axis = major * rng.next_real(0.03, 0.08)
    minor2 = minor1 if filament else sheet_axis
    permutations = (
        (major, minor1, minor2),
        (major, minor2, minor1),
        (minor1, major, minor2),
        (minor2, major, minor1),
        (minor1, minor2, major),
        (minor2, minor1, major),
    )
    axes = permutations[rng.next_index(6)]
    return PhysicalMaterial(Substance.INTERGALACTIC_MEDIUM, mass, Ellipsoid(*axes), ambient)


def _galaxy_cluster(seed, params, ambient):
    rng = RandomSource(seed)
    mass = rng.next_real(2e45, 2e46)
    radius = rng.next_real(3e23, 1.5e24)
    return PhysicalMaterial(Substance.INTERGALACTIC_MEDIUM, mass, Sphere(radius), ambient)


def _galaxy_group(seed, params, ambient):
    rng = RandomSource(seed)
    radius = rng.next_real(1.5e23, 3e23)
    return PhysicalMaterial(Substance.INTERGALACTIC_MEDIUM, 2e44, Sphere(radius), ambient)


def _galaxy_subgroup(seed, params: SubgroupParams, ambient):
    galaxy = derive_material(
        params.main_galaxy_type,
        params.main_galaxy_seed,
        GalaxyParams(params.main_galaxy_core_seed),
        ambient,
    )
    return PhysicalMaterial(
        Substance.INTERGALACTIC_MEDIUM,
        galaxy.mass * 1.25,
        Sphere(galaxy.shape.containing_radius * 10),
        ambient,
    )


# ── Galaxies and clusters ───────────────────────────────────────────

def _galaxy_shape(rng: RandomSource, structure_type: CosmicStructureType) -> Ellipsoid:
    if structure_type is _T.SPIRAL_GALAXY:
        radius = rng.next_real(2.4e20, 2.5e21)
        ratio = rng.normal_sample(0.02, 0.001, minimum=0.005)
    elif structure_type is _T.ELLIPTICAL_GALAXY:
        radius = rng.next_real(1.5e18, 1.5e21)
        ratio = rng.normal_sample(0.5, 0.25, minimum=0.05)
    else:
        radius = rng.next_real(2.5e19, 9.5e19)
        ratio = rng.normal_sample(0.3, 0.1, minimum=0.05)
    return Ellipsoid(radius, radius, radius * ratio)


def _galaxy(structure_type: CosmicStructureType):
    def derive(seed, params: GalaxyParams, ambient):
        rng = RandomSource(seed)
        shape = _galaxy_shape(rng, structure_type)
        dark_matter = rng.next_real(5, 15)
        core_mass = black_hole_mass(params.core_seed, structure_type is not _T.DWARF_GALAXY)
        mass = (shape.volume * GALAXY_SYSTEM_DENSITY * 1e30 + core_mass) * dark_matter
        return PhysicalMaterial(Substance.INTERSTELLAR_MEDIUM, mass, shape, ambient)
    return derive


def _globular_cluster(seed, params: GlobularClusterParams, ambient):
    rng = RandomSource(seed)
    radius = rng.next_real(8e16, 2.1e17)
    ratio = min(1.0, rng.normal_sample(0.9, 0.05, minimum=0.5))
    shape = Ellipsoid(radius, radius, radius * ratio)
    dark_matter = rng.next_real(5, 15)
    core_mass = black_hole_mass(params.core_seed, False)
    mass = (shape.volume * GLOBULAR_CLUSTER_SYSTEM_DENSITY * 1e30 + core_mass) * dark_matter
    return PhysicalMaterial(Substance.INTERSTELLAR_MEDIUM, mass, shape, ambient)


# ── Nebulae ─────────────────────────────────────────────────────────

def _nebula(hii: bool):
    factor = 1e17 if hii else 1.5e17
    limit = SPACE[_T.NEBULA]

    def derive(seed, params, ambient):
        rng = RandomSource(seed)
        axis = factor + rng.log_normal_sample() * factor
        while axis > limit:
            axis = factor + rng.log_normal_sample() * factor
        shape = Ellipsoid(axis, axis * rng.next_real(0.5, 1.5), axis * rng.next_real(0.5, 1.5))
        mass = rng.next_real(1.99e33, 1.99e37)
        if hii:
            return PhysicalMaterial(Substance.IONIZED_GAS, mass, shape, 10_000.0)
        return PhysicalMaterial(Substance.INTERSTELLAR_MEDIUM, mass, shape, ambient)
    return derive


def _planetary_nebula(seed, params, ambient):
    rng = RandomSource(seed)
    mass = rng.next_real(1.99e29, 1.99e30)
    return PhysicalMaterial(Substance.IONIZED_GAS, mass, Sphere(SPACE[_T.PLANETARY_NEBULA]), ambient)


# ── Asteroid fields ─────────────────────────────────────────────────

def _asteroid_field(seed, params: AsteroidFieldParams, ambient):
    rng = RandomSource(seed)
    y_factor = rng.next_real(0.5, 1.5)
    z_factor = rng.next_real(0.5, 1.5)
    major = params.major_radius
    if params.toroidal:
        minor = params.minor_radius
        if minor is None:
            minor = major * TORUS_MINOR_FRACTION
        shape = Torus(major, minor)
    else:
        shape = Ellipsoid(major, major * y_factor, major * z_factor)
    return PhysicalMaterial(Substance.DUST, shape.volume * ASTEROID_FIELD_MASS_DENSITY, shape, ambient)


def _oort_cloud(seed, params: AsteroidFieldParams, ambient):
    base = params.major_radius or 0.0
    inner = params.minor_radius if params.minor_radius is not None else base + OORT_CLOUD_INNER_OFFSET
    shape = HollowSphere(inner, base + OORT_CLOUD_SPACE)
    return PhysicalMaterial(Substance.ICE_VOLATILES, OORT_CLOUD_MASS, shape, ambient)


# ── Stars and systems ───────────────────────────────────────────────

def _star(seed, params: StarParams, ambient):
    return derive_star_material(seed, params)


def _star_system(seed, params: StarSystemParams, ambient):
    primary = derive_star_material(params.primary_seed, params.star)
    mass = primary.mass
    radius = STAR_SYSTEM_BASE_RADIUS
    if params.binary:
        companion = derive_star_material(params.companion_seed, params.companion_star)
        mass += companion.mass
        radius += params.companion_separation * (1 + params.companion_eccentricity)
    return PhysicalMaterial(Substance.INTERSTELLAR_MEDIUM, mass * 1.001, Sphere(radius), ambient)


def _planetoid(seed, params: PlanetoidParams, ambient):
    return derive_planetoid_material(seed, params, ambient)


Deriver = Callable[[int, StructureParams, float], PhysicalMaterial]

_DERIVERS: dict[CosmicStructureType, Deriver] = {
    _T.UNIVERSE: _universe,
    _T.SUPERCLUSTER: _supercluster,
    _T.GALAXY_CLUSTER: _galaxy_cluster,
    _T.GALAXY_GROUP: _galaxy_group,
    _T.GALAXY_SUBGROUP: _galaxy_subgroup,
    _T.SPIRAL_GALAXY: _galaxy(_T.SPIRAL_GALAXY),
    _T.ELLIPTICAL_GALAXY: _galaxy(_T.ELLIPTICAL_GALAXY),
    _T.DWARF_GALAXY: _galaxy(_T.DWARF_GALAXY),
    _T.GLOBULAR_CLUSTER: _globular_cluster,
    _T.NEBULA: _nebula(hii=False),
    _T.HII_REGION: _nebula(hii=True),
    _T.PLANETARY_NEBULA: _planetary_nebula,
    _T.STAR_SYSTEM: _star_system,
    _T.ASTEROID_FIELD: _asteroid_field,
    _T.OORT_CLOUD: _oort_cloud,
    _T.BLACK_HOLE: _black_hole,
    _T.STAR: _star,
    _T.PLANETOID: _planetoid,
}


def derive_material(
    structure_type: CosmicStructureType,
    seed: int,
    params: StructureParams | None = None,
    ambient_temperature: float = CosmicConstants.COSMIC_BACKGROUND_TEMPERATURE,
) -> PhysicalMaterial:
    """
    Physical material of a node.

    Args:
        structure_type: Tag selecting the derivation rule.
        seed: Node seed, unsigned 32-bit.
        params: Structural parameters; unset fields are resolved from the seed.
        ambient_temperature: Temperature of the surroundings (K).

    Returns:
        PhysicalMaterial, identical for identical arguments.

    Raises:
        ConstructionError: If the parameters describe an impossible shape.
    """
    params = resolve_params(structure_type, seed, params)
    return _DERIVERS[structure_type](seed, params, ambient_temperature)
