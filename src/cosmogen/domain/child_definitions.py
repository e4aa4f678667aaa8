# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Child density tables.

For each structural type, the kinds of children it holds, the open space
each needs and the expected count per cubic metre. Tables are static.
"""
from dataclasses import dataclass

from cosmogen.domain.planetoids import PlanetType, planetoid_space
from cosmogen.domain.stars import LuminosityClass, SpectralClass, StarParams, StarType
from cosmogen.domain.structure import SPACE, CosmicStructureType

_T = CosmicStructureType


@dataclass(frozen=True)
class ChildDefinition:
    """One entry of a density table."""
    structure_type: CosmicStructureType
    space: float      # m, bounding radius requested from open-space search
    density: float    # expected children per m³
    star: StarParams | None = None
    planet_type: PlanetType | None = None

    def __post_init__(self):
        if not self.space > 0:
            raise ValueError(f"space must be positive, got {self.space}")
        if not 0 < self.density < float("inf"):
            raise ValueError(f"density must be positive and finite, got {self.density}")


def _region(structure_type: CosmicStructureType, density: float) -> ChildDefinition:
    return ChildDefinition(structure_type, SPACE[structure_type], density)


def _system(
    density: float,
    star_type: StarType = StarType.MAIN_SEQUENCE,
    spectral_class: SpectralClass | None = None,
    luminosity_class: LuminosityClass | None = None,
) -> ChildDefinition:
    return ChildDefinition(
        _T.STAR_SYSTEM,
        SPACE[_T.STAR_SYSTEM],
        density,
        star=StarParams(star_type, spectral_class, luminosity_class),
    )


def _planet(density: float, planet_type: PlanetType) -> ChildDefinition:
    return ChildDefinition(_T.PLANETOID, planetoid_space(planet_type), density, planet_type=planet_type)


# Stellar systems per m³ inside galaxies and globular clusters.
GALAXY_SYSTEM_DENSITY = 2.75e-50
GLOBULAR_CLUSTER_SYSTEM_DENSITY = 2.5e-47


def _young_population(system: float) -> tuple[ChildDefinition, ...]:
    """Disk population: full main sequence, giants, star-forming regions."""
    rogue = system * 3
    main = system * 0.9096
    giant = system * 0.05
    return (
        _planet(rogue * 5 / 12, PlanetType.GAS_GIANT),
        _planet(rogue * 0.25, PlanetType.ICE_GIANT),
        _planet(rogue / 6, PlanetType.TERRESTRIAL),
        _planet(rogue / 24, PlanetType.OCEAN),
        _planet(rogue / 24, PlanetType.IRON),
        _planet(rogue / 12, PlanetType.CARBON),
        _system(system / 6, StarType.BROWN_DWARF),
        _system(main * 0.7645 * 0.998, spectral_class=SpectralClass.M, luminosity_class=LuminosityClass.V),
        _system(main * 0.7645 * 0.002, spectral_class=SpectralClass.M, luminosity_class=LuminosityClass.SUBDWARF),
        _system(main * 0.121 * 0.987, spectral_class=SpectralClass.K, luminosity_class=LuminosityClass.V),
        _system(main * 0.121 * 0.01, spectral_class=SpectralClass.K, luminosity_class=LuminosityClass.IV),
        _system(main * 0.076 * 0.992, spectral_class=SpectralClass.G, luminosity_class=LuminosityClass.V),
        _system(main * 0.076 * 0.008, spectral_class=SpectralClass.G, luminosity_class=LuminosityClass.IV),
        _system(main * 0.03 * 0.982, spectral_class=SpectralClass.F, luminosity_class=LuminosityClass.V),
        _system(main * 0.03 * 0.018, spectral_class=SpectralClass.F, luminosity_class=LuminosityClass.IV),
        _system(main * 0.006, spectral_class=SpectralClass.A, luminosity_class=LuminosityClass.V),
        _system(main * 0.0013, spectral_class=SpectralClass.B, luminosity_class=LuminosityClass.V),
        _system(main * 3e-7, spectral_class=SpectralClass.O, luminosity_class=LuminosityClass.V),
        _system(system * 0.04, StarType.WHITE_DWARF),
        _system(system * 4e-4, StarType.NEUTRON),
        _system(giant * 0.045, StarType.RED_GIANT),
        _system(giant * 0.035, StarType.BLUE_GIANT),
        _system(giant * 0.02, StarType.YELLOW_GIANT),
        ChildDefinition(_T.BLACK_HOLE, SPACE[_T.BLACK_HOLE], system * 4e-4),
        _region(_T.PLANETARY_NEBULA, system * 1.5e-8),
        _region(_T.NEBULA, system * 4e-10),
        _region(_T.HII_REGION, system * 4e-10),
    )


def _old_population(system: float) -> tuple[ChildDefinition, ...]:
    """Spheroid population: late-type dwarfs, remnants, red giants."""
    rogue = system * 3
    main = system * 0.9096
    return (
        _planet(rogue * 5 / 12, PlanetType.GAS_GIANT),
        _planet(rogue * 0.25, PlanetType.ICE_GIANT),
        _planet(rogue / 3, PlanetType.TERRESTRIAL),
        _system(system / 6, StarType.BROWN_DWARF),
        _system(main * 0.7645, spectral_class=SpectralClass.M, luminosity_class=LuminosityClass.V),
        _system(main * 0.121, spectral_class=SpectralClass.K, luminosity_class=LuminosityClass.V),
        _system(main * 0.076, spectral_class=SpectralClass.G, luminosity_class=LuminosityClass.V),
        _system(system * 0.04, StarType.WHITE_DWARF),
        _system(system * 4e-4, StarType.NEUTRON),
        _system(system * 0.05, StarType.RED_GIANT),
        ChildDefinition(_T.BLACK_HOLE, SPACE[_T.BLACK_HOLE], system * 4e-4),
        _region(_T.PLANETARY_NEBULA, system * 1.5e-8),
    )


ASTEROID_FIELD_DENSITY = 13e-31
OORT_CLOUD_DENSITY = 8.31e-38

_ASTEROID_FIELD = (
    _planet(ASTEROID_FIELD_DENSITY * 0.74, PlanetType.ASTEROID_C),
    _planet(ASTEROID_FIELD_DENSITY * 0.14, PlanetType.ASTEROID_S),
    _planet(ASTEROID_FIELD_DENSITY * 0.1, PlanetType.ASTEROID_M),
    _planet(ASTEROID_FIELD_DENSITY * 0.02, PlanetType.COMET),
    _planet(ASTEROID_FIELD_DENSITY * 3e-10, PlanetType.DWARF),
    _planet(ASTEROID_FIELD_DENSITY * 1e-10, PlanetType.ROCKY_DWARF),
)

_OORT_CLOUD = (
    _planet(OORT_CLOUD_DENSITY * 0.85, PlanetType.COMET),
    _planet(OORT_CLOUD_DENSITY * 0.11, PlanetType.ASTEROID_C),
    _planet(OORT_CLOUD_DENSITY * 0.025, PlanetType.ASTEROID_S),
    _planet(OORT_CLOUD_DENSITY * 0.015, PlanetType.ASTEROID_M),
)

_HII_REGION_DENSITY = 6e-50

_TABLES: dict[CosmicStructureType, tuple[ChildDefinition, ...]] = {
    _T.UNIVERSE: (_region(_T.SUPERCLUSTER, 5.8e-26),),
    _T.SUPERCLUSTER: (
        _region(_T.GALAXY_CLUSTER, 2.563e-77),
        _region(_T.GALAXY_GROUP, 5.126e-77),
    ),
    _T.GALAXY_CLUSTER: (_region(_T.GALAXY_GROUP, 1.415e-72),),
    _T.GALAXY_SUBGROUP: (
        _region(_T.DWARF_GALAXY, 1e-66 * 0.26),
        _region(_T.GLOBULAR_CLUSTER, 1e-66 * 0.74),
    ),
    _T.SPIRAL_GALAXY: _young_population(GALAXY_SYSTEM_DENSITY),
    _T.DWARF_GALAXY: _young_population(GALAXY_SYSTEM_DENSITY),
    _T.ELLIPTICAL_GALAXY: _old_population(GALAXY_SYSTEM_DENSITY),
    _T.GLOBULAR_CLUSTER: _old_population(GLOBULAR_CLUSTER_SYSTEM_DENSITY),
    _T.HII_REGION: (
        _system(_HII_REGION_DENSITY * 0.9998, spectral_class=SpectralClass.B, luminosity_class=LuminosityClass.V),
        _system(_HII_REGION_DENSITY * 0.0002, spectral_class=SpectralClass.O, luminosity_class=LuminosityClass.V),
    ),
    _T.ASTEROID_FIELD: _ASTEROID_FIELD,
    _T.OORT_CLOUD: _OORT_CLOUD,
}


def child_definitions_for(structure_type: CosmicStructureType) -> tuple[ChildDefinition, ...]:
    """Density table for a structural type; empty when it has none."""
    return _TABLES.get(structure_type, ())
