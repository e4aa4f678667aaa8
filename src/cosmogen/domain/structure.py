# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Structural types of cosmic locations.

Closed classification plus the representative open-space radius each
type claims when it is placed inside a parent.
"""
from enum import Enum


class CosmicStructureType(Enum):
    UNIVERSE = "universe"
    SUPERCLUSTER = "supercluster"
    GALAXY_CLUSTER = "galaxy_cluster"
    GALAXY_GROUP = "galaxy_group"
    GALAXY_SUBGROUP = "galaxy_subgroup"
    SPIRAL_GALAXY = "spiral_galaxy"
    ELLIPTICAL_GALAXY = "elliptical_galaxy"
    DWARF_GALAXY = "dwarf_galaxy"
    GLOBULAR_CLUSTER = "globular_cluster"
    NEBULA = "nebula"
    HII_REGION = "hii_region"
    PLANETARY_NEBULA = "planetary_nebula"
    STAR_SYSTEM = "star_system"
    ASTEROID_FIELD = "asteroid_field"
    OORT_CLOUD = "oort_cloud"
    BLACK_HOLE = "black_hole"
    STAR = "star"
    PLANETOID = "planetoid"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES.get(self, self.value.replace("_", " ").title())


GALAXIES = frozenset({
    CosmicStructureType.SPIRAL_GALAXY,
    CosmicStructureType.ELLIPTICAL_GALAXY,
    CosmicStructureType.DWARF_GALAXY,
})

NEBULAE = frozenset({
    CosmicStructureType.NEBULA,
    CosmicStructureType.HII_REGION,
    CosmicStructureType.PLANETARY_NEBULA,
})

FIELDS = frozenset({
    CosmicStructureType.ASTEROID_FIELD,
    CosmicStructureType.OORT_CLOUD,
})

_DISPLAY_NAMES = {
    CosmicStructureType.HII_REGION: "H II Region",
    CosmicStructureType.OORT_CLOUD: "Oort Cloud",
}

# Open space (m) a type needs inside its parent.
SPACE: dict[CosmicStructureType, float] = {
    CosmicStructureType.SUPERCLUSTER: 9.4607e25,
    CosmicStructureType.GALAXY_CLUSTER: 1.5e24,
    CosmicStructureType.GALAXY_GROUP: 3.0e23,
    CosmicStructureType.GALAXY_SUBGROUP: 5.0e22,
    CosmicStructureType.SPIRAL_GALAXY: 2.5e22,
    CosmicStructureType.ELLIPTICAL_GALAXY: 2.5e22,
    CosmicStructureType.DWARF_GALAXY: 9.5e19,
    CosmicStructureType.GLOBULAR_CLUSTER: 2.1e17,
    CosmicStructureType.NEBULA: 5.5e18,
    CosmicStructureType.HII_REGION: 5.5e18,
    CosmicStructureType.PLANETARY_NEBULA: 9.5e15,
    CosmicStructureType.STAR_SYSTEM: 3.5e16,
    CosmicStructureType.ASTEROID_FIELD: 3.15e12,
    CosmicStructureType.OORT_CLOUD: 7.5e15,
    CosmicStructureType.BLACK_HOLE: 60_000.0,
    CosmicStructureType.STAR: 1.0e10,
    CosmicStructureType.PLANETOID: 2.5e8,
}

OORT_CLOUD_SPACE = SPACE[CosmicStructureType.OORT_CLOUD]
