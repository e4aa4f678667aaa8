# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
cosmogen

Procedural generation of a hierarchical universe: superclusters down to
star systems, planets and comets. Every location carries a seed from
which its physical material is re-derived, so a stored tree regenerates
identical physics. Children are placed without overlap and bound into
descriptive Keplerian orbits.
"""

from cosmogen.domain.constants import CosmicConstants, GenerationDefaults
from cosmogen.domain.errors import (
    ConstructionError,
    OrphanOrbitReference,
    PlacementExhausted,
)
from cosmogen.domain.randomness import RandomSource
from cosmogen.domain.shapes import Ellipsoid, HollowSphere, Sphere, Torus
from cosmogen.domain.material import PhysicalMaterial, Substance
from cosmogen.domain.orbits import Orbit, OrbitalParameters
from cosmogen.domain.structure import CosmicStructureType
from cosmogen.domain.stars import (
    LuminosityClass,
    SpectralClass,
    StarParams,
    StarType,
)
from cosmogen.domain.planetoids import PlanetoidParams, PlanetType
from cosmogen.domain.child_definitions import ChildDefinition, child_definitions_for
from cosmogen.domain.derivation import (
    AsteroidFieldParams,
    BlackHoleParams,
    GalaxyParams,
    GlobularClusterParams,
    PlanetaryNebulaParams,
    RegionParams,
    StarSystemParams,
    SubgroupParams,
    derive_material,
)
from cosmogen.domain.location import Location
from cosmogen.domain.records import LocationRecord
from cosmogen.domain.cosmic_location import (
    CosmicLocation,
    create_asteroid_field,
    create_black_hole,
    create_galaxy,
    create_oort_cloud,
    create_planetoid,
    create_star,
    create_star_system,
    create_universe,
    restore_tree,
)

__version__ = "0.1.0"
