# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Cosmic locations: the polymorphic entity of the generator.

One class covers every structural type. The type tag selects the
material derivation, the density table, the child orbit rule and the
interior (dominant bodies) built at creation. Variant-only values live in
the ``params`` payload.
"""
import logging
from dataclasses import replace
from typing import Iterable

import numpy as np

from cosmogen.domain.child_definitions import ChildDefinition, child_definitions_for
from cosmogen.domain.constants import CosmicConstants, GenerationDefaults
from cosmogen.domain.derivation import (
    AsteroidFieldParams,
    BlackHoleParams,
    SUPERMASSIVE_THRESHOLD,
    GalaxyParams,
    StarSystemParams,
    StructureParams,
    SubgroupParams,
    derive_material,
    resolve_params,
)
from cosmogen.domain.errors import (
    ConstructionError,
    OrphanOrbitReference,
    PlacementExhausted,
)
from cosmogen.domain.location import Location
from cosmogen.domain.material import PhysicalMaterial
from cosmogen.domain.orbital_mechanics import escape_velocity
from cosmogen.domain.orbits import Orbit, OrbitalParameters, derive_orbit
from cosmogen.domain.placement import find_nearest_open_space, find_open_space, sample_point
from cosmogen.domain.planetoids import PlanetoidParams
from cosmogen.domain.population import choose_definition, draw_counts
from cosmogen.domain.randomness import RandomSource, default_random, validate_seed
from cosmogen.domain.records import LocationRecord
from cosmogen.domain.shapes import Shape
from cosmogen.domain.star_systems import build_star_system
from cosmogen.domain.stars import StarParams, StarType, luminosity_of
from cosmogen.domain.structure import FIELDS, GALAXIES, SPACE, CosmicStructureType
from cosmogen.domain.vectors import ORIGIN, Vector3, as_vector, is_origin, vec_sub

logger = logging.getLogger(__name__)

_T = CosmicStructureType

# Types that never hold children
_LEAF_TYPES = frozenset({_T.BLACK_HOLE, _T.STAR, _T.PLANETOID})

# Params fields naming the seeds of interior dominant bodies
_DOMINANT_SEED_FIELDS = (
    "core_seed", "main_galaxy_seed", "central_star_seed", "primary_seed", "companion_seed",
)


class CosmicLocation(Location):
    """A region or body of space with physical material."""

    def __init__(
        self,
        structure_type: CosmicStructureType,
        seed: int,
        params: StructureParams,
        material: PhysicalMaterial,
        *,
        id: str | None = None,
        parent: "CosmicLocation | None" = None,
        position: Vector3 = ORIGIN,
        name: str | None = None,
        parent_id: str | None = None,
        absolute_position: tuple[Vector3, ...] | None = None,
        velocity: Vector3 = ORIGIN,
        orbit: Orbit | None = None,
        ambient_temperature: float = CosmicConstants.COSMIC_BACKGROUND_TEMPERATURE,
    ) -> None:
        self.structure_type = structure_type
        self.seed = validate_seed(seed)
        self.params = params
        self.material = material
        self.velocity = as_vector(velocity)
        self.orbit = orbit
        self.ambient_temperature = ambient_temperature
        self._main_galaxy: CosmicLocation | None = None
        super().__init__(
            id=id,
            parent=parent,
            position=position,
            name=name or structure_type.display_name,
            parent_id=parent_id,
            absolute_position=absolute_position,
        )

    # ── Physical properties ─────────────────────────────────────────

    @property
    def mass(self) -> float:
        return self.material.mass

    @property
    def temperature(self) -> float:
        return self.material.temperature

    @property
    def shape(self) -> Shape:
        """Material shape at this node's position (parent frame)."""
        return self.material.shape.at_position(self.position)

    @property
    def volume(self) -> float:
        return self.material.shape.volume

    @property
    def bounding_radius(self) -> float:
        return self.material.shape.containing_radius

    @property
    def child_definitions(self) -> tuple[ChildDefinition, ...]:
        return child_definitions_for(self.structure_type)

    @property
    def is_supermassive(self) -> bool:
        return self.structure_type is _T.BLACK_HOLE and self.mass >= SUPERMASSIVE_THRESHOLD

    @property
    def luminosity(self) -> float:
        """Bolometric luminosity (W); zero for anything but stars."""
        if self.structure_type is not _T.STAR:
            return 0.0
        return luminosity_of(self.material)

    @property
    def escape_velocity(self) -> float:
        return escape_velocity(self.mass, self.bounding_radius)

    def gravity_from(self, other: "CosmicLocation") -> Vector3:
        """Gravitational acceleration (m/s²) exerted on this node by another."""
        offset = np.asarray(self.localize(other))
        distance = float(np.linalg.norm(offset))
        if distance == 0.0:
            return ORIGIN
        magnitude = CosmicConstants.G * other.mass / distance**2
        return as_vector(offset / distance * magnitude)

    def position_after(self, seconds: float) -> Vector3:
        """Local position after ``seconds``: along the orbit, else drifting."""
        if self.orbit is not None:
            position, _velocity = self.orbit.state_at(seconds)
            return position
        return as_vector(np.asarray(self.position) + np.asarray(self.velocity) * seconds)

    def contains(self, other: Location) -> bool:
        """True if other's center lies inside this node's shape."""
        return self.material.shape.at_position(ORIGIN).contains_point(self.localize(other))

    # ── Hierarchy ───────────────────────────────────────────────────

    def attach(self, child: Location) -> None:
        super().attach(child)
        if (
            self.structure_type is _T.GALAXY_SUBGROUP
            and isinstance(child, CosmicLocation)
            and child.structure_type in GALAXIES
            and child.seed == self.params.main_galaxy_seed
        ):
            self._main_galaxy = child

    def occupied(self, exclude: Location | None = None) -> list[tuple[Vector3, float]]:
        """(position, bounding radius) of placed children."""
        return [
            (c.position, c.bounding_radius)
            for c in self.children
            if c is not exclude and isinstance(c, CosmicLocation)
        ]

    def child_with_seed(self, seed: int | None) -> "CosmicLocation | None":
        if seed is None:
            return None
        for child in self.children:
            if isinstance(child, CosmicLocation) and child.seed == seed:
                return child
        return None

    def get_open_space(self, radius: float, rng: RandomSource | None = None) -> Vector3 | None:
        """Free position for a child of ``radius``, or None when saturated."""
        try:
            return find_open_space(self.material.shape, radius, self.occupied(), rng or default_random())
        except PlacementExhausted:
            logger.debug("%s has no open space for radius %g", self.name, radius)
            return None

    # ── Construction ────────────────────────────────────────────────

    @classmethod
    def _construct(
        cls,
        structure_type: CosmicStructureType,
        seed: int,
        params: StructureParams | None,
        ambient_temperature: float,
        name: str | None,
    ) -> "CosmicLocation":
        params = resolve_params(structure_type, seed, params)
        material = derive_material(structure_type, seed, params, ambient_temperature)
        return cls(
            structure_type,
            seed,
            params,
            material,
            name=name,
            ambient_temperature=ambient_temperature,
        )

    @classmethod
    def create(
        cls,
        structure_type: CosmicStructureType,
        parent: "CosmicLocation | None" = None,
        position: Vector3 | None = None,
        orbit: OrbitalParameters | None = None,
        *,
        params: StructureParams | None = None,
        assign_orbit: bool = True,
        rng: RandomSource | None = None,
        seed: int | None = None,
        space: float | None = None,
        name: str | None = None,
        ambient_temperature: float | None = None,
    ) -> "CosmicLocation":
        """
        Generate a new location.

        Args:
            structure_type: Kind of location.
            parent: Containing location; None for a root.
            position: Local position; searched in the parent when None.
            orbit: Explicit orbit; overrides the parent's orbit rule.
            params: Structural parameters; unset fields come from the seed.
            assign_orbit: Ask the parent for an orbit when none is given.
            rng: Ambient random source; process default when None.
            seed: Fixed seed; drawn from ``rng`` when None.
            space: Bounding radius for open-space search.
            name: Display name.
            ambient_temperature: Surroundings (K); parent's temperature by default.

        Returns:
            The new location, attached to its parent.

        Raises:
            ConstructionError: On invalid parameters or an impossible orbit.
            PlacementExhausted: If no open space was found in the parent.
            OrphanOrbitReference: If ``orbit`` names an unreachable body.
        """
        rng = rng or default_random()
        seed = rng.next_uint() if seed is None else validate_seed(seed)
        if ambient_temperature is None:
            ambient_temperature = (
                parent.temperature if parent is not None
                else CosmicConstants.COSMIC_BACKGROUND_TEMPERATURE
            )
        if (
            structure_type is _T.ASTEROID_FIELD
            and parent is not None
            and parent.structure_type is _T.STAR_SYSTEM
            and position is not None
            and is_origin(as_vector(position))
            and (params is None or params.major_radius is None)
        ):
            params = replace(params or AsteroidFieldParams(), toroidal=True)

        node = cls._construct(structure_type, seed, params, ambient_temperature, name)

        if parent is not None:
            if position is None:
                radius = max(space or SPACE.get(structure_type, 0.0), node.bounding_radius)
                position = find_open_space(parent.material.shape, radius, parent.occupied(), rng)
            node.position = position
            parent.attach(node)
            try:
                node._assign_orbit(parent, orbit, assign_orbit, rng)
            except (ConstructionError, OrphanOrbitReference):
                parent.detach(node)
                raise
        elif position is not None:
            node.position = position

        node._build_interior(rng)
        logger.debug("created %s (seed %d)", node.name, node.seed)
        return node

    def _assign_orbit(
        self,
        parent: "CosmicLocation",
        orbit: OrbitalParameters | None,
        assign_orbit: bool,
        rng: RandomSource,
    ) -> None:
        if orbit is None and assign_orbit:
            orbit = parent.child_orbit_for(self, rng)
        if orbit is not None:
            self.apply_orbit(orbit, rng)

    def apply_orbit(self, parameters: OrbitalParameters, rng: RandomSource | None = None) -> Orbit:
        """Derive and set this node's orbit, position and velocity."""
        if parameters.orbited_id is not None and not self.is_accessible(parameters.orbited_id):
            raise OrphanOrbitReference(parameters.orbited_id, self.id)
        orbit, position, velocity = derive_orbit(
            self.position, self.mass, parameters, rng or default_random()
        )
        self.orbit = orbit
        self.position = position
        self.velocity = velocity
        return orbit

    # ── Orbit rules ─────────────────────────────────────────────────

    def child_orbit_for(
        self,
        child: "CosmicLocation",
        rng: RandomSource | None = None,
    ) -> OrbitalParameters | None:
        """
        Orbit this location grants a child that has no explicit orbit.

        Centrally placed children of galaxies, globular clusters, subgroups
        and star systems are dominant bodies and get none.
        """
        rng = rng or default_random()
        kind = self.structure_type
        if kind in FIELDS:
            return self._field_child_orbit()
        if kind not in GALAXIES | {_T.GALAXY_SUBGROUP, _T.GLOBULAR_CLUSTER, _T.STAR_SYSTEM}:
            return None
        if is_origin(child.position):
            return None
        if kind is _T.GALAXY_SUBGROUP:
            galaxy = self.main_galaxy(rng)
            if galaxy is child:
                return None
            return OrbitalParameters.from_eccentricity(
                galaxy.mass, galaxy.position, rng.next_real(0.0, 0.1), galaxy.id
            )
        if kind is _T.STAR_SYSTEM:
            eccentricity = min(0.99, rng.positive_normal_sample(0.0, 0.05))
        else:
            eccentricity = rng.next_real(0.0, 0.1)
        return OrbitalParameters.from_eccentricity(self.mass, ORIGIN, eccentricity, self.id)

    def _field_child_orbit(self) -> OrbitalParameters | None:
        if self.params.child_orbit is not None:
            return self.params.child_orbit
        if self.orbit is None:
            return None
        return OrbitalParameters.from_eccentricity(
            self.orbit.orbited_mass,
            vec_sub(self.orbit.orbited_position, self.position),
            self.orbit.eccentricity,
            self.orbit.orbited_id,
        )

    # ── Dominant children ───────────────────────────────────────────

    def main_galaxy(self, rng: RandomSource | None = None) -> "CosmicLocation":
        """The subgroup's main galaxy, generated on first access."""
        if self.structure_type is not _T.GALAXY_SUBGROUP:
            raise ConstructionError(f"{self.structure_type.name} has no main galaxy")
        if self._main_galaxy is None:
            p: SubgroupParams = self.params
            self._main_galaxy = type(self).create(
                p.main_galaxy_type,
                parent=self,
                position=ORIGIN,
                params=GalaxyParams(p.main_galaxy_core_seed),
                seed=p.main_galaxy_seed,
                assign_orbit=False,
                rng=rng,
            )
        return self._main_galaxy

    def _build_interior(self, rng: RandomSource) -> None:
        kind = self.structure_type
        if kind in GALAXIES or kind is _T.GLOBULAR_CLUSTER:
            supermassive = kind in (_T.SPIRAL_GALAXY, _T.ELLIPTICAL_GALAXY)
            self._ensure_central(
                _T.BLACK_HOLE, self.params.core_seed, BlackHoleParams(supermassive), rng
            )
        elif kind is _T.PLANETARY_NEBULA:
            self._ensure_central(
                _T.STAR, self.params.central_star_seed, StarParams(StarType.WHITE_DWARF), rng
            )
        elif kind is _T.GALAXY_GROUP:
            self._build_subgroups(rng)
        elif kind is _T.STAR_SYSTEM:
            build_star_system(self, rng)

    def _ensure_central(
        self,
        structure_type: CosmicStructureType,
        seed: int,
        params: StructureParams,
        rng: RandomSource,
    ) -> "CosmicLocation":
        existing = self.child_with_seed(seed)
        if existing is not None:
            return existing
        return type(self).create(
            structure_type, parent=self, position=ORIGIN, params=params,
            seed=seed, assign_orbit=False, rng=rng,
        )

    def _dominant_seeds(self) -> set[int]:
        """Seeds of the bodies ``_build_interior`` and ``main_galaxy`` create."""
        seeds = {
            getattr(self.params, name, None)
            for name in _DOMINANT_SEED_FIELDS
        }
        seeds.discard(None)
        return seeds

    def _build_subgroups(self, rng: RandomSource) -> None:
        for _ in range(1 + rng.next_index(5)):
            seed = rng.next_uint()
            material = derive_material(_T.GALAXY_SUBGROUP, seed, None, self.temperature)
            radius = max(SPACE[_T.GALAXY_SUBGROUP], material.shape.containing_radius)
            start = sample_point(self.material.shape, rng) or ORIGIN
            try:
                position = find_nearest_open_space(
                    self.material.shape, start, radius, self.occupied(), rng
                )
                type(self).create(
                    _T.GALAXY_SUBGROUP, parent=self, position=position, seed=seed, rng=rng
                )
            except ConstructionError as exc:
                logger.warning("%s: skipped subgroup: %s", self.name, exc)

    # ── Population ──────────────────────────────────────────────────

    def generate_children(
        self,
        limit: int = GenerationDefaults.CHILD_LIMIT,
        rng: RandomSource | None = None,
    ) -> list["CosmicLocation"]:
        """
        Populate this location from its density table.

        Counts are drawn per definition from density × volume, less the
        children already present that satisfy each definition. Up to
        ``limit`` children are then created, each type chosen by density
        among those with count left. Dominant bodies (core, main galaxy,
        central or system stars) never count against a definition. A child
        that cannot be placed is logged and skipped; after ``limit`` such
        failures the parent counts as full.

        Returns:
            The children created by this call.
        """
        definitions = self.child_definitions
        if not definitions:
            return []
        rng = rng or default_random()
        if self.structure_type is _T.GALAXY_SUBGROUP:
            self.main_galaxy(rng)

        remaining = draw_counts(definitions, self.volume, rng)
        dominant = self._dominant_seeds()
        for existing in self.children:
            if not isinstance(existing, CosmicLocation) or existing.seed in dominant:
                continue
            for index, definition in enumerate(definitions):
                if remaining[index] > 0 and _satisfies(existing, definition):
                    remaining[index] -= 1
                    break
        created: list[CosmicLocation] = []
        skipped = 0
        while len(created) < limit and skipped < limit:
            index = choose_definition(definitions, remaining, rng)
            if index is None:
                break
            remaining[index] -= 1
            definition = definitions[index]
            try:
                child = type(self).create(
                    definition.structure_type,
                    parent=self,
                    params=_params_for(definition),
                    space=definition.space,
                    rng=rng,
                )
            except ConstructionError as exc:
                logger.warning(
                    "%s: skipped %s: %s", self.name, definition.structure_type.name, exc
                )
                skipped += 1
                continue
            created.append(child)
        logger.debug("%s: generated %d children", self.name, len(created))
        return created

    # ── Enclosing parents ───────────────────────────────────────────

    @classmethod
    def get_parent_for_child(
        cls,
        child: "CosmicLocation",
        structure_type: CosmicStructureType,
        position: Vector3 | None = None,
        orbit: OrbitalParameters | None = None,
        *,
        params: StructureParams | None = None,
        rng: RandomSource | None = None,
    ) -> "CosmicLocation | None":
        """
        Generate a parent of ``structure_type`` around an existing child.

        A child that fits the parent's dominant slot (main galaxy of a
        subgroup, core black hole of a galaxy, primary star of a system,
        central white dwarf of a planetary nebula) is adopted into it and
        placed at the center. Otherwise it is placed in open space. The
        child then receives ``orbit`` or the parent's orbit rule.

        Returns:
            The new parent, or None if the type cannot hold children.

        Raises:
            PlacementExhausted: If the child does not fit anywhere.
        """
        if structure_type in _LEAF_TYPES:
            return None
        rng = rng or default_random()
        seed = rng.next_uint()
        params = resolve_params(structure_type, seed, params)
        params, central = _adopt(structure_type, params, child)

        parent = cls._construct(
            structure_type, seed, params,
            CosmicConstants.COSMIC_BACKGROUND_TEMPERATURE, None,
        )
        if central:
            child.position = ORIGIN if position is None else position
            parent.attach(child)
            parent._build_interior(rng)
        else:
            # Interior bodies are placed before the child
            parent._build_interior(rng)
            if position is None:
                radius = max(SPACE.get(child.structure_type, 0.0), child.bounding_radius)
                position = find_open_space(parent.material.shape, radius, parent.occupied(), rng)
            child.position = position
            parent.attach(child)

        if child.orbit is None:
            if orbit is None:
                orbit = parent.child_orbit_for(child, rng)
            if orbit is not None:
                child.apply_orbit(orbit, rng)
        return parent

    # ── Persistence ─────────────────────────────────────────────────

    @classmethod
    def rehydrate(
        cls,
        id: str,
        seed: int,
        structure_type: CosmicStructureType,
        parent_id: str | None,
        absolute_position: Iterable[Vector3] | None,
        name: str | None,
        velocity: Vector3 = ORIGIN,
        orbit: Orbit | None = None,
        position: Vector3 | None = None,
        temperature: float = CosmicConstants.COSMIC_BACKGROUND_TEMPERATURE,
        params: StructureParams | None = None,
    ) -> "CosmicLocation":
        """
        Rebuild a stored location; material is re-derived from the seed.

        ``temperature`` is the ambient temperature the node was derived with.
        """
        chain = tuple(as_vector(p) for p in absolute_position) if absolute_position else None
        if position is None:
            position = chain[-1] if chain else ORIGIN
        params = resolve_params(structure_type, seed, params)
        material = derive_material(structure_type, seed, params, temperature)
        return cls(
            structure_type,
            seed,
            params,
            material,
            id=id,
            position=position,
            name=name,
            parent_id=parent_id,
            absolute_position=chain,
            velocity=velocity,
            orbit=orbit,
            ambient_temperature=temperature,
        )

    def capture(self) -> LocationRecord:
        """Record with exactly the fields ``rehydrate`` needs."""
        return LocationRecord(
            id=self.id,
            seed=self.seed,
            structure_type=self.structure_type,
            parent_id=self.parent_id,
            absolute_position=self.absolute_position,
            name=self.name,
            velocity=self.velocity,
            orbit=self.orbit,
            position=self.position,
            temperature=self.ambient_temperature,
            params=self.params,
        )

    @classmethod
    def from_record(cls, record: LocationRecord) -> "CosmicLocation":
        return cls.rehydrate(
            record.id,
            record.seed,
            record.structure_type,
            record.parent_id,
            record.absolute_position,
            record.name,
            velocity=record.velocity,
            orbit=record.orbit,
            position=record.position,
            temperature=record.temperature,
            params=record.params,
        )


def _satisfies(child: CosmicLocation, definition: ChildDefinition) -> bool:
    """Whether an existing child fills a slot of ``definition``."""
    if child.structure_type is not definition.structure_type:
        return False
    if definition.planet_type is not None:
        return child.params.planet_type is definition.planet_type
    if definition.star is not None:
        star = child.params if child.structure_type is _T.STAR else child.params.star
        wanted = definition.star
        return (
            star.star_type is wanted.star_type
            and wanted.spectral_class in (None, star.spectral_class)
            and wanted.luminosity_class in (None, star.luminosity_class)
        )
    return True


def _params_for(definition: ChildDefinition) -> StructureParams | None:
    if definition.star is not None:
        if definition.structure_type is _T.STAR:
            return definition.star
        return StarSystemParams(star=definition.star)
    if definition.planet_type is not None:
        return PlanetoidParams(definition.planet_type)
    return None


def _adopt(
    structure_type: CosmicStructureType,
    params: StructureParams,
    child: CosmicLocation,
) -> tuple[StructureParams, bool]:
    """Parameters that make ``child`` the parent's dominant body, if it fits."""
    kind = child.structure_type
    if structure_type is _T.GALAXY_SUBGROUP and kind in GALAXIES - {_T.DWARF_GALAXY}:
        return replace(
            params,
            main_galaxy_seed=child.seed,
            main_galaxy_type=kind,
            main_galaxy_core_seed=child.params.core_seed,
        ), True
    if kind is _T.BLACK_HOLE:
        wants_supermassive = structure_type in (_T.SPIRAL_GALAXY, _T.ELLIPTICAL_GALAXY)
        fits = (
            structure_type in GALAXIES or structure_type is _T.GLOBULAR_CLUSTER
        ) and child.params.supermassive == wants_supermassive
        if fits:
            return replace(params, core_seed=child.seed), True
    if kind is _T.STAR:
        if structure_type is _T.STAR_SYSTEM:
            return replace(params, star=child.params, primary_seed=child.seed), True
        if structure_type is _T.PLANETARY_NEBULA and child.params.star_type is StarType.WHITE_DWARF:
            return replace(params, central_star_seed=child.seed), True
    return params, False


def restore_tree(records: Iterable[LocationRecord]) -> list[CosmicLocation]:
    """
    Rehydrate a set of records and link them by parent id.

    Returns:
        Root locations (records whose parent is not in the set).
    """
    nodes = {r.id: CosmicLocation.from_record(r) for r in records}
    roots = []
    for node in nodes.values():
        parent = nodes.get(node.parent_id) if node.parent_id else None
        if parent is None:
            roots.append(node)
        else:
            parent.attach(node)
    return roots


# ── Convenience constructors ────────────────────────────────────────

def create_universe(rng: RandomSource | None = None, name: str | None = None) -> CosmicLocation:
    return CosmicLocation.create(_T.UNIVERSE, rng=rng, name=name)


def create_asteroid_field(
    parent: CosmicLocation | None = None,
    position: Vector3 | None = None,
    orbit: OrbitalParameters | None = None,
    *,
    major_radius: float | None = None,
    minor_radius: float | None = None,
    child_orbit: OrbitalParameters | None = None,
    oort_cloud: bool = False,
    rng: RandomSource | None = None,
) -> CosmicLocation:
    """
    Asteroid field or Oort cloud.

    An asteroid field placed at the center of a star system is a torus in
    the system plane; anywhere else it is an ellipsoid.
    """
    params = AsteroidFieldParams(major_radius, minor_radius, child_orbit=child_orbit)
    kind = _T.OORT_CLOUD if oort_cloud else _T.ASTEROID_FIELD
    return CosmicLocation.create(kind, parent, position, orbit, params=params, rng=rng)


def create_oort_cloud(
    parent: CosmicLocation | None = None,
    position: Vector3 | None = None,
    *,
    star_system_radius: float | None = None,
    child_orbit: OrbitalParameters | None = None,
    rng: RandomSource | None = None,
) -> CosmicLocation:
    return create_asteroid_field(
        parent, position, major_radius=star_system_radius,
        child_orbit=child_orbit, oort_cloud=True, rng=rng,
    )


def create_black_hole(
    parent: CosmicLocation | None = None,
    position: Vector3 | None = None,
    orbit: OrbitalParameters | None = None,
    *,
    supermassive: bool = False,
    rng: RandomSource | None = None,
) -> CosmicLocation:
    return CosmicLocation.create(
        _T.BLACK_HOLE, parent, position, orbit,
        params=BlackHoleParams(supermassive), rng=rng,
    )


def create_galaxy(
    parent: CosmicLocation | None = None,
    position: Vector3 | None = None,
    orbit: OrbitalParameters | None = None,
    *,
    structure_type: CosmicStructureType | None = None,
    rng: RandomSource | None = None,
) -> CosmicLocation:
    """Galaxy of the given type; spiral 70% / elliptical 30% when unset."""
    rng = rng or default_random()
    if structure_type is None:
        structure_type = _T.SPIRAL_GALAXY if rng.next_bool(0.7) else _T.ELLIPTICAL_GALAXY
    if structure_type not in GALAXIES:
        raise ConstructionError(f"structure_type must be a galaxy type, got {structure_type.name}")
    return CosmicLocation.create(structure_type, parent, position, orbit, rng=rng)


def create_star(
    parent: CosmicLocation | None = None,
    position: Vector3 | None = None,
    orbit: OrbitalParameters | None = None,
    *,
    star: StarParams | None = None,
    rng: RandomSource | None = None,
) -> CosmicLocation:
    return CosmicLocation.create(_T.STAR, parent, position, orbit, params=star, rng=rng)


def create_star_system(
    parent: CosmicLocation | None = None,
    position: Vector3 | None = None,
    orbit: OrbitalParameters | None = None,
    *,
    star: StarParams | None = None,
    binary: bool | None = None,
    rng: RandomSource | None = None,
) -> CosmicLocation:
    params = StarSystemParams(star=star or StarParams(), binary=binary)
    return CosmicLocation.create(_T.STAR_SYSTEM, parent, position, orbit, params=params, rng=rng)


def create_planetoid(
    parent: CosmicLocation | None = None,
    position: Vector3 | None = None,
    orbit: OrbitalParameters | None = None,
    *,
    planet: PlanetoidParams | None = None,
    rng: RandomSource | None = None,
) -> CosmicLocation:
    return CosmicLocation.create(_T.PLANETOID, parent, position, orbit, params=planet, rng=rng)
