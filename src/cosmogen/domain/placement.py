# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Open-space search.

Finds a position for a new child sphere inside a parent shape without
overlapping the bounding spheres of already-placed children. Works in
the parent's local frame: the shape is taken at the origin.
"""
import math
from typing import Iterable

import numpy as np

from cosmogen.domain.constants import GenerationDefaults
from cosmogen.domain.errors import PlacementExhausted
from cosmogen.domain.randomness import RandomSource
from cosmogen.domain.shapes import Shape
from cosmogen.domain.vectors import ORIGIN, Vector3, as_vector

Occupied = Iterable[tuple[Vector3, float]]


def overlaps(center: Vector3, radius: float, occupied: Occupied) -> bool:
    """True if the sphere intersects any (center, radius) in occupied."""
    for other_center, other_radius in occupied:
        if float(np.linalg.norm(np.subtract(center, other_center))) < radius + other_radius:
            return True
    return False


def sample_point(shape: Shape, rng: RandomSource) -> Vector3 | None:
    """
    Uniform point inside a shape centred at the origin, by rejection
    against its bounding box. None if every sample missed.
    """
    local = shape.at_position(ORIGIN)
    for _ in range(GenerationDefaults.SHAPE_SAMPLE_ATTEMPTS):
        point = rng.next_point_in_box(local.half_extents)
        if local.contains_point(point):
            return point
    return None


def find_open_space(
    shape: Shape,
    radius: float,
    occupied: Occupied,
    rng: RandomSource,
    attempts: int = GenerationDefaults.PLACEMENT_ATTEMPTS,
) -> Vector3:
    """
    Find a position for a sphere of ``radius`` inside ``shape``.

    Args:
        shape: Parent shape; its own position is ignored.
        radius: Bounding radius of the new child (m).
        occupied: (center, radius) of existing children, parent frame.
        rng: Random source for candidates.
        attempts: Number of candidates to try.

    Returns:
        Child position in the parent frame.

    Raises:
        PlacementExhausted: If no candidate succeeded within ``attempts`` tries.
    """
    local = shape.at_position(ORIGIN)
    occupied = list(occupied)
    for _ in range(attempts):
        candidate = sample_point(local, rng)
        if candidate is None:
            continue
        if not local.contains_sphere(candidate, radius):
            continue
        if overlaps(candidate, radius, occupied):
            continue
        return candidate
    raise PlacementExhausted(radius, attempts)


def find_nearest_open_space(
    shape: Shape,
    position: Vector3,
    radius: float,
    occupied: Occupied,
    rng: RandomSource,
    attempts: int = GenerationDefaults.NEAREST_PLACEMENT_ATTEMPTS,
) -> Vector3:
    """
    Find open space as close as possible to a preferred position.

    Starts at ``position`` and walks outward in random directions, the
    step growing by ``radius`` after every miss.

    Raises:
        PlacementExhausted: If no candidate succeeded within ``attempts`` tries.
    """
    local = shape.at_position(ORIGIN)
    occupied = list(occupied)
    start = np.asarray(position, dtype=float)
    for attempt in range(attempts):
        if attempt == 0:
            candidate = as_vector(start)
        else:
            direction = np.asarray(rng.next_unit_vector())
            candidate = as_vector(start + direction * radius * math.sqrt(attempt) * 2)
        if local.contains_sphere(candidate, radius) and not overlaps(candidate, radius, occupied):
            return candidate
    raise PlacementExhausted(radius, attempts)
