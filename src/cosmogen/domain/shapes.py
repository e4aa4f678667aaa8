# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Geometric shapes for physical bodies and regions.

Closed set: Sphere, Ellipsoid, Torus, HollowSphere. Each is an immutable
value with a position (in the owning node's parent frame), its defining
radii and a derived volume. Containment queries take points in the same
frame as ``position``.
"""
import math
from dataclasses import dataclass, replace

import numpy as np

from cosmogen.domain.errors import ConstructionError
from cosmogen.domain.vectors import ORIGIN, Vector3, as_vector


def _require_positive(name: str, value: float) -> None:
    if not value > 0 or math.isnan(value):
        raise ConstructionError(f"{name} must be positive, got {value}")


def _offset(point: Vector3, position: Vector3) -> np.ndarray:
    return np.subtract(point, position)


@dataclass(frozen=True)
class Sphere:
    """Solid sphere."""
    radius: float
    position: Vector3 = ORIGIN

    def __post_init__(self):
        _require_positive("sphere radius", self.radius)
        object.__setattr__(self, "position", as_vector(self.position))

    @property
    def volume(self) -> float:
        return 4.0 / 3.0 * math.pi * self.radius**3

    @property
    def containing_radius(self) -> float:
        return self.radius

    @property
    def half_extents(self) -> Vector3:
        return (self.radius, self.radius, self.radius)

    def contains_point(self, point: Vector3) -> bool:
        return float(np.linalg.norm(_offset(point, self.position))) <= self.radius

    def contains_sphere(self, center: Vector3, radius: float) -> bool:
        distance = float(np.linalg.norm(_offset(center, self.position)))
        return distance + radius <= self.radius

    def at_position(self, position: Vector3) -> "Sphere":
        return replace(self, position=as_vector(position))


@dataclass(frozen=True)
class Ellipsoid:
    """Solid triaxial ellipsoid, semi-axes aligned with x, y, z."""
    axis_x: float
    axis_y: float
    axis_z: float
    position: Vector3 = ORIGIN

    def __post_init__(self):
        _require_positive("ellipsoid axis_x", self.axis_x)
        _require_positive("ellipsoid axis_y", self.axis_y)
        _require_positive("ellipsoid axis_z", self.axis_z)
        object.__setattr__(self, "position", as_vector(self.position))

    @property
    def axes(self) -> Vector3:
        return (self.axis_x, self.axis_y, self.axis_z)

    @property
    def volume(self) -> float:
        return 4.0 / 3.0 * math.pi * self.axis_x * self.axis_y * self.axis_z

    @property
    def containing_radius(self) -> float:
        return max(self.axes)

    @property
    def half_extents(self) -> Vector3:
        return self.axes

    def _scaled_norm(self, point: Vector3) -> float:
        return float(np.linalg.norm(_offset(point, self.position) / np.asarray(self.axes)))

    def contains_point(self, point: Vector3) -> bool:
        return self._scaled_norm(point) <= 1.0

    def contains_sphere(self, center: Vector3, radius: float) -> bool:
        """Conservative: ||D(c+d)|| <= ||Dc|| + r / min(axes) for |d| <= r."""
        return self._scaled_norm(center) + radius / min(self.axes) <= 1.0

    def at_position(self, position: Vector3) -> "Ellipsoid":
        return replace(self, position=as_vector(position))


@dataclass(frozen=True)
class Torus:
    """Ring torus lying in the x-y plane."""
    major_radius: float
    minor_radius: float
    position: Vector3 = ORIGIN

    def __post_init__(self):
        _require_positive("torus major_radius", self.major_radius)
        _require_positive("torus minor_radius", self.minor_radius)
        if self.minor_radius > self.major_radius:
            raise ConstructionError(
                f"torus minor_radius must not exceed major_radius, "
                f"got {self.minor_radius} > {self.major_radius}"
            )
        object.__setattr__(self, "position", as_vector(self.position))

    @property
    def volume(self) -> float:
        return 2.0 * math.pi**2 * self.major_radius * self.minor_radius**2

    @property
    def containing_radius(self) -> float:
        return self.major_radius + self.minor_radius

    @property
    def half_extents(self) -> Vector3:
        outer = self.containing_radius
        return (outer, outer, self.minor_radius)

    def _tube_distance(self, point: Vector3) -> float:
        x, y, z = _offset(point, self.position)
        ring = math.hypot(float(x), float(y)) - self.major_radius
        return math.hypot(ring, float(z))

    def contains_point(self, point: Vector3) -> bool:
        return self._tube_distance(point) <= self.minor_radius

    def contains_sphere(self, center: Vector3, radius: float) -> bool:
        return self._tube_distance(center) + radius <= self.minor_radius

    def at_position(self, position: Vector3) -> "Torus":
        return replace(self, position=as_vector(position))


@dataclass(frozen=True)
class HollowSphere:
    """Spherical shell between inner_radius and outer_radius."""
    inner_radius: float
    outer_radius: float
    position: Vector3 = ORIGIN

    def __post_init__(self):
        _require_positive("hollow sphere inner_radius", self.inner_radius)
        _require_positive("hollow sphere outer_radius", self.outer_radius)
        if self.inner_radius >= self.outer_radius:
            raise ConstructionError(
                f"hollow sphere inner_radius must be below outer_radius, "
                f"got {self.inner_radius} >= {self.outer_radius}"
            )
        object.__setattr__(self, "position", as_vector(self.position))

    @property
    def volume(self) -> float:
        return 4.0 / 3.0 * math.pi * (self.outer_radius**3 - self.inner_radius**3)

    @property
    def containing_radius(self) -> float:
        return self.outer_radius

    @property
    def half_extents(self) -> Vector3:
        return (self.outer_radius, self.outer_radius, self.outer_radius)

    def contains_point(self, point: Vector3) -> bool:
        distance = float(np.linalg.norm(_offset(point, self.position)))
        return self.inner_radius <= distance <= self.outer_radius

    def contains_sphere(self, center: Vector3, radius: float) -> bool:
        distance = float(np.linalg.norm(_offset(center, self.position)))
        return distance - radius >= self.inner_radius and distance + radius <= self.outer_radius

    def at_position(self, position: Vector3) -> "HollowSphere":
        return replace(self, position=as_vector(position))


Shape = Sphere | Ellipsoid | Torus | HollowSphere
