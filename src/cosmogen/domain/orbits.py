# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbit descriptors.

OrbitalParameters is what a caller (or a parent's orbit rule) asks for;
Orbit is the full element set derived from it once the orbiting body's
position and mass are known. Orbits are descriptive: ``state_at`` is an
analytic two-body evaluation, not an integration.
"""
import math
from dataclasses import dataclass

import numpy as np

from cosmogen.domain.errors import ConstructionError
from cosmogen.domain.orbital_mechanics import (
    hill_sphere_radius,
    kepler_to_cartesian,
    mean_to_true_anomaly,
    standard_gravitational_parameter,
    true_to_mean_anomaly,
)
from cosmogen.domain.randomness import RandomSource
from cosmogen.domain.vectors import ORIGIN, Vector3, as_vector

_TWO_PI = 2 * math.pi
_EPSILON = 1e-12


def _validate_eccentricity(e: float) -> None:
    if not 0.0 <= e < 1.0:
        raise ConstructionError(f"eccentricity must be in [0, 1), got {e}")


@dataclass(frozen=True)
class OrbitalParameters:
    """Requested orbit around a reference body.

    With only an eccentricity the orbit passes through the orbiting body's
    current position. With a periapsis the full element set fixes the
    position instead.
    """
    orbited_mass: float
    orbited_position: Vector3 = ORIGIN
    eccentricity: float = 0.0
    orbited_id: str | None = None
    periapsis: float | None = None
    inclination: float | None = None
    angle_ascending: float | None = None
    arg_periapsis: float | None = None
    true_anomaly: float | None = None
    circular: bool = False

    def __post_init__(self):
        if not self.orbited_mass > 0 or math.isinf(self.orbited_mass):
            raise ConstructionError(
                f"orbited_mass must be positive and finite, got {self.orbited_mass}"
            )
        _validate_eccentricity(self.eccentricity)
        if self.circular and self.eccentricity != 0.0:
            raise ConstructionError(
                f"circular orbit must have zero eccentricity, got {self.eccentricity}"
            )
        if self.periapsis is not None and not self.periapsis > 0:
            raise ConstructionError(f"periapsis must be positive, got {self.periapsis}")
        object.__setattr__(self, "orbited_position", as_vector(self.orbited_position))

    @classmethod
    def circular_orbit(
        cls,
        orbited_mass: float,
        orbited_position: Vector3 = ORIGIN,
        orbited_id: str | None = None,
    ) -> "OrbitalParameters":
        return cls(orbited_mass, orbited_position, 0.0, orbited_id, circular=True)

    @classmethod
    def from_eccentricity(
        cls,
        orbited_mass: float,
        orbited_position: Vector3,
        eccentricity: float,
        orbited_id: str | None = None,
    ) -> "OrbitalParameters":
        return cls(orbited_mass, orbited_position, eccentricity, orbited_id)

    @property
    def has_elements(self) -> bool:
        return self.periapsis is not None


@dataclass(frozen=True)
class Orbit:
    """Full Keplerian element set of a body relative to its orbited body."""
    orbited_id: str | None
    orbited_mass: float
    orbited_position: Vector3
    barycenter: Vector3
    eccentricity: float
    inclination: float
    longitude_ascending: float
    argument_periapsis: float
    true_anomaly: float
    periapsis: float
    apoapsis: float
    semi_major_axis: float
    radius: float
    standard_gravitational_parameter: float
    mean_motion: float
    period: float
    epoch: float                      # s since periapsis passage
    r0: Vector3                       # relative position at epoch
    v0: Vector3                       # relative velocity at epoch

    def state_at(self, seconds: float) -> tuple[Vector3, Vector3]:
        """Position (parent frame) and velocity ``seconds`` after creation."""
        mean = self.mean_motion * (self.epoch + seconds)
        nu = mean_to_true_anomaly(mean, self.eccentricity)
        pos, vel = kepler_to_cartesian(
            self.semi_major_axis,
            self.eccentricity,
            self.inclination,
            self.longitude_ascending,
            self.argument_periapsis,
            nu,
            self.standard_gravitational_parameter,
        )
        return as_vector(np.add(self.orbited_position, pos)), as_vector(vel)

    def hill_sphere_radius(self, mass: float) -> float:
        return hill_sphere_radius(
            self.semi_major_axis, self.eccentricity, mass, self.orbited_mass
        )


def _orientation(r_hat: np.ndarray, h_hat: np.ndarray, nu: float) -> tuple[float, float, float]:
    """Inclination, ascending node and argument of periapsis from directions."""
    inclination = math.acos(max(-1.0, min(1.0, float(h_hat[2]))))
    node = np.array([-h_hat[1], h_hat[0], 0.0])
    node_len = float(np.linalg.norm(node))
    if node_len < _EPSILON:
        node_hat = np.array([1.0, 0.0, 0.0])
        ascending = 0.0
    else:
        node_hat = node / node_len
        ascending = math.atan2(float(node_hat[1]), float(node_hat[0])) % _TWO_PI
    latitude = math.atan2(
        float(np.dot(r_hat, np.cross(h_hat, node_hat))),
        float(np.dot(r_hat, node_hat)),
    )
    return inclination, ascending, (latitude - nu) % _TWO_PI


def _from_position(
    rel: np.ndarray,
    mu: float,
    e: float,
    nu: float,
) -> tuple[float, float, float, float, np.ndarray]:
    """Elements and velocity for an orbit passing through ``rel`` at ``nu``."""
    radius = float(np.linalg.norm(rel))
    r_hat = rel / radius
    tangent = np.cross([0.0, 0.0, 1.0], r_hat)
    if float(np.linalg.norm(tangent)) < _EPSILON:
        tangent = np.cross([1.0, 0.0, 0.0], r_hat)
    t_hat = tangent / float(np.linalg.norm(tangent))
    h_hat = np.cross(r_hat, t_hat)

    p = radius * (1 + e * math.cos(nu))
    speed = math.sqrt(mu / p)
    velocity = speed * (e * math.sin(nu) * r_hat + (1 + e * math.cos(nu)) * t_hat)

    inclination, ascending, arg_periapsis = _orientation(r_hat, h_hat, nu)
    return p / (1 - e**2), inclination, ascending, arg_periapsis, velocity


def derive_orbit(
    position: Vector3,
    mass: float,
    parameters: OrbitalParameters,
    rng: RandomSource,
) -> tuple[Orbit, Vector3, Vector3]:
    """
    Derive a full orbit for a body from requested parameters.

    Args:
        position: Body position in the parent frame.
        mass: Body mass (kg).
        parameters: Requested orbit; positions share the parent frame.
        rng: Source for the true anomaly when it is not given.

    Returns:
        (orbit, position, velocity). Position equals the input unless the
        parameters carry a full element set.

    Raises:
        ConstructionError: If the body sits on the orbited position.
    """
    e = parameters.eccentricity
    mu = standard_gravitational_parameter(parameters.orbited_mass, mass)
    center = np.asarray(parameters.orbited_position)
    nu = parameters.true_anomaly
    if nu is None:
        nu = rng.next_real(0.0, _TWO_PI)

    if parameters.has_elements:
        a = parameters.periapsis / (1 - e)
        inclination = parameters.inclination or 0.0
        ascending = parameters.angle_ascending or 0.0
        arg_periapsis = parameters.arg_periapsis or 0.0
        rel_list, vel_list = kepler_to_cartesian(
            a, e, inclination, ascending, arg_periapsis, nu, mu
        )
        rel = np.asarray(rel_list)
        velocity = np.asarray(vel_list)
    else:
        rel = np.asarray(position) - center
        if float(np.linalg.norm(rel)) == 0.0:
            raise ConstructionError(
                "cannot derive an orbit at zero distance from the orbited body"
            )
        a, inclination, ascending, arg_periapsis, velocity = _from_position(rel, mu, e, nu)

    radius = float(np.linalg.norm(rel))
    period = _TWO_PI * math.sqrt(a**3 / mu)
    mean_motion = _TWO_PI / period
    epoch = true_to_mean_anomaly(nu, e) / mean_motion
    barycenter = center + rel * (mass / (parameters.orbited_mass + mass))

    orbit = Orbit(
        orbited_id=parameters.orbited_id,
        orbited_mass=parameters.orbited_mass,
        orbited_position=parameters.orbited_position,
        barycenter=as_vector(barycenter),
        eccentricity=e,
        inclination=inclination,
        longitude_ascending=ascending,
        argument_periapsis=arg_periapsis,
        true_anomaly=nu % _TWO_PI,
        periapsis=a * (1 - e),
        apoapsis=a * (1 + e),
        semi_major_axis=a,
        radius=radius,
        standard_gravitational_parameter=mu,
        mean_motion=mean_motion,
        period=period,
        epoch=epoch,
        r0=as_vector(rel),
        v0=as_vector(velocity),
    )
    return orbit, as_vector(center + rel), as_vector(velocity)
