# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbital mechanics functions.

Pure mathematical conversions for two-body orbital elements around an
arbitrary central mass. The gravitational parameter is always passed in.
"""
import math

import numpy as np

from cosmogen.domain.constants import CosmicConstants


def standard_gravitational_parameter(orbited_mass: float, mass: float = 0.0) -> float:
    """μ = G(M + m) in m³/s²."""
    return CosmicConstants.G * (orbited_mass + mass)


def kepler_to_cartesian(
    a: float,
    e: float,
    i_rad: float,
    omega_big_rad: float,
    omega_small_rad: float,
    nu_rad: float,
    mu: float,
) -> tuple[list[float], list[float]]:
    """
    Convert Keplerian orbital elements to Cartesian position/velocity.

    Args:
        a: Semi-major axis (m)
        e: Eccentricity (0 for circular)
        i_rad: Inclination (radians)
        omega_big_rad: Longitude of ascending node (radians)
        omega_small_rad: Argument of periapsis (radians)
        nu_rad: True anomaly (radians)
        mu: Standard gravitational parameter (m³/s²)

    Returns:
        (position [x,y,z] in m, velocity [vx,vy,vz] in m/s), relative to
        the barycenter.
    """
    cos_nu = float(np.cos(nu_rad))
    sin_nu = float(np.sin(nu_rad))

    r = a * (1 - e**2) / (1 + e * cos_nu)

    p_factor = float(np.sqrt(mu / (a * (1 - e**2))))
    pos_pqw = np.array([r * cos_nu, r * sin_nu, 0.0])
    vel_pqw = np.array([
        -p_factor * sin_nu,
        p_factor * (e + cos_nu),
        0.0,
    ])

    cO = float(np.cos(omega_big_rad))
    sO = float(np.sin(omega_big_rad))
    co = float(np.cos(omega_small_rad))
    so = float(np.sin(omega_small_rad))
    ci = float(np.cos(i_rad))
    si = float(np.sin(i_rad))

    rotation = np.array([
        [cO * co - sO * so * ci, -cO * so - sO * co * ci, sO * si],
        [sO * co + cO * so * ci, -sO * so + cO * co * ci, -cO * si],
        [so * si, co * si, ci],
    ])

    pos = rotation @ pos_pqw
    vel = rotation @ vel_pqw

    return [float(v) for v in pos], [float(v) for v in vel]


def true_to_mean_anomaly(nu_rad: float, e: float) -> float:
    """
    Mean anomaly for a true anomaly on an elliptical orbit.

    E = 2·atan(√((1-e)/(1+e))·tan(ν/2)),  M = E - e·sin E

    Returns:
        Mean anomaly in [0, 2π).
    """
    half = nu_rad / 2.0
    ecc_anomaly = 2.0 * math.atan2(
        math.sqrt(1 - e) * math.sin(half),
        math.sqrt(1 + e) * math.cos(half),
    )
    return (ecc_anomaly - e * math.sin(ecc_anomaly)) % (2 * math.pi)


def mean_to_true_anomaly(mean_rad: float, e: float, tolerance: float = 1e-12) -> float:
    """
    True anomaly for a mean anomaly, solving Kepler's equation by Newton
    iteration (M = E - e·sin E).

    Returns:
        True anomaly in [0, 2π).
    """
    m = mean_rad % (2 * math.pi)
    ecc_anomaly = m if e < 0.8 else math.pi
    for _ in range(50):
        delta = (ecc_anomaly - e * math.sin(ecc_anomaly) - m) / (1 - e * math.cos(ecc_anomaly))
        ecc_anomaly -= delta
        if abs(delta) < tolerance:
            break
    half = ecc_anomaly / 2.0
    nu = 2.0 * math.atan2(
        math.sqrt(1 + e) * math.sin(half),
        math.sqrt(1 - e) * math.cos(half),
    )
    return nu % (2 * math.pi)


def hill_sphere_radius(a: float, e: float, mass: float, orbited_mass: float) -> float:
    """
    Hill sphere radius at periapsis: a(1-e)·∛(m / 3M).
    """
    return a * (1 - e) * (mass / (3 * orbited_mass)) ** (1.0 / 3.0)


def escape_velocity(mass: float, radius: float) -> float:
    """√(2GM/R) in m/s."""
    return float(np.sqrt(2 * CosmicConstants.G * mass / radius))
