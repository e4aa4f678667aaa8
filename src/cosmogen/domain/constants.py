# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Physical constants and generation tunables.

All values SI. Grouped in frozen dataclass singletons so they can be
imported by name and never mutated at runtime.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class _CosmicConstants:
    """Physical constants (CODATA / IAU nominal values)."""
    G: float = 6.67408e-11                  # m³/(kg·s²)
    SPEED_OF_LIGHT: float = 299_792_458.0   # m/s
    STEFAN_BOLTZMANN: float = 5.670373e-8   # W/(m²·K⁴)
    SOLAR_MASS: float = 1.98847e30          # kg
    SOLAR_LUMINOSITY: float = 3.828e26      # W
    SOLAR_RADIUS: float = 6.957e8           # m
    SOLAR_TEMPERATURE: float = 5778.0       # K, effective
    AU: float = 1.495978707e11              # m
    LIGHT_YEAR: float = 9.4607304725808e15  # m
    JUPITER_RADIUS: float = 69_911_000.0    # m, mean
    JUPITER_MASS: float = 1.8986e27         # kg
    COSMIC_BACKGROUND_TEMPERATURE: float = 2.73  # K
    # Hawking temperature T = coefficient / mass
    HAWKING_COEFFICIENT: float = 6.169e-8 * 1.98847e30


CosmicConstants: _CosmicConstants = _CosmicConstants()


@dataclass(frozen=True)
class _GenerationDefaults:
    """Tunables for placement and population."""
    PLACEMENT_ATTEMPTS: int = 100
    NEAREST_PLACEMENT_ATTEMPTS: int = 1000
    CHILD_LIMIT: int = 10
    # Poisson draws above this expectation use the normal approximation
    POISSON_NORMAL_THRESHOLD: float = 1e9
    SHAPE_SAMPLE_ATTEMPTS: int = 1000


GenerationDefaults: _GenerationDefaults = _GenerationDefaults()
