# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Physical material bundle: what a body is made of, how much, what shape."""
import math
from dataclasses import dataclass
from enum import Enum

from cosmogen.domain.errors import ConstructionError
from cosmogen.domain.shapes import Shape


class Substance(Enum):
    """Coarse composition of a body or region."""
    VACUUM = "vacuum"
    INTERGALACTIC_MEDIUM = "intergalactic_medium"
    INTERSTELLAR_MEDIUM = "interstellar_medium"
    IONIZED_GAS = "ionized_gas"
    STELLAR_PLASMA = "stellar_plasma"
    DEGENERATE_MATTER = "degenerate_matter"
    NEUTRONIUM = "neutronium"
    SINGULARITY = "singularity"
    HYDROGEN_HELIUM = "hydrogen_helium"
    ICE_VOLATILES = "ice_volatiles"
    SILICATE_ROCK = "silicate_rock"
    CARBONACEOUS_ROCK = "carbonaceous_rock"
    IRON_NICKEL = "iron_nickel"
    DUST = "dust"


@dataclass(frozen=True)
class PhysicalMaterial:
    """Immutable {substance, mass, shape, temperature} bundle."""
    substance: Substance
    mass: float        # kg, may be infinite for the universe
    shape: Shape
    temperature: float  # K

    def __post_init__(self):
        if not self.mass > 0:
            raise ConstructionError(f"mass must be positive, got {self.mass}")
        if not self.temperature >= 0 or math.isinf(self.temperature):
            raise ConstructionError(
                f"temperature must be finite and >= 0, got {self.temperature}"
            )

    @property
    def density(self) -> float:
        """Mean density (kg/m³)."""
        return self.mass / self.shape.volume
