# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Density-table sampling.

Turns a parent volume and its child definitions into child counts, and
picks which definition the next child comes from.
"""
from typing import Sequence

from cosmogen.domain.child_definitions import ChildDefinition
from cosmogen.domain.randomness import RandomSource


def expected_counts(definitions: Sequence[ChildDefinition], volume: float) -> list[float]:
    """density × volume for each definition."""
    return [d.density * volume for d in definitions]


def draw_counts(
    definitions: Sequence[ChildDefinition],
    volume: float,
    rng: RandomSource,
) -> list[int]:
    """
    Realized child count per definition.

    Poisson around density × volume; always >= 0.
    """
    return [rng.poisson(expected) for expected in expected_counts(definitions, volume)]


def choose_definition(
    definitions: Sequence[ChildDefinition],
    remaining: Sequence[int],
    rng: RandomSource,
) -> int | None:
    """
    Index of the definition the next child comes from, or None when all
    counts are used up.

    Weight is density, restricted to definitions with children left.
    """
    weights = [d.density if n > 0 else 0.0 for d, n in zip(definitions, remaining)]
    if not any(weights):
        return None
    return rng.next_weighted_index(weights)
