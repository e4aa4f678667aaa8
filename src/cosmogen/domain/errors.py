# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Error kinds raised during generation.

All derive from ValueError so callers that already guard numeric input
with ``except ValueError`` keep working.
"""


class ConstructionError(ValueError):
    """A structural invariant could not be satisfied during derivation."""


class PlacementExhausted(ConstructionError):
    """Open-space search ran out of attempts without finding a position."""

    def __init__(self, radius: float, attempts: int) -> None:
        super().__init__(
            f"no open space for radius {radius:g} after {attempts} attempts"
        )
        self.radius = radius
        self.attempts = attempts


class OrphanOrbitReference(ValueError):
    """An orbit names a body outside the accessible hierarchy."""

    def __init__(self, orbited_id: str, node_id: str | None = None) -> None:
        where = f" from {node_id}" if node_id else ""
        super().__init__(f"orbited body {orbited_id!r} is not reachable{where}")
        self.orbited_id = orbited_id
        self.node_id = node_id
