# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Seeded random source.

Wraps numpy.random.Generator(PCG64) so that two sources built from the
same seed produce the same sequence for the same calls. Node material
is re-derived from a stored seed through this class, so the call order
inside every derivation function is part of the stored format.

A process-wide default instance serves "fresh" generation (drawing new
seeds). Every draw takes the instance lock, so the default may be shared
between threads.
"""
import math
import threading
from typing import Sequence

import numpy as np

from cosmogen.domain.constants import GenerationDefaults
from cosmogen.domain.errors import ConstructionError
from cosmogen.domain.vectors import Vector3, as_vector

UINT32_LIMIT = 2**32


def validate_seed(seed: int) -> int:
    """Return seed unchanged if it fits in an unsigned 32-bit integer.

    Raises:
        ConstructionError: If seed is negative or too large.
    """
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise ConstructionError(f"seed must be an integer, got {seed!r}")
    if not 0 <= int(seed) < UINT32_LIMIT:
        raise ConstructionError(f"seed must be in [0, 2**32), got {seed}")
    return int(seed)


class RandomSource:
    """Deterministic pseudo-random generator."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = None if seed is None else validate_seed(seed)
        self._rng = np.random.Generator(np.random.PCG64(self._seed))
        self._lock = threading.Lock()

    @property
    def seed(self) -> int | None:
        return self._seed

    def next_uint(self) -> int:
        """Unsigned 32-bit integer."""
        with self._lock:
            return int(self._rng.integers(0, UINT32_LIMIT, dtype=np.uint64))

    def next_real(self, minimum: float = 0.0, maximum: float = 1.0) -> float:
        """Uniform real in [minimum, maximum)."""
        if maximum < minimum:
            raise ValueError(f"maximum must be >= minimum, got [{minimum}, {maximum}]")
        with self._lock:
            u = float(self._rng.random())
        return minimum + (maximum - minimum) * u

    def next_bool(self, probability: float = 0.5) -> bool:
        """True with the given probability."""
        with self._lock:
            return float(self._rng.random()) < probability

    def next_index(self, n: int) -> int:
        """Integer in [0, n)."""
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        with self._lock:
            return int(self._rng.integers(0, n))

    def next_weighted_index(self, weights: Sequence[float]) -> int:
        """Index into weights, chosen with probability proportional to weight.

        Raises:
            ValueError: If the total weight is not positive and finite.
        """
        total = float(np.sum(weights))
        if not (total > 0.0 and math.isfinite(total)):
            raise ValueError(f"total weight must be positive and finite, got {total}")
        target = self.next_real(0.0, total)
        cumulative = 0.0
        for index, weight in enumerate(weights):
            cumulative += weight
            if target < cumulative:
                return index
        # float round-off at the upper edge
        return max(i for i, w in enumerate(weights) if w > 0)

    def normal_sample(
        self,
        mean: float,
        stddev: float,
        minimum: float | None = None,
    ) -> float:
        """Normal sample, clamped from below when minimum is given."""
        with self._lock:
            value = float(self._rng.normal(mean, stddev))
        if minimum is not None:
            value = max(minimum, value)
        return value

    def positive_normal_sample(self, mean: float, stddev: float) -> float:
        """Half-normal sample: mean + |N(0, stddev)|."""
        with self._lock:
            return mean + abs(float(self._rng.normal(0.0, stddev)))

    def log_normal_sample(self, mean: float = 0.0, sigma: float = 1.0) -> float:
        with self._lock:
            return float(self._rng.lognormal(mean, sigma))

    def poisson(self, expected: float) -> int:
        """Non-negative integer count with the given expectation.

        Large expectations fall back to a rounded normal approximation,
        since numpy's Poisson sampler rejects lambda above ~1e19.
        """
        if expected < 0 or not math.isfinite(expected):
            raise ValueError(f"expected must be finite and >= 0, got {expected}")
        if expected == 0:
            return 0
        with self._lock:
            if expected > GenerationDefaults.POISSON_NORMAL_THRESHOLD:
                value = float(self._rng.normal(expected, math.sqrt(expected)))
                return max(0, int(round(value)))
            return int(self._rng.poisson(expected))

    def next_unit_vector(self) -> Vector3:
        """Direction uniformly distributed on the unit sphere."""
        with self._lock:
            while True:
                vec = self._rng.uniform(-1.0, 1.0, size=3)
                length_sq = float(np.dot(vec, vec))
                if 1e-6 < length_sq <= 1.0:
                    return as_vector(vec / math.sqrt(length_sq))

    def next_point_in_box(self, half_extents: Vector3) -> Vector3:
        """Uniform point in the axis-aligned box [-h, h] on each axis."""
        with self._lock:
            return as_vector(self._rng.uniform(-1.0, 1.0, size=3) * np.asarray(half_extents))


_default_lock = threading.Lock()
_default: RandomSource | None = None


def default_random() -> RandomSource:
    """Process-wide source for fresh generation."""
    global _default
    with _default_lock:
        if _default is None:
            _default = RandomSource()
        return _default
