# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Small 3-vector helpers backed by NumPy.

Vectors cross module boundaries as plain float tuples so they stay
hashable inside frozen dataclasses.
"""
import numpy as np

Vector3 = tuple[float, float, float]

ORIGIN: Vector3 = (0.0, 0.0, 0.0)


def as_vector(values) -> Vector3:
    """Coerce any 3-sequence (list, tuple, ndarray) to a float tuple."""
    x, y, z = values
    return (float(x), float(y), float(z))


def vec_add(a: Vector3, b: Vector3) -> Vector3:
    return as_vector(np.add(a, b))


def vec_sub(a: Vector3, b: Vector3) -> Vector3:
    return as_vector(np.subtract(a, b))


def vec_scale(a: Vector3, factor: float) -> Vector3:
    return as_vector(np.multiply(a, factor))


def vec_norm(a: Vector3) -> float:
    return float(np.linalg.norm(a))


def vec_distance(a: Vector3, b: Vector3) -> float:
    return float(np.linalg.norm(np.subtract(a, b)))


def is_origin(a: Vector3) -> bool:
    return a[0] == 0.0 and a[1] == 0.0 and a[2] == 0.0
