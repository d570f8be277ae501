# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""3-vector helpers backed by NumPy.

Positions and offsets travel through the domain as plain
(x, y, z) float tuples; numpy is used only inside these helpers.

External dependency: numpy (allowed in domain layer).
"""
import math

import numpy as np

Vec3 = tuple[float, float, float]

ORIGIN: Vec3 = (0.0, 0.0, 0.0)


def _as_vec3(arr: np.ndarray) -> Vec3:
    return (float(arr[0]), float(arr[1]), float(arr[2]))


def vec3(x: float, y: float, z: float) -> Vec3:
    """Build a Vec3 of Python floats."""
    return (float(x), float(y), float(z))


def vec_add(a: Vec3, b: Vec3) -> Vec3:
    """Component-wise a + b."""
    return _as_vec3(np.asarray(a, dtype=np.float64) + np.asarray(b, dtype=np.float64))


def vec_sub(a: Vec3, b: Vec3) -> Vec3:
    """Component-wise a - b."""
    return _as_vec3(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64))


def vec_scale(a: Vec3, scalar: float) -> Vec3:
    """Multiply every component of a by scalar."""
    return _as_vec3(np.asarray(a, dtype=np.float64) * scalar)


def vec_length(a: Vec3) -> float:
    """Euclidean norm of a."""
    return float(np.linalg.norm(np.asarray(a, dtype=np.float64)))


def vec_distance(a: Vec3, b: Vec3) -> float:
    """Euclidean distance between a and b."""
    return vec_length(vec_sub(a, b))


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation between two scalars."""
    return start + (end - start) * t


def vec_lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    """Per-axis linear interpolation from a (t=0) to b (t=1)."""
    return (lerp(a[0], b[0], t), lerp(a[1], b[1], t), lerp(a[2], b[2], t))


def vec_isclose(a: Vec3, b: Vec3, abs_tol: float = 1e-9) -> bool:
    """True when every component of a and b agree within abs_tol."""
    return all(math.isclose(x, y, rel_tol=0.0, abs_tol=abs_tol) for x, y in zip(a, b))
