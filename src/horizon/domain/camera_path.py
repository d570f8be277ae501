# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Curved camera paths for long transitions.

Centripetal Catmull-Rom spline through start, an elevated midpoint and
end, so a long flight arcs over intervening geometry instead of cutting
straight through it. Parameterised by control-point index (not arc
length); the curve passes exactly through its end points at t=0 and t=1.

Uses numpy for the per-axis cubic evaluation.
"""
import math

import numpy as np

from horizon.domain.vector import Vec3

DEFAULT_CURVE_HEIGHT: float = 10.0

# alpha = 0.5 (centripetal) applied to squared distances
_CENTRIPETAL_POW = 0.25
_MIN_KNOT_INTERVAL = 1e-4


def _segment_coefficients(
    p0: np.ndarray, p1: np.ndarray, p2: np.ndarray, p3: np.ndarray,
) -> np.ndarray:
    """Cubic coefficients (4 x 3) of the segment p1 -> p2."""
    dt0 = float(np.sum((p1 - p0) ** 2)) ** _CENTRIPETAL_POW
    dt1 = float(np.sum((p2 - p1) ** 2)) ** _CENTRIPETAL_POW
    dt2 = float(np.sum((p3 - p2) ** 2)) ** _CENTRIPETAL_POW

    if dt1 < _MIN_KNOT_INTERVAL:
        dt1 = 1.0
    if dt0 < _MIN_KNOT_INTERVAL:
        dt0 = dt1
    if dt2 < _MIN_KNOT_INTERVAL:
        dt2 = dt1

    t1 = (p1 - p0) / dt0 - (p2 - p0) / (dt0 + dt1) + (p2 - p1) / dt1
    t2 = (p2 - p1) / dt1 - (p3 - p1) / (dt1 + dt2) + (p3 - p2) / dt2
    t1 = t1 * dt1
    t2 = t2 * dt1

    c0 = p1
    c1 = t1
    c2 = -3.0 * p1 + 3.0 * p2 - 2.0 * t1 - t2
    c3 = 2.0 * p1 - 2.0 * p2 + t1 + t2
    return np.stack([c0, c1, c2, c3])


class CameraPath:
    """Three-point spline from start to end via an elevated midpoint."""

    def __init__(self, start: Vec3, end: Vec3, curve_height: float = DEFAULT_CURVE_HEIGHT) -> None:
        self.start = start
        self.end = end
        self.midpoint: Vec3 = (
            (start[0] + end[0]) / 2.0,
            max(start[1], end[1]) + curve_height,
            (start[2] + end[2]) / 2.0,
        )
        pts = np.array([start, self.midpoint, end], dtype=np.float64)
        # Phantom end points extrapolate the first and last chords
        head = 2.0 * pts[0] - pts[1]
        tail = 2.0 * pts[2] - pts[1]
        self._segments = (
            _segment_coefficients(head, pts[0], pts[1], pts[2]),
            _segment_coefficients(pts[0], pts[1], pts[2], tail),
        )

    @property
    def points(self) -> tuple[Vec3, Vec3, Vec3]:
        return (self.start, self.midpoint, self.end)

    def point_at(self, t: float) -> Vec3:
        """Point on the path for t in [0, 1] (clamped)."""
        t = min(1.0, max(0.0, t))
        p = 2.0 * t
        segment = min(int(math.floor(p)), 1)
        weight = p - segment
        coeffs = self._segments[segment]
        powers = np.array([1.0, weight, weight * weight, weight * weight * weight])
        point = powers @ coeffs
        return (float(point[0]), float(point[1]), float(point[2]))
