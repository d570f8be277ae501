# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Easing functions for camera transitions.

Each maps progress in [0, 1] onto [0, 1], is monotonically
non-decreasing, and fixes f(0)=0 and f(1)=1. The in-out variants are
point-symmetric about (0.5, 0.5). Inputs outside [0, 1] are clamped.
"""
from typing import Callable

EasingFn = Callable[[float], float]


def _clamp01(t: float) -> float:
    return min(1.0, max(0.0, t))


def linear(t: float) -> float:
    return _clamp01(t)


def ease_in_cubic(t: float) -> float:
    t = _clamp01(t)
    return t * t * t


def ease_out_cubic(t: float) -> float:
    t = _clamp01(t)
    return 1.0 - (1.0 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out: slow start, slow finish."""
    t = _clamp01(t)
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


def ease_in_out_quint(t: float) -> float:
    """Quintic ease-in-out: steeper middle than the cubic."""
    t = _clamp01(t)
    if t < 0.5:
        return 16.0 * t * t * t * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 5 / 2.0


EASINGS: dict[str, EasingFn] = {
    "linear": linear,
    "in-cubic": ease_in_cubic,
    "out-cubic": ease_out_cubic,
    "in-out-cubic": ease_in_out_cubic,
    "in-out-quint": ease_in_out_quint,
}
