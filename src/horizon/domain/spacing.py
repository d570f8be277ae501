# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Collision-avoiding orbital spacing.

Computes a single spacing value for a set of sibling bodies so that
adjacent orbits never overlap, optionally compressed to fit a container
radius. Orbital radius for sibling i is BASE_RADIUS + i * spacing.
"""
import logging
from dataclasses import dataclass
from typing import Sequence, Union

from horizon.domain.scale import ORBITAL_SPACING, OrbitalSpacing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BodySize:
    """Radius of a sibling body at its orbital index (0 = innermost)."""
    index: int
    radius: float


SizeInput = Union[BodySize, float]


def _normalize_sizes(sizes: Sequence[SizeInput]) -> list[BodySize]:
    """Accept BodySize entries or bare radii (indexed by position)."""
    bodies = [
        s if isinstance(s, BodySize) else BodySize(index=i, radius=float(s))
        for i, s in enumerate(sizes)
    ]
    bodies.sort(key=lambda b: b.index)
    for prev, nxt in zip(bodies, bodies[1:]):
        if nxt.index == prev.index:
            raise ValueError(f"Duplicate orbital index {nxt.index} in body sizes")
    for body in bodies:
        if body.radius < 0:
            raise ValueError(f"Body radius must be non-negative, got {body.radius}")
    return bodies


def _required_spacing(inner: BodySize, outer: BodySize, margin: float) -> float:
    min_gap = inner.radius + outer.radius + margin
    return min_gap / (outer.index - inner.index)


def compute_orbital_radius(
    index: int,
    spacing: float,
    config: OrbitalSpacing = ORBITAL_SPACING,
) -> float:
    """Orbital radius of the sibling at index for a given spacing."""
    return config.BASE_RADIUS + index * spacing


def minimum_spacing(
    sizes: Sequence[SizeInput],
    config: OrbitalSpacing = ORBITAL_SPACING,
) -> float:
    """
    Smallest spacing at which no adjacent pair of bodies overlaps.

    Never below RADIUS_INCREMENT.
    """
    bodies = _normalize_sizes(sizes)
    required = config.RADIUS_INCREMENT
    for inner, outer in zip(bodies, bodies[1:]):
        required = max(required, _required_spacing(inner, outer, config.MIN_SEPARATION))
    return required


def safe_spacing(count: int, config: OrbitalSpacing = ORBITAL_SPACING) -> float:
    """Count-only spacing: RADIUS_INCREMENT scaled by sibling density."""
    if count <= 1:
        return config.RADIUS_INCREMENT
    density = max(1.0, count / config.ADAPTIVE_SPACING_THRESHOLD)
    return config.RADIUS_INCREMENT * density


def compute_spacing(
    sizes: Sequence[SizeInput],
    nominal_spacing: float | None = None,
    container_radius: float | None = None,
    config: OrbitalSpacing = ORBITAL_SPACING,
) -> float:
    """
    Effective orbital spacing for a set of sibling bodies.

    Starts from nominal_spacing scaled by sibling density, widens it until
    every adjacent gap is at least r_i + r_{i+1} + MIN_SEPARATION, then, if a
    container radius is given and the outermost body would poke out of it,
    compresses uniformly. Compression never goes below the collision-free
    minimum (nor MIN_COMPRESSED_SPACING); when the container cannot be
    honoured a warning is logged and the minimum is used.

    Args:
        sizes: Body radii in orbital order, or BodySize entries.
        nominal_spacing: Starting spacing (default RADIUS_INCREMENT).
        container_radius: Optional maximum outer extent of the system.
        config: Orbital spacing constants.

    Returns:
        Spacing in scene units.
    """
    if nominal_spacing is None:
        nominal_spacing = config.RADIUS_INCREMENT
    if nominal_spacing <= 0:
        raise ValueError(f"Nominal spacing must be positive, got {nominal_spacing}")

    bodies = _normalize_sizes(sizes)
    if len(bodies) <= 1:
        return nominal_spacing

    density = max(1.0, len(bodies) / config.ADAPTIVE_SPACING_THRESHOLD)
    spacing = nominal_spacing * density

    for inner, outer in zip(bodies, bodies[1:]):
        gap = (outer.index - inner.index) * spacing
        min_gap = inner.radius + outer.radius + config.MIN_SEPARATION
        if gap < min_gap:
            spacing = max(spacing, _required_spacing(inner, outer, config.MIN_SEPARATION))

    if container_radius:
        outermost = bodies[-1]
        extent = compute_orbital_radius(outermost.index, spacing, config) + outermost.radius
        if extent > container_radius and outermost.index > 0:
            max_allowed = container_radius - outermost.radius
            fitted = (max_allowed - config.BASE_RADIUS) / outermost.index
            floor = max(minimum_spacing(bodies, config), config.MIN_COMPRESSED_SPACING)
            if fitted >= floor:
                spacing = fitted
            else:
                logger.warning(
                    "Orbital spacing constraint: %d bodies require %.2f units "
                    "but container radius %.2f allows %.2f. Using safe spacing "
                    "to prevent overlap.",
                    len(bodies), floor, container_radius, fitted,
                )
                spacing = floor

    return spacing


def compute_orbital_radii(
    sizes: Sequence[SizeInput],
    spacing: float,
    config: OrbitalSpacing = ORBITAL_SPACING,
) -> list[float]:
    """Orbital radius of every body for a given spacing, in orbital order."""
    return [
        compute_orbital_radius(body.index, spacing, config)
        for body in _normalize_sizes(sizes)
    ]
