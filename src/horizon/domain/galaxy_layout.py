# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Symmetric galaxy placement.

Deterministic, non-overlapping positions for the top-level entities of
the universe, chosen from a small pattern library keyed by entity count:

- 1: centered at the origin
- 2: mirrored on the x axis
- 3: equilateral triangle
- 4: diamond (square rotated 45 deg)
- 5+: ring

Every pattern keeps the minimum pairwise distance at or above the
requested spacing. Also holds the ring placement used inside a galaxy
for solar systems and free-floating stars.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

from horizon.domain.scale import GALAXY_SCALE, GALAXY_VIEW_SCALE, GalaxyViewScale
from horizon.domain.seeded_random import create_seeded_random, derive_seed
from horizon.domain.vector import ORIGIN, Vec3, vec_length

logger = logging.getLogger(__name__)

# Suggested headroom over the galaxy diameter when spacing fails validation
_RECOMMENDED_HEADROOM = 6.0


@dataclass(frozen=True)
class GalaxyLayout:
    """Positions keyed by entity id plus the farthest distance from origin."""
    positions: dict[str, Vec3] = field(default_factory=dict)
    bounding_radius: float = 0.0


def _ring_radius(count: int, spacing: float) -> float:
    """Radius whose adjacent chord equals spacing."""
    return spacing / (2.0 * math.sin(math.pi / count))


def _pattern(count: int, spacing: float) -> list[Vec3]:
    if count == 1:
        return [ORIGIN]

    if count == 2:
        offset = spacing / 2.0
        return [(-offset, 0.0, 0.0), (offset, 0.0, 0.0)]

    if count == 3:
        height = math.sqrt(3.0) / 2.0 * spacing
        centroid = height / 3.0
        return [
            (0.0, 0.0, -(height - centroid)),
            (-spacing / 2.0, 0.0, centroid),
            (spacing / 2.0, 0.0, centroid),
        ]

    if count == 4:
        d = spacing / math.sqrt(2.0)
        return [
            (0.0, 0.0, -d),     # north
            (-d, 0.0, 0.0),     # west
            (d, 0.0, 0.0),      # east
            (0.0, 0.0, d),      # south
        ]

    radius = _ring_radius(count, spacing)
    return [
        (
            math.cos(index / count * 2.0 * math.pi) * radius,
            0.0,
            math.sin(index / count * 2.0 * math.pi) * radius,
        )
        for index in range(count)
    ]


def calculate_galaxy_layout(
    galaxy_ids: Sequence[str],
    spacing: float = GALAXY_SCALE.LAYOUT_SPACING,
) -> GalaxyLayout:
    """
    Place galaxies symmetrically around the origin.

    Duplicate ids keep their first position; later duplicates are dropped
    with a warning.

    Args:
        galaxy_ids: Entity ids in display order.
        spacing: Minimum distance between any two centers.

    Returns:
        GalaxyLayout with id -> position and bounding radius.
    """
    if spacing <= 0:
        raise ValueError(f"Layout spacing must be positive, got {spacing}")

    unique_ids: list[str] = []
    for galaxy_id in galaxy_ids:
        if galaxy_id in unique_ids:
            logger.warning("Duplicate galaxy id %r ignored in layout", galaxy_id)
            continue
        unique_ids.append(galaxy_id)

    if not unique_ids:
        return GalaxyLayout()

    points = _pattern(len(unique_ids), spacing)
    positions = dict(zip(unique_ids, points))
    bounding = max(vec_length(p) for p in points)
    return GalaxyLayout(positions=positions, bounding_radius=bounding)


def layout(galaxy_ids: Sequence[str], spacing: float = GALAXY_SCALE.LAYOUT_SPACING) -> dict[str, Vec3]:
    """Id -> position mapping of calculate_galaxy_layout."""
    return calculate_galaxy_layout(galaxy_ids, spacing).positions


def validate_spacing(
    spacing: float,
    max_diameter: float = GALAXY_SCALE.max_diameter,
    safety_margin: float = 0.0,
) -> bool:
    """
    Check that spacing clears the largest galaxy diameter.

    Diagnostic only: failure is logged, never raised.
    """
    ok = spacing > max_diameter + safety_margin
    if not ok:
        logger.warning(
            "Layout spacing (%s) is too small for max galaxy diameter (%s). "
            "Increase spacing to at least %d",
            spacing, max_diameter,
            math.ceil(max_diameter + max(safety_margin, _RECOMMENDED_HEADROOM)),
        )
    return ok


def validate_ring_spacing(
    count: int,
    spacing: float,
    max_diameter: float = GALAXY_SCALE.max_diameter,
) -> bool:
    """True when adjacent galaxies on a ring layout do not overlap."""
    if count < 5:
        return True
    chord = 2.0 * _ring_radius(count, spacing) * math.sin(math.pi / count)
    return chord > max_diameter


def recommended_camera_distance(
    bounding_radius: float,
    galaxy_max_radius: float = GALAXY_SCALE.MAX_RADIUS,
    fov_deg: float = 75.0,
    margin: float = 1.3,
) -> float:
    """Camera distance from origin that frames the whole layout."""
    total_radius = bounding_radius + galaxy_max_radius
    min_distance = total_radius / math.tan(math.radians(fov_deg) / 2.0)
    return min_distance * margin


def ring_positions(count: int, radius: float, phase: float = 0.0) -> list[Vec3]:
    """Evenly spaced points on a horizontal ring."""
    positions: list[Vec3] = []
    for index in range(count):
        angle = index / count * 2.0 * math.pi + phase
        positions.append((math.cos(angle) * radius, 0.0, math.sin(angle) * radius))
    return positions


def solar_system_ring_positions(
    count: int,
    scale: GalaxyViewScale = GALAXY_VIEW_SCALE,
) -> list[Vec3]:
    """Positions of a galaxy's solar systems on the inner ring."""
    return ring_positions(count, scale.SOLAR_SYSTEM_RING_RADIUS)


def star_ring_positions(
    galaxy_id: str,
    count: int,
    scale: GalaxyViewScale = GALAXY_VIEW_SCALE,
) -> list[Vec3]:
    """
    Positions of a galaxy's free-floating stars on the outer ring.

    Offset by STAR_RING_PHASE from the solar-system ring, with a
    deterministic vertical jitter per star.
    """
    positions: list[Vec3] = []
    for index, (x, _, z) in enumerate(
        ring_positions(count, scale.STAR_RING_RADIUS, scale.STAR_RING_PHASE)
    ):
        rand = create_seeded_random(derive_seed(galaxy_id, index + scale.STAR_SEED_OFFSET))
        y = (rand() - 0.5) * scale.STAR_Y_VARIANCE
        positions.append((x, y, z))
    return positions
