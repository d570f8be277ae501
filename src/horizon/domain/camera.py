# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Camera poses and focus viewpoints.

Resolves an entity position into the pose the camera should settle in
when that entity is focused. Pure functions, no camera state.
"""
import math
from dataclasses import dataclass

from horizon.domain.vector import ORIGIN, Vec3, vec3, vec_add, vec_length, vec_scale


@dataclass(frozen=True)
class CameraPose:
    """Where the camera sits and what it looks at."""
    position: Vec3
    look_at: Vec3


@dataclass(frozen=True)
class FocusFraming:
    """Distance and azimuth (deg) used to frame a focused entity."""
    distance: float
    angle_deg: float


DEFAULT_CAMERA_POSES: dict[str, CameraPose] = {
    "universe": CameraPose(position=(0.0, 50.0, 100.0), look_at=ORIGIN),
    "galaxy": CameraPose(position=(0.0, 20.0, 40.0), look_at=ORIGIN),
    "solar_system": CameraPose(position=(0.0, 10.0, 25.0), look_at=ORIGIN),
}

GALAXY_FRAMING = FocusFraming(distance=35.0, angle_deg=40.0)
SOLAR_SYSTEM_FRAMING = FocusFraming(distance=15.0, angle_deg=20.0)
MOON_FRAMING = FocusFraming(distance=4.0, angle_deg=30.0)

# Planet surface view: the planet is drawn at a fixed world position and
# framed off-center to leave room for content beside it.
PLANET_SURFACE_POSITION: Vec3 = (10.0, 0.0, 0.0)
PLANET_CAMERA_OFFSET: Vec3 = (2.0, 0.0, 24.0)
PLANET_LOOK_AT_OFFSET: Vec3 = (24.0, 0.0, 0.0)

MIN_CAMERA_DISTANCE: float = 5.0
MAX_CAMERA_DISTANCE: float = 200.0


def resolve_focus_pose(
    target: Vec3,
    distance: float,
    angle_deg: float = 45.0,
) -> CameraPose:
    """
    Camera pose that frames target from distance at azimuth angle_deg.

    The camera sits distance*sin(angle) along x and distance*cos(angle)
    along z from the target, raised by half the distance, and looks at
    the target.

    Args:
        target: Position of the focused entity.
        distance: Horizontal framing distance.
        angle_deg: Azimuth around the target in the XZ plane (degrees).

    Returns:
        CameraPose with look_at equal to target.
    """
    angle = math.radians(angle_deg)
    position = (
        target[0] + distance * math.sin(angle),
        target[1] + distance * 0.5,
        target[2] + distance * math.cos(angle),
    )
    return CameraPose(position=position, look_at=vec3(*target))


def resolve_framed_pose(target: Vec3, framing: FocusFraming) -> CameraPose:
    """resolve_focus_pose with a FocusFraming preset."""
    return resolve_focus_pose(target, framing.distance, framing.angle_deg)


def planet_surface_pose(planet_position: Vec3 = PLANET_SURFACE_POSITION) -> CameraPose:
    """Fixed framing for the planet surface view."""
    return CameraPose(
        position=vec_add(planet_position, PLANET_CAMERA_OFFSET),
        look_at=vec_add(planet_position, PLANET_LOOK_AT_OFFSET),
    )


def constrain_camera(
    position: Vec3,
    min_distance: float = MIN_CAMERA_DISTANCE,
    max_distance: float = MAX_CAMERA_DISTANCE,
) -> Vec3:
    """Clamp the camera's distance from the origin to [min, max]."""
    distance = vec_length(position)
    if distance == 0.0:
        return (0.0, 0.0, min_distance)
    if distance < min_distance:
        return vec_scale(position, min_distance / distance)
    if distance > max_distance:
        return vec_scale(position, max_distance / distance)
    return position
