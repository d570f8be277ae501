# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for focus pose resolution and camera constraints."""
import math

import pytest

from horizon.domain.camera import (
    DEFAULT_CAMERA_POSES,
    GALAXY_FRAMING,
    MAX_CAMERA_DISTANCE,
    MIN_CAMERA_DISTANCE,
    CameraPose,
    constrain_camera,
    planet_surface_pose,
    resolve_focus_pose,
    resolve_framed_pose,
)
from horizon.domain.vector import vec_isclose, vec_length


class TestResolveFocusPose:

    def test_zero_angle_places_camera_on_z(self):
        pose = resolve_focus_pose((0.0, 0.0, 0.0), 10.0, 0.0)
        assert vec_isclose(pose.position, (0.0, 5.0, 10.0))
        assert pose.look_at == (0.0, 0.0, 0.0)

    def test_ninety_degrees_places_camera_on_x(self):
        pose = resolve_focus_pose((0.0, 0.0, 0.0), 10.0, 90.0)
        assert vec_isclose(pose.position, (10.0, 5.0, 0.0))

    def test_default_angle_is_45(self):
        assert resolve_focus_pose((1.0, 2.0, 3.0), 8.0) == resolve_focus_pose((1.0, 2.0, 3.0), 8.0, 45.0)

    def test_offset_by_target(self):
        target = (25.0, -3.0, 7.0)
        pose = resolve_focus_pose(target, 20.0, 30.0)
        expected = (
            25.0 + 20.0 * math.sin(math.radians(30.0)),
            -3.0 + 10.0,
            7.0 + 20.0 * math.cos(math.radians(30.0)),
        )
        assert vec_isclose(pose.position, expected)
        assert pose.look_at == target

    def test_horizontal_distance_matches(self):
        target = (4.0, 0.0, -6.0)
        pose = resolve_focus_pose(target, 12.0, 73.0)
        dx = pose.position[0] - target[0]
        dz = pose.position[2] - target[2]
        assert math.hypot(dx, dz) == pytest.approx(12.0)

    def test_framed_pose_uses_preset(self):
        target = (25.0, 0.0, 0.0)
        assert resolve_framed_pose(target, GALAXY_FRAMING) == resolve_focus_pose(
            target, GALAXY_FRAMING.distance, GALAXY_FRAMING.angle_deg,
        )


class TestFixedPoses:

    def test_default_universe_pose(self):
        assert DEFAULT_CAMERA_POSES["universe"] == CameraPose((0.0, 50.0, 100.0), (0.0, 0.0, 0.0))

    def test_default_poses_cover_levels(self):
        assert set(DEFAULT_CAMERA_POSES) == {"universe", "galaxy", "solar_system"}

    def test_planet_surface_pose(self):
        pose = planet_surface_pose()
        assert pose.position == (12.0, 0.0, 24.0)
        assert pose.look_at == (34.0, 0.0, 0.0)


class TestConstrainCamera:

    def test_inside_range_unchanged(self):
        assert constrain_camera((0.0, 30.0, 40.0)) == (0.0, 30.0, 40.0)

    def test_too_close_pushed_out(self):
        assert vec_length(constrain_camera((0.0, 0.0, 1.0))) == pytest.approx(MIN_CAMERA_DISTANCE)

    def test_too_far_pulled_in(self):
        result = constrain_camera((0.0, 300.0, 400.0))
        assert vec_length(result) == pytest.approx(MAX_CAMERA_DISTANCE)
        assert result[1] / result[2] == pytest.approx(0.75)

    def test_origin(self):
        assert constrain_camera((0.0, 0.0, 0.0)) == (0.0, 0.0, MIN_CAMERA_DISTANCE)
