# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for vector helpers and scale constants."""
import pytest

from horizon.domain.scale import (
    GALAXY_SCALE,
    MOON_ORBITAL_SPACING,
    PLANET_SCALE,
    calculate_moon_size,
    calculate_planet_size,
)
from horizon.domain.vector import (
    vec3,
    vec_add,
    vec_distance,
    vec_isclose,
    vec_length,
    vec_lerp,
    vec_scale,
    vec_sub,
)


class TestVectorHelpers:

    def test_add_sub(self):
        assert vec_add((1.0, 2.0, 3.0), (1.0, 1.0, 1.0)) == (2.0, 3.0, 4.0)
        assert vec_sub((1.0, 2.0, 3.0), (1.0, 1.0, 1.0)) == (0.0, 1.0, 2.0)

    def test_scale_and_length(self):
        assert vec_scale((3.0, 0.0, 4.0), 2.0) == (6.0, 0.0, 8.0)
        assert vec_length((3.0, 0.0, 4.0)) == pytest.approx(5.0)

    def test_distance(self):
        assert vec_distance((1.0, 1.0, 1.0), (4.0, 5.0, 1.0)) == pytest.approx(5.0)

    def test_lerp_endpoints(self):
        a, b = (0.0, 10.0, -4.0), (8.0, 2.0, 4.0)
        assert vec_lerp(a, b, 0.0) == a
        assert vec_lerp(a, b, 1.0) == b
        assert vec_lerp(a, b, 0.5) == (4.0, 6.0, 0.0)

    def test_returns_python_floats(self):
        result = vec_add(vec3(1, 2, 3), (0.5, 0.5, 0.5))
        assert all(type(c) is float for c in result)

    def test_isclose(self):
        assert vec_isclose((1.0, 2.0, 3.0), (1.0 + 1e-12, 2.0, 3.0))
        assert not vec_isclose((1.0, 2.0, 3.0), (1.1, 2.0, 3.0))


class TestScale:

    def test_planet_size_grows_with_moons(self):
        assert calculate_planet_size(0) == PLANET_SCALE.MIN_SIZE
        assert calculate_planet_size(5) == pytest.approx(PLANET_SCALE.MIN_SIZE + 5 * 0.04)

    def test_planet_size_capped(self):
        assert calculate_planet_size(1000) == PLANET_SCALE.MAX_SIZE

    def test_moon_smaller_than_any_planet(self):
        assert calculate_moon_size() < PLANET_SCALE.MIN_SIZE

    def test_galaxy_diameter(self):
        assert GALAXY_SCALE.max_diameter == 44.0
        assert GALAXY_SCALE.LAYOUT_SPACING > GALAXY_SCALE.max_diameter

    def test_moon_orbits_tighter_than_planets(self):
        assert MOON_ORBITAL_SPACING.RADIUS_INCREMENT < 3.0
