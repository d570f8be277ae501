# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for deterministic Keplerian placement.

Covers the fixed-point Kepler solver, element derivation from seeds,
and position evaluation at a time value.
"""
import math

import pytest

from horizon.domain.orbital_mechanics import (
    KEPLER_ITERATIONS,
    OrbitalElements,
    derive_orbital_elements,
    derive_sibling_elements,
    orbital_radius_at,
    orbital_speed,
    position_at,
    solve_eccentric_anomaly,
    true_anomaly_from_eccentric,
)
from horizon.domain.scale import KEPLER_ORBITAL_SPEED_FACTOR, ORBITAL_SPACING
from horizon.domain.seeded_random import create_seeded_random, derive_seed
from horizon.domain.vector import vec_length


def _circular(a=10.0, inclination=0.0, argp=0.0, phase=0.0, speed=0.0):
    return OrbitalElements(
        semi_major_axis=a,
        eccentricity=0.0,
        inclination=inclination,
        argument_of_periapsis=argp,
        phase=phase,
        orbital_speed=speed,
    )


class TestSolveEccentricAnomaly:

    def test_zero_eccentricity_returns_mean_anomaly(self):
        assert solve_eccentric_anomaly(1.234, 0.0) == pytest.approx(1.234)

    def test_fixed_iteration_count(self):
        """Result equals exactly KEPLER_ITERATIONS fixed-point steps from E0 = M."""
        m, e = 0.8, 0.3
        expected = m
        for _ in range(KEPLER_ITERATIONS):
            expected = m + e * math.sin(expected)
        assert solve_eccentric_anomaly(m, e) == expected

    def test_small_eccentricity_residual(self):
        """For e <= 0.05 five iterations leave a negligible residual."""
        m, e = 2.0, 0.05
        ecc = solve_eccentric_anomaly(m, e)
        assert abs(ecc - e * math.sin(ecc) - m) < 1e-6


class TestTrueAnomaly:

    def test_zero_eccentricity_identity(self):
        assert true_anomaly_from_eccentric(0.7, 0.0) == pytest.approx(0.7)

    def test_periapsis(self):
        assert true_anomaly_from_eccentric(0.0, 0.3) == pytest.approx(0.0)

    def test_radius_at_periapsis_and_apoapsis(self):
        a, e = 10.0, 0.2
        assert orbital_radius_at(a, e, 0.0) == pytest.approx(a * (1 - e))
        assert orbital_radius_at(a, e, math.pi) == pytest.approx(a * (1 + e))


class TestOrbitalSpeed:

    def test_inverse_square(self):
        assert orbital_speed(2.0) == pytest.approx(KEPLER_ORBITAL_SPEED_FACTOR / 4.0)

    def test_inner_faster_than_outer(self):
        assert orbital_speed(4.0) > orbital_speed(7.0)

    def test_multiplier(self):
        assert orbital_speed(4.0, multiplier=3.0) == pytest.approx(3.0 * orbital_speed(4.0))

    def test_nonpositive_axis_raises(self):
        with pytest.raises(ValueError):
            orbital_speed(0.0)


class TestPositionAt:

    def test_circular_equatorial_at_phase_zero(self):
        x, y, z = position_at(_circular(a=10.0), 0.0)
        assert x == pytest.approx(10.0)
        assert y == pytest.approx(0.0)
        assert z == pytest.approx(0.0)

    def test_circular_quarter_turn(self):
        x, y, z = position_at(_circular(a=10.0, phase=math.pi / 2), 0.0)
        assert x == pytest.approx(0.0, abs=1e-9)
        assert z == pytest.approx(10.0)

    def test_inclination_lifts_out_of_plane(self):
        i = 0.3
        x, y, z = position_at(_circular(a=10.0, inclination=i, phase=math.pi / 2), 0.0)
        assert y == pytest.approx(10.0 * math.sin(i))
        assert z == pytest.approx(10.0 * math.cos(i))

    @pytest.mark.parametrize("inclination", [0.0, 0.1, -0.07])
    def test_circular_orbit_constant_radius(self, inclination):
        elements = _circular(a=7.5, inclination=inclination, argp=0.9, phase=0.3, speed=0.02)
        for t in range(0, 1000, 37):
            assert vec_length(position_at(elements, float(t))) == pytest.approx(7.5)

    def test_time_advances_along_orbit(self):
        elements = _circular(a=5.0, speed=0.1)
        assert position_at(elements, 0.0) != position_at(elements, 3.0)

    def test_deterministic(self):
        elements = derive_orbital_elements("sol", 2, 10.0)
        assert position_at(elements, 12.5) == position_at(elements, 12.5)

    def test_distance_bounded_by_apsides(self):
        elements = OrbitalElements(10.0, 0.2, 0.1, 0.4, 1.0, 0.05)
        for t in range(0, 200, 7):
            r = vec_length(position_at(elements, float(t)))
            assert 10.0 * 0.8 - 1e-6 <= r <= 10.0 * 1.2 + 1e-6

    @pytest.mark.parametrize("e", [-0.1, 1.0, 1.5])
    def test_invalid_eccentricity_raises(self, e):
        elements = OrbitalElements(10.0, e, 0.0, 0.0, 0.0, 0.0)
        with pytest.raises(ValueError):
            position_at(elements, 0.0)

    def test_nonpositive_axis_raises(self):
        elements = OrbitalElements(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
        with pytest.raises(ValueError):
            position_at(elements, 0.0)


class TestDeriveOrbitalElements:

    def test_same_inputs_same_elements(self):
        assert derive_orbital_elements("sol", 1, 7.0) == derive_orbital_elements("sol", 1, 7.0)

    def test_sibling_index_changes_elements(self):
        assert derive_orbital_elements("sol", 1, 7.0) != derive_orbital_elements("sol", 2, 7.0)

    def test_draw_order(self):
        """Eccentricity, inclination, periapsis, phase drawn in that order."""
        rand = create_seeded_random(derive_seed("sol", 3))
        draws = [rand() for _ in range(4)]
        el = derive_orbital_elements("sol", 3, 10.0, max_eccentricity=0.05, max_inclination=0.15)
        assert el.eccentricity == pytest.approx(draws[0] * 0.05)
        assert el.inclination == pytest.approx((draws[1] - 0.5) * 0.15)
        assert el.argument_of_periapsis == pytest.approx(draws[2] * 2 * math.pi)
        assert el.phase == pytest.approx(draws[3] * 2 * math.pi)

    def test_elements_within_bounds(self):
        for index in range(20):
            el = derive_orbital_elements("galaxy-x", index, 5.0)
            assert 0.0 <= el.eccentricity < ORBITAL_SPACING.MAX_ECCENTRICITY
            assert abs(el.inclination) <= ORBITAL_SPACING.MAX_INCLINATION / 2
            assert 0.0 <= el.phase < 2 * math.pi

    def test_speed_from_axis(self):
        el = derive_orbital_elements("sol", 0, 4.0, speed_multiplier=2.0)
        assert el.orbital_speed == pytest.approx(orbital_speed(4.0, multiplier=2.0))


class TestDeriveSiblingElements:

    def test_one_element_per_sibling(self):
        assert len(derive_sibling_elements("sol", [0.8, 0.9, 1.0])) == 3

    def test_axes_strictly_increasing(self):
        elements = derive_sibling_elements("sol", [1.0] * 6)
        axes = [el.semi_major_axis for el in elements]
        assert all(b > a for a, b in zip(axes, axes[1:]))

    def test_innermost_at_base_radius(self):
        elements = derive_sibling_elements("sol", [0.8, 0.8])
        assert elements[0].semi_major_axis == pytest.approx(ORBITAL_SPACING.BASE_RADIUS)

    def test_empty(self):
        assert derive_sibling_elements("sol", []) == []
