# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbital mechanics for procedural bodies.

Keplerian elements are derived deterministically from a parent id and a
sibling index, then evaluated at a time value to place the body. The
eccentric anomaly is approximated with a fixed number of fixed-point
iterations; this is a visual model, not a physical propagator.
"""
import math
from dataclasses import dataclass
from typing import Sequence

from horizon.domain.scale import (
    KEPLER_ORBITAL_SPEED_FACTOR,
    ORBITAL_SPACING,
    OrbitalSpacing,
)
from horizon.domain.seeded_random import create_seeded_random, derive_seed
from horizon.domain.spacing import SizeInput, compute_orbital_radius, compute_spacing
from horizon.domain.vector import Vec3

KEPLER_ITERATIONS: int = 5


@dataclass(frozen=True)
class OrbitalElements:
    """Immutable orbit of one body around its parent."""
    semi_major_axis: float
    eccentricity: float
    inclination: float              # rad
    argument_of_periapsis: float    # rad
    phase: float                    # rad, mean anomaly at t=0
    orbital_speed: float            # rad per time unit


def _check_elements(elements: OrbitalElements) -> None:
    if not 0.0 <= elements.eccentricity < 1.0:
        raise ValueError(
            f"Eccentricity must be in [0, 1), got {elements.eccentricity}"
        )
    if elements.semi_major_axis <= 0:
        raise ValueError(
            f"Semi-major axis must be positive, got {elements.semi_major_axis}"
        )


def orbital_speed(
    semi_major_axis: float,
    factor: float = KEPLER_ORBITAL_SPEED_FACTOR,
    multiplier: float = 1.0,
) -> float:
    """Angular speed K / a^2 (loose stand-in for Kepler's third law)."""
    if semi_major_axis <= 0:
        raise ValueError(f"Semi-major axis must be positive, got {semi_major_axis}")
    return factor / (semi_major_axis * semi_major_axis) * multiplier


def solve_eccentric_anomaly(
    mean_anomaly: float,
    eccentricity: float,
    iterations: int = KEPLER_ITERATIONS,
) -> float:
    """
    Approximate E in M = E - e*sin(E) by fixed-point iteration.

    Seeded at E0 = M and iterated exactly `iterations` times,
    E <- M + e*sin(E). No convergence test.
    """
    e_anom = mean_anomaly
    for _ in range(iterations):
        e_anom = mean_anomaly + eccentricity * math.sin(e_anom)
    return e_anom


def true_anomaly_from_eccentric(eccentric_anomaly: float, eccentricity: float) -> float:
    """True anomaly from eccentric anomaly (half-angle form)."""
    return 2.0 * math.atan2(
        math.sqrt(1.0 + eccentricity) * math.sin(eccentric_anomaly / 2.0),
        math.sqrt(1.0 - eccentricity) * math.cos(eccentric_anomaly / 2.0),
    )


def orbital_radius_at(semi_major_axis: float, eccentricity: float, true_anomaly: float) -> float:
    """Conic radius r = a(1-e^2)/(1+e*cos(nu))."""
    return (
        semi_major_axis * (1.0 - eccentricity * eccentricity)
        / (1.0 + eccentricity * math.cos(true_anomaly))
    )


def position_at(elements: OrbitalElements, time_s: float) -> Vec3:
    """
    Offset of a body from its parent at time_s.

    The orbit lies in a plane tilted by the inclination about the x axis:
    x = cos(angle)*r, y = sin(angle)*r*sin(i), z = sin(angle)*r*cos(i),
    with angle = nu + argument_of_periapsis.

    Args:
        elements: Orbital elements of the body.
        time_s: Time value (scene seconds).

    Returns:
        (x, y, z) offset from the parent body.
    """
    _check_elements(elements)
    e = elements.eccentricity

    mean_anomaly = elements.orbital_speed * time_s + elements.phase
    e_anom = solve_eccentric_anomaly(mean_anomaly, e)
    nu = true_anomaly_from_eccentric(e_anom, e)
    r = orbital_radius_at(elements.semi_major_axis, e, nu)

    angle = nu + elements.argument_of_periapsis
    sin_i = math.sin(elements.inclination)
    cos_i = math.cos(elements.inclination)

    return (
        math.cos(angle) * r,
        math.sin(angle) * r * sin_i,
        math.sin(angle) * r * cos_i,
    )


def derive_orbital_elements(
    parent_id: str,
    sibling_index: int,
    semi_major_axis: float,
    max_eccentricity: float = ORBITAL_SPACING.MAX_ECCENTRICITY,
    max_inclination: float = ORBITAL_SPACING.MAX_INCLINATION,
    speed_multiplier: float = 1.0,
) -> OrbitalElements:
    """
    Deterministic elements for the sibling at sibling_index under parent_id.

    Draws eccentricity, inclination, argument of periapsis and phase, in
    that order, from the stream seeded by derive_seed(parent_id, index).
    Renumbering siblings changes the elements of every later sibling.
    """
    rand = create_seeded_random(derive_seed(parent_id, sibling_index))

    eccentricity = rand() * max_eccentricity
    inclination = (rand() - 0.5) * max_inclination
    argument_of_periapsis = rand() * math.pi * 2.0
    phase = rand() * math.pi * 2.0

    return OrbitalElements(
        semi_major_axis=semi_major_axis,
        eccentricity=eccentricity,
        inclination=inclination,
        argument_of_periapsis=argument_of_periapsis,
        phase=phase,
        orbital_speed=orbital_speed(semi_major_axis, multiplier=speed_multiplier),
    )


def derive_sibling_elements(
    parent_id: str,
    sizes: Sequence[SizeInput],
    nominal_spacing: float | None = None,
    container_radius: float | None = None,
    speed_multiplier: float = 1.0,
    config: OrbitalSpacing = ORBITAL_SPACING,
) -> list[OrbitalElements]:
    """
    Elements for a whole sibling set, using collision-free spacing.

    Args:
        parent_id: Id of the body all siblings orbit.
        sizes: Sibling radii in orbital order.
        nominal_spacing: Starting spacing (default RADIUS_INCREMENT).
        container_radius: Optional outer bound for the system.
        speed_multiplier: Scales every orbital speed.
        config: Orbital spacing constants.

    Returns:
        One OrbitalElements per sibling, in orbital order.
    """
    spacing = compute_spacing(sizes, nominal_spacing, container_radius, config)
    return [
        derive_orbital_elements(
            parent_id,
            index,
            compute_orbital_radius(index, spacing, config),
            max_eccentricity=config.MAX_ECCENTRICITY,
            max_inclination=config.MAX_INCLINATION,
            speed_multiplier=speed_multiplier,
        )
        for index in range(len(sizes))
    ]
