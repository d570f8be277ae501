# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Scale constants for procedural scene layout.

All sizes are in scene units. Planet sizes keep bodies large enough to be
clickable at the default camera distance; orbital spacing keeps adjacent
orbits from overlapping.
No external dependencies — only stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class PlanetScale:
    """Planet and moon body sizes."""
    MIN_SIZE: float = 0.8
    MAX_SIZE: float = 1.8
    BASE_SIZE: float = 1.0
    MOON_MULTIPLIER: float = 0.04       # size added per moon
    MOON_SIZE_RATIO: float = 0.15       # moon radius relative to MIN_SIZE


@dataclass(frozen=True)
class OrbitalSpacing:
    """Orbit placement around a central star.

    Orbital radius for sibling i is BASE_RADIUS + i * spacing, where the
    spacing grows with sibling count past ADAPTIVE_SPACING_THRESHOLD.
    """
    BASE_RADIUS: float = 4.0
    RADIUS_INCREMENT: float = 3.0
    MIN_SEPARATION: float = 2.0         # margin added to r_i + r_{i+1}
    MAX_ECCENTRICITY: float = 0.05
    MAX_INCLINATION: float = 0.15       # rad, ~8.6 deg
    ADAPTIVE_SPACING_THRESHOLD: int = 8
    VIEWPORT_RADIUS_SOLAR: float = 32.0
    VIEWPORT_RADIUS_GALAXY: float = 12.0
    MIN_COMPRESSED_SPACING: float = 1.0


@dataclass(frozen=True)
class GalaxyViewScale:
    """Rings on which solar systems and free-floating stars sit in galaxy view."""
    SOLAR_SYSTEM_RING_RADIUS: float = 10.0
    STAR_RING_RADIUS: float = 15.0
    RING_SEGMENTS: int = 64
    STAR_RING_PHASE: float = math.pi / 4
    STAR_Y_VARIANCE: float = 5.0
    STAR_SEED_OFFSET: int = 1000


@dataclass(frozen=True)
class GalaxyScale:
    """Universe-level galaxy footprint and layout spacing."""
    MAX_RADIUS: float = 22.0
    LAYOUT_SPACING: float = 50.0

    @property
    def max_diameter(self) -> float:
        return 2.0 * self.MAX_RADIUS


PLANET_SCALE: PlanetScale = PlanetScale()
ORBITAL_SPACING: OrbitalSpacing = OrbitalSpacing()
GALAXY_VIEW_SCALE: GalaxyViewScale = GalaxyViewScale()
GALAXY_SCALE: GalaxyScale = GalaxyScale()

# orbital_speed = K / a^2; inner bodies move faster than outer ones
KEPLER_ORBITAL_SPEED_FACTOR: float = 0.5


def calculate_planet_size(moon_count: int, scale: PlanetScale = PLANET_SCALE) -> float:
    """Planet radius grown by moon count, capped at MAX_SIZE."""
    size = scale.MIN_SIZE + max(0, moon_count) * scale.MOON_MULTIPLIER
    return min(scale.MAX_SIZE, size)


def calculate_moon_size(scale: PlanetScale = PLANET_SCALE) -> float:
    """Moon radius, kept below the smallest planet."""
    return scale.MIN_SIZE * scale.MOON_SIZE_RATIO


# Moons orbit closer in, with tighter gaps than planets
MOON_ORBITAL_SPACING: OrbitalSpacing = OrbitalSpacing(
    BASE_RADIUS=3.0,
    RADIUS_INCREMENT=1.5,
    MIN_SEPARATION=0.5,
    MAX_ECCENTRICITY=0.05,
    MAX_INCLINATION=0.3,
)

# Solar system view: near-circular, mostly flat planet orbits
SOLAR_VIEW_ORBITAL_SPACING: OrbitalSpacing = replace(
    ORBITAL_SPACING,
    MAX_ECCENTRICITY=ORBITAL_SPACING.MAX_ECCENTRICITY * 0.3,
    MAX_INCLINATION=ORBITAL_SPACING.MAX_INCLINATION * 0.5,
)
