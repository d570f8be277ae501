# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Universe content model.

Hierarchy: Universe > Galaxy > SolarSystem > Planet > Moon, plus
free-floating stars inside a galaxy. Content fields are carried as
opaque strings; lookups return None for unknown ids rather than raising.
No external dependencies — only stdlib dataclasses.
"""
from dataclasses import dataclass, field

from horizon.domain.scale import PLANET_SCALE, PlanetScale, calculate_planet_size


@dataclass(frozen=True)
class Moon:
    id: str
    name: str
    content_markdown: str = ""


@dataclass(frozen=True)
class Planet:
    id: str
    name: str
    theme: str = ""
    summary: str = ""
    content_markdown: str = ""
    moons: tuple[Moon, ...] = field(default_factory=tuple)

    def visual_size(self, scale: PlanetScale = PLANET_SCALE) -> float:
        """Radius hint grown by moon count."""
        return calculate_planet_size(len(self.moons), scale)


@dataclass(frozen=True)
class Star:
    id: str
    name: str
    theme: str = ""


@dataclass(frozen=True)
class SolarSystem:
    id: str
    name: str
    main_star: Star
    theme: str = ""
    planets: tuple[Planet, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Galaxy:
    id: str
    name: str
    description: str = ""
    theme: str = ""
    particle_color: str = ""
    stars: tuple[Star, ...] = field(default_factory=tuple)
    solar_systems: tuple[SolarSystem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Universe:
    galaxies: tuple[Galaxy, ...] = field(default_factory=tuple)

    @property
    def galaxy_ids(self) -> list[str]:
        return [g.id for g in self.galaxies]


def find_galaxy(universe: Universe, galaxy_id: str | None) -> Galaxy | None:
    for galaxy in universe.galaxies:
        if galaxy.id == galaxy_id:
            return galaxy
    return None


def find_solar_system(galaxy: Galaxy | None, solar_system_id: str | None) -> SolarSystem | None:
    if galaxy is None:
        return None
    for system in galaxy.solar_systems:
        if system.id == solar_system_id:
            return system
    return None


def find_planet(solar_system: SolarSystem | None, planet_id: str | None) -> Planet | None:
    if solar_system is None:
        return None
    for planet in solar_system.planets:
        if planet.id == planet_id:
            return planet
    return None


def find_moon(planet: Planet | None, moon_id: str | None) -> Moon | None:
    if planet is None:
        return None
    for moon in planet.moons:
        if moon.id == moon_id:
            return moon
    return None
