# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON universe content adapter.

Reads the authored universe document ({"galaxies": [...]}, camelCase
keys) into the domain model. Only structure is checked here; whether
ids referenced elsewhere exist is not.
"""
import json
from typing import Any

from horizon.domain.universe import Galaxy, Moon, Planet, SolarSystem, Star, Universe
from horizon.ports import UniverseReader


def _require(data: Any, key: str, where: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected an object, got {type(data).__name__}")
    if key not in data:
        raise ValueError(f"{where}: missing required field '{key}'")
    return data[key]


def _text(data: dict, key: str, where: str, required: bool = False) -> str:
    value = _require(data, key, where) if required else data.get(key, "")
    if not isinstance(value, str):
        raise ValueError(f"{where}: field '{key}' must be a string")
    return value


def _items(data: dict, key: str, where: str) -> list:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ValueError(f"{where}: field '{key}' must be a list")
    return value


def _parse_star(data: dict, where: str) -> Star:
    return Star(
        id=_text(data, 'id', where, required=True),
        name=_text(data, 'name', where),
        theme=_text(data, 'theme', where),
    )


def _parse_moon(data: dict, where: str) -> Moon:
    return Moon(
        id=_text(data, 'id', where, required=True),
        name=_text(data, 'name', where),
        content_markdown=_text(data, 'contentMarkdown', where),
    )


def _parse_planet(data: dict, where: str) -> Planet:
    return Planet(
        id=_text(data, 'id', where, required=True),
        name=_text(data, 'name', where),
        theme=_text(data, 'theme', where),
        summary=_text(data, 'summary', where),
        content_markdown=_text(data, 'contentMarkdown', where),
        moons=tuple(
            _parse_moon(m, f"{where}.moons[{i}]")
            for i, m in enumerate(_items(data, 'moons', where))
        ),
    )


def _parse_solar_system(data: dict, where: str) -> SolarSystem:
    return SolarSystem(
        id=_text(data, 'id', where, required=True),
        name=_text(data, 'name', where),
        theme=_text(data, 'theme', where),
        main_star=_parse_star(_require(data, 'mainStar', where), f"{where}.mainStar"),
        planets=tuple(
            _parse_planet(p, f"{where}.planets[{i}]")
            for i, p in enumerate(_items(data, 'planets', where))
        ),
    )


def _parse_galaxy(data: dict, where: str) -> Galaxy:
    return Galaxy(
        id=_text(data, 'id', where, required=True),
        name=_text(data, 'name', where),
        description=_text(data, 'description', where),
        theme=_text(data, 'theme', where),
        particle_color=_text(data, 'particleColor', where),
        stars=tuple(
            _parse_star(s, f"{where}.stars[{i}]")
            for i, s in enumerate(_items(data, 'stars', where))
        ),
        solar_systems=tuple(
            _parse_solar_system(s, f"{where}.solarSystems[{i}]")
            for i, s in enumerate(_items(data, 'solarSystems', where))
        ),
    )


def parse_universe(data: Any) -> Universe:
    """Build a Universe from a decoded JSON document."""
    galaxies = _require(data, 'galaxies', 'universe')
    if not isinstance(galaxies, list):
        raise ValueError("universe: field 'galaxies' must be a list")
    return Universe(galaxies=tuple(
        _parse_galaxy(g, f"galaxies[{i}]") for i, g in enumerate(galaxies)
    ))


class JsonUniverseReader(UniverseReader):
    """Reads universe content from JSON files."""

    def read_universe(self, path: str) -> Universe:
        with open(path, encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"{path}: invalid JSON ({e})") from e
        return parse_universe(data)
