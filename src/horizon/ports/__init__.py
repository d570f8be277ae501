# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for universe content I/O, cameras, and exports.

Adapters implement these to handle different file formats and renderers.
"""
from typing import Protocol, runtime_checkable

from horizon.domain.universe import Universe
from horizon.ports.camera import CameraHandle
from horizon.ports.export import LayoutExporter, PoseExporter


@runtime_checkable
class UniverseReader(Protocol):
    """Port for reading universe content."""

    def read_universe(self, path: str) -> Universe:
        """Read and parse a universe content file."""
        ...


__all__ = [
    "CameraHandle",
    "LayoutExporter",
    "PoseExporter",
    "UniverseReader",
]
