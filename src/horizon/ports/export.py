# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for exporting computed scene data.

Adapters implement these to write camera pose samples and entity
positions in various formats.
"""
from typing import Protocol, runtime_checkable

from horizon.domain.choreographer import PoseSample
from horizon.domain.vector import Vec3


@runtime_checkable
class PoseExporter(Protocol):
    """Port for exporting sampled camera poses to file."""

    def export(self, samples: list[PoseSample], path: str) -> int:
        """
        Export pose samples to a file.

        Args:
            samples: Poses in timestamp order.
            path: Output file path.

        Returns:
            Number of samples exported.
        """
        ...


@runtime_checkable
class LayoutExporter(Protocol):
    """Port for exporting entity positions to file."""

    def export(self, positions: dict[str, Vec3], path: str) -> int:
        """Export id -> position rows. Returns number of rows written."""
        ...
