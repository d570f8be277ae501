# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV exporters for camera pose samples and entity positions.

External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from horizon.domain.choreographer import PoseSample
from horizon.domain.vector import Vec3
from horizon.ports.export import LayoutExporter, PoseExporter

logger = logging.getLogger(__name__)

_POSE_HEADER = [
    'timestamp_ms', 'progress', 'focus_level',
    'pos_x', 'pos_y', 'pos_z',
    'look_x', 'look_y', 'look_z',
]

_LAYOUT_HEADER = ['id', 'x', 'y', 'z']


class CsvPoseExporter(PoseExporter):
    """Exports sampled camera poses to CSV, one row per frame."""

    def export(self, samples: list[PoseSample], path: str) -> int:
        if not samples:
            logger.warning("No pose samples to export; writing header only to %s", path)

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_POSE_HEADER)
            for sample in samples:
                px, py, pz = sample.pose.position
                lx, ly, lz = sample.pose.look_at
                writer.writerow([
                    f'{sample.timestamp_ms:.3f}',
                    f'{sample.progress:.6f}',
                    sample.label,
                    f'{px:.6f}', f'{py:.6f}', f'{pz:.6f}',
                    f'{lx:.6f}', f'{ly:.6f}', f'{lz:.6f}',
                ])

        return len(samples)


class CsvLayoutExporter(LayoutExporter):
    """Exports entity id -> position rows to CSV."""

    def export(self, positions: dict[str, Vec3], path: str) -> int:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_LAYOUT_HEADER)
            for entity_id, (x, y, z) in positions.items():
                writer.writerow([entity_id, f'{x:.6f}', f'{y:.6f}', f'{z:.6f}'])

        return len(positions)
