# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for universe content I/O, cameras, and export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from horizon.adapters.json_universe import JsonUniverseReader, parse_universe
from horizon.adapters.recording_camera import RecordingCamera
from horizon.adapters.csv_exporter import CsvLayoutExporter, CsvPoseExporter

__all__ = [
    "CsvLayoutExporter",
    "CsvPoseExporter",
    "JsonUniverseReader",
    "RecordingCamera",
    "parse_universe",
]
