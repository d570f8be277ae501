# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
In-memory camera adapter.

Stands in for a renderer's camera: keeps the latest pose and, optionally,
every pose it was given.
"""
from horizon.domain.camera import DEFAULT_CAMERA_POSES, CameraPose
from horizon.ports import CameraHandle


class RecordingCamera(CameraHandle):
    """Camera handle that records poses instead of drawing."""

    def __init__(self, initial: CameraPose = DEFAULT_CAMERA_POSES["universe"], keep_history: bool = True) -> None:
        self.pose = initial
        self.keep_history = keep_history
        self.history: list[CameraPose] = []

    def set_pose(self, pose: CameraPose) -> None:
        self.pose = pose
        if self.keep_history:
            self.history.append(pose)

    @property
    def position(self):
        return self.pose.position

    @property
    def look_at(self):
        return self.pose.look_at
