# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for the viewport camera.

The renderer owns the real camera; the choreographer only writes poses
through this handle.
"""
from typing import Protocol, runtime_checkable

from horizon.domain.camera import CameraPose


@runtime_checkable
class CameraHandle(Protocol):
    """Port for a camera that can be moved to a pose."""

    def set_pose(self, pose: CameraPose) -> None:
        """Move the camera to pose and point it at pose.look_at."""
        ...
