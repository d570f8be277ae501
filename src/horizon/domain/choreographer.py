# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Time-driven camera transitions.

A CameraChoreographer interpolates between two camera poses as the
caller ticks it once per rendered frame. It owns no clock and no thread:
the first tick after start() fixes the reference time, and each tick
writes one interpolated pose through the injected apply_pose function.

Lifecycle of a session:
    start()  -> session created, no time sampled
    tick(t0) -> t0 recorded, pose at progress 0 written
    tick(t)  -> eased pose written; returns True once progress reaches 1
                and fires on_complete exactly once
    start()/cancel() while running -> session discarded, on_complete never fires
"""
import logging
from dataclasses import dataclass
from typing import Callable

from horizon.domain.camera import CameraPose
from horizon.domain.camera_path import DEFAULT_CURVE_HEIGHT, CameraPath
from horizon.domain.easing import EasingFn, ease_in_out_cubic
from horizon.domain.vector import vec_distance, vec_lerp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransitionConfig:
    """Defaults applied to every transition started without overrides."""
    duration_ms: float = 1500.0
    easing: EasingFn = ease_in_out_cubic
    path_threshold: float | None = 20.0   # None disables automatic curved paths
    curve_height: float = DEFAULT_CURVE_HEIGHT


DEFAULT_TRANSITION: TransitionConfig = TransitionConfig()


@dataclass(frozen=True)
class PoseSample:
    """Camera pose written at a given frame timestamp."""
    timestamp_ms: float
    pose: CameraPose
    progress: float
    label: str = ""


@dataclass
class AnimationSession:
    """One in-flight transition. Only start_ms changes after creation."""
    from_pose: CameraPose
    to_pose: CameraPose
    duration_ms: float
    easing: EasingFn
    on_complete: Callable[[], None] | None = None
    path: CameraPath | None = None
    start_ms: float | None = None


class CameraChoreographer:
    """Interpolates camera poses frame by frame."""

    def __init__(
        self,
        apply_pose: Callable[[CameraPose], None] | None = None,
        config: TransitionConfig = DEFAULT_TRANSITION,
    ) -> None:
        self._apply_pose = apply_pose
        self.config = config
        self._session: AnimationSession | None = None
        self._progress = 0.0
        self._current_pose: CameraPose | None = None

    @property
    def is_active(self) -> bool:
        return self._session is not None

    @property
    def progress(self) -> float:
        """Linear (un-eased) progress of the current or last session."""
        return self._progress

    @property
    def current_pose(self) -> CameraPose | None:
        """Last pose written, or None before the first tick."""
        return self._current_pose

    @property
    def session(self) -> AnimationSession | None:
        return self._session

    def start(
        self,
        from_pose: CameraPose,
        to_pose: CameraPose,
        duration_ms: float | None = None,
        easing: EasingFn | None = None,
        on_complete: Callable[[], None] | None = None,
        use_path: bool | None = None,
    ) -> AnimationSession:
        """
        Begin a transition, discarding any session already running.

        The discarded session's on_complete is not called. Wall-clock time
        is not sampled until the next tick.

        Args:
            from_pose: Pose at progress 0.
            to_pose: Pose at progress 1.
            duration_ms: Transition length; <= 0 completes on the first tick.
            easing: Progress remapping (default from config).
            on_complete: Called once when the session completes naturally.
            use_path: Force (True) or forbid (False) a curved path; None
                curves only when the displacement exceeds path_threshold.

        Returns:
            The new AnimationSession.
        """
        if self._session is not None:
            logger.debug("Camera transition superseded before completion")

        if duration_ms is None:
            duration_ms = self.config.duration_ms
        if easing is None:
            easing = self.config.easing

        if use_path is None:
            threshold = self.config.path_threshold
            use_path = (
                threshold is not None
                and vec_distance(from_pose.position, to_pose.position) > threshold
            )
        path = (
            CameraPath(from_pose.position, to_pose.position, self.config.curve_height)
            if use_path else None
        )

        self._session = AnimationSession(
            from_pose=from_pose,
            to_pose=to_pose,
            duration_ms=duration_ms,
            easing=easing,
            on_complete=on_complete,
            path=path,
        )
        self._progress = 0.0
        logger.debug(
            "Camera transition started: %s -> %s over %.0f ms%s",
            from_pose.position, to_pose.position, duration_ms,
            " (curved)" if path else "",
        )
        return self._session

    def cancel(self) -> bool:
        """Discard the running session without completing it. True if one was running."""
        if self._session is None:
            return False
        self._session = None
        logger.debug("Camera transition cancelled")
        return True

    def tick(self, timestamp_ms: float) -> bool:
        """
        Advance the running session to timestamp_ms and write the pose.

        Timestamps must be non-decreasing; an earlier timestamp than the
        session's reference time is treated as progress 0.

        Returns:
            True exactly on the tick where the session completes; False
            while running or when no session is active.
        """
        session = self._session
        if session is None:
            return False

        if session.start_ms is None:
            session.start_ms = timestamp_ms

        elapsed = timestamp_ms - session.start_ms
        if elapsed < 0:
            logger.debug(
                "Non-monotonic tick (%.1f ms before reference); holding at start",
                -elapsed,
            )
            elapsed = 0.0

        if session.duration_ms <= 0:
            progress = 1.0
        else:
            progress = min(1.0, max(0.0, elapsed / session.duration_ms))
        self._progress = progress

        if progress >= 1.0:
            pose = session.to_pose
        else:
            eased = session.easing(progress)
            if session.path is not None:
                position = session.path.point_at(eased)
            else:
                position = vec_lerp(session.from_pose.position, session.to_pose.position, eased)
            look_at = vec_lerp(session.from_pose.look_at, session.to_pose.look_at, eased)
            pose = CameraPose(position=position, look_at=look_at)

        self._current_pose = pose
        if self._apply_pose is not None:
            self._apply_pose(pose)

        if progress < 1.0:
            return False

        # Cleared before the callback so it may start the next session
        self._session = None
        logger.debug("Camera transition complete at %s", pose.position)
        if session.on_complete is not None:
            session.on_complete()
        return True
