# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Motion preferences and frame-rate driven animation intensity.

Reduced-motion preference turns ambient animation off and makes camera
transitions instantaneous (duration 0). Animation intensity backs off
when the measured frame rate drops below target.
"""
from dataclasses import dataclass

MIN_INTENSITY: float = 0.3
LOW_FPS_THRESHOLD: float = 30.0
DEFAULT_TARGET_FPS: float = 60.0


@dataclass(frozen=True)
class MotionConfig:
    """Ambient animation switches and multipliers (0-1)."""
    rotation: bool = True
    rotation_speed: float = 1.0
    parallax: bool = True
    particle_drift: bool = True
    drift_speed: float = 1.0
    intensity: float = 1.0


DEFAULT_MOTION_CONFIG: MotionConfig = MotionConfig()

REDUCED_MOTION_CONFIG: MotionConfig = MotionConfig(
    rotation=False,
    rotation_speed=0.0,
    parallax=False,
    particle_drift=False,
    drift_speed=0.0,
    intensity=0.0,
)


def resolve_motion_config(config: MotionConfig, prefers_reduced_motion: bool) -> MotionConfig:
    """All ambient motion off when reduced motion is preferred."""
    if prefers_reduced_motion:
        return REDUCED_MOTION_CONFIG
    return config


def transition_duration_ms(base_duration_ms: float, prefers_reduced_motion: bool) -> float:
    """Camera transition length; 0 (instantaneous) under reduced motion."""
    if prefers_reduced_motion:
        return 0.0
    return base_duration_ms


def calculate_animation_intensity(fps: float, target_fps: float = DEFAULT_TARGET_FPS) -> float:
    """
    Intensity multiplier for the measured frame rate.

    1.0 at or above target, MIN_INTENSITY below 30 fps, and fps/target
    (clamped) in between.
    """
    if fps >= target_fps:
        return 1.0
    if fps < LOW_FPS_THRESHOLD:
        return MIN_INTENSITY
    return max(MIN_INTENSITY, min(1.0, fps / target_fps))


class FrameRateMonitor:
    """Counts frames and reports fps/intensity once per elapsed second."""

    def __init__(self, target_fps: float = DEFAULT_TARGET_FPS, window_ms: float = 1000.0) -> None:
        self.target_fps = target_fps
        self.window_ms = window_ms
        self.fps = target_fps
        self.intensity = 1.0
        self._frames = 0
        self._window_start: float | None = None

    def frame(self, timestamp_ms: float) -> bool:
        """Record a frame. True when fps/intensity were just updated."""
        if self._window_start is None:
            self._window_start = timestamp_ms
            return False

        self._frames += 1
        elapsed = timestamp_ms - self._window_start
        if elapsed < self.window_ms:
            return False

        self.fps = round(self._frames * 1000.0 / elapsed)
        self.intensity = calculate_animation_intensity(self.fps, self.target_fps)
        self._frames = 0
        self._window_start = timestamp_ms
        return True
