# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Horizon

Navigation core for a drillable universe (Universe > Galaxy > SolarSystem
> Planet > Moon). Includes the focus navigation state machine with queued
transitions, frame-driven camera choreography with easing and curved
paths, deterministic seeded procedural layout, Keplerian orbit placement,
collision-avoiding orbital spacing, and symmetric galaxy placement.
"""

from horizon.domain.seeded_random import (
    create_seeded_random,
    derive_seed,
)
from horizon.domain.vector import (
    Vec3,
    vec_distance,
    vec_lerp,
    lerp,
)
from horizon.domain.orbital_mechanics import (
    OrbitalElements,
    solve_eccentric_anomaly,
    true_anomaly_from_eccentric,
    position_at,
    orbital_speed,
    derive_orbital_elements,
    derive_sibling_elements,
)
from horizon.domain.spacing import (
    BodySize,
    compute_spacing,
    minimum_spacing,
    compute_orbital_radius,
    compute_orbital_radii,
)
from horizon.domain.galaxy_layout import (
    GalaxyLayout,
    calculate_galaxy_layout,
    layout,
    validate_spacing,
    validate_ring_spacing,
    recommended_camera_distance,
)
from horizon.domain.camera import (
    CameraPose,
    resolve_focus_pose,
    constrain_camera,
    DEFAULT_CAMERA_POSES,
)
from horizon.domain.easing import (
    ease_in_out_cubic,
    ease_in_out_quint,
)
from horizon.domain.camera_path import CameraPath
from horizon.domain.choreographer import (
    CameraChoreographer,
    TransitionConfig,
    PoseSample,
)
from horizon.domain.navigation import (
    FocusLevel,
    PendingNavigation,
    NavigationState,
    NavigationStateMachine,
)
from horizon.domain.motion import (
    MotionConfig,
    resolve_motion_config,
    transition_duration_ms,
    calculate_animation_intensity,
)
from horizon.domain.universe import (
    Universe,
    Galaxy,
    SolarSystem,
    Planet,
    Moon,
    Star,
)
from horizon.director import SceneDirector

__all__ = [
    "create_seeded_random",
    "derive_seed",
    "Vec3",
    "vec_distance",
    "vec_lerp",
    "lerp",
    "OrbitalElements",
    "solve_eccentric_anomaly",
    "true_anomaly_from_eccentric",
    "position_at",
    "orbital_speed",
    "derive_orbital_elements",
    "derive_sibling_elements",
    "BodySize",
    "compute_spacing",
    "minimum_spacing",
    "compute_orbital_radius",
    "compute_orbital_radii",
    "GalaxyLayout",
    "calculate_galaxy_layout",
    "layout",
    "validate_spacing",
    "validate_ring_spacing",
    "recommended_camera_distance",
    "CameraPose",
    "resolve_focus_pose",
    "constrain_camera",
    "DEFAULT_CAMERA_POSES",
    "ease_in_out_cubic",
    "ease_in_out_quint",
    "CameraPath",
    "CameraChoreographer",
    "TransitionConfig",
    "PoseSample",
    "FocusLevel",
    "PendingNavigation",
    "NavigationState",
    "NavigationStateMachine",
    "MotionConfig",
    "resolve_motion_config",
    "transition_duration_ms",
    "calculate_animation_intensity",
    "Universe",
    "Galaxy",
    "SolarSystem",
    "Planet",
    "Moon",
    "Star",
    "SceneDirector",
]
