# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Scene director: navigation, layout and camera wired together.

Listens to a NavigationStateMachine. Each committed focus is resolved to
a target camera pose from the procedural layout, and a camera transition
is started whose completion hands control back to the state machine.
The renderer calls frame() once per rendered frame.

Usage:
    director = SceneDirector(universe, camera)
    director.machine.navigate_to_galaxy("g1")
    # once per rendered frame:
    director.frame(now_ms)
"""
import logging

from horizon.domain.camera import (
    DEFAULT_CAMERA_POSES,
    GALAXY_FRAMING,
    MOON_FRAMING,
    PLANET_SURFACE_POSITION,
    SOLAR_SYSTEM_FRAMING,
    CameraPose,
    planet_surface_pose,
    resolve_framed_pose,
)
from horizon.domain.choreographer import (
    DEFAULT_TRANSITION,
    CameraChoreographer,
    PoseSample,
    TransitionConfig,
)
from horizon.domain.galaxy_layout import (
    GalaxyLayout,
    calculate_galaxy_layout,
    solar_system_ring_positions,
    star_ring_positions,
    validate_spacing,
)
from horizon.domain.motion import transition_duration_ms
from horizon.domain.navigation import FocusLevel, NavigationState, NavigationStateMachine
from horizon.domain.orbital_mechanics import (
    OrbitalElements,
    derive_sibling_elements,
    position_at,
)
from horizon.domain.scale import (
    GALAXY_SCALE,
    MOON_ORBITAL_SPACING,
    SOLAR_VIEW_ORBITAL_SPACING,
    calculate_moon_size,
)
from horizon.domain.universe import (
    Planet,
    SolarSystem,
    Universe,
    find_galaxy,
    find_moon,
    find_planet,
    find_solar_system,
)
from horizon.domain.vector import Vec3, vec_add
from horizon.ports import CameraHandle

logger = logging.getLogger(__name__)


class SceneDirector:
    """Drives the camera through the universe in response to navigation."""

    def __init__(
        self,
        universe: Universe,
        camera: CameraHandle | None = None,
        machine: NavigationStateMachine | None = None,
        transition: TransitionConfig = DEFAULT_TRANSITION,
        prefers_reduced_motion: bool = False,
        layout_spacing: float = GALAXY_SCALE.LAYOUT_SPACING,
        sim_time_s: float = 0.0,
        record_samples: bool = False,
    ) -> None:
        self.universe = universe
        self.camera = camera
        self.machine = machine if machine is not None else NavigationStateMachine()
        self.prefers_reduced_motion = prefers_reduced_motion
        self.sim_time_s = sim_time_s
        self.record_samples = record_samples
        self.samples: list[PoseSample] = []

        validate_spacing(layout_spacing, GALAXY_SCALE.max_diameter)
        self.layout: GalaxyLayout = calculate_galaxy_layout(universe.galaxy_ids, layout_spacing)

        self.choreographer = CameraChoreographer(apply_pose=self._apply_pose, config=transition)
        self._pose: CameraPose = DEFAULT_CAMERA_POSES["universe"]
        self._unsubscribe = self.machine.subscribe(self._on_navigation)

    @property
    def pose(self) -> CameraPose:
        """Last pose written to the camera."""
        return self._pose

    def close(self) -> None:
        """Stop listening to the state machine and drop any running transition."""
        self._unsubscribe()
        self.choreographer.cancel()

    # ── Layout queries for the renderer ─────────────────────────────────

    def galaxy_positions(self) -> dict[str, Vec3]:
        return dict(self.layout.positions)

    def solar_system_positions(self, galaxy_id: str) -> dict[str, Vec3]:
        """World positions of a galaxy's solar systems on its inner ring."""
        galaxy = find_galaxy(self.universe, galaxy_id)
        center = self.layout.positions.get(galaxy_id)
        if galaxy is None or center is None:
            return {}
        ring = solar_system_ring_positions(len(galaxy.solar_systems))
        return {
            system.id: vec_add(center, offset)
            for system, offset in zip(galaxy.solar_systems, ring)
        }

    def star_positions(self, galaxy_id: str) -> dict[str, Vec3]:
        """World positions of a galaxy's free-floating stars on its outer ring."""
        galaxy = find_galaxy(self.universe, galaxy_id)
        center = self.layout.positions.get(galaxy_id)
        if galaxy is None or center is None:
            return {}
        ring = star_ring_positions(galaxy.id, len(galaxy.stars))
        return {star.id: vec_add(center, offset) for star, offset in zip(galaxy.stars, ring)}

    def planet_elements(self, solar_system: SolarSystem) -> list[OrbitalElements]:
        sizes = [planet.visual_size() for planet in solar_system.planets]
        return derive_sibling_elements(
            solar_system.id,
            sizes,
            container_radius=SOLAR_VIEW_ORBITAL_SPACING.VIEWPORT_RADIUS_SOLAR,
            config=SOLAR_VIEW_ORBITAL_SPACING,
        )

    def planet_positions(self, galaxy_id: str, solar_system_id: str, time_s: float) -> dict[str, Vec3]:
        """Planet offsets from their star at time_s."""
        system = find_solar_system(find_galaxy(self.universe, galaxy_id), solar_system_id)
        if system is None:
            return {}
        return {
            planet.id: position_at(elements, time_s)
            for planet, elements in zip(system.planets, self.planet_elements(system))
        }

    def moon_positions(self, planet: Planet, time_s: float) -> dict[str, Vec3]:
        """World positions of a planet's moons around the planet surface view."""
        sizes = [calculate_moon_size()] * len(planet.moons)
        elements = derive_sibling_elements(planet.id, sizes, config=MOON_ORBITAL_SPACING)
        return {
            moon.id: vec_add(PLANET_SURFACE_POSITION, position_at(el, time_s))
            for moon, el in zip(planet.moons, elements)
        }

    # ── Focus resolution ────────────────────────────────────────────────

    def target_pose(self, state: NavigationState) -> CameraPose | None:
        """Pose for the focus in state, or None when its entity cannot be placed."""
        level = state.focus_level

        if level is FocusLevel.UNIVERSE:
            return DEFAULT_CAMERA_POSES["universe"]

        galaxy_pos = self.layout.positions.get(state.focused_galaxy_id or "")
        if galaxy_pos is None:
            return None
        if level is FocusLevel.GALAXY:
            return resolve_framed_pose(galaxy_pos, GALAXY_FRAMING)

        galaxy = find_galaxy(self.universe, state.focused_galaxy_id)
        system = find_solar_system(galaxy, state.focused_solar_system_id)
        if system is None:
            return None
        if level is FocusLevel.SOLAR_SYSTEM:
            # Solar systems are viewed centered on their galaxy's position
            return resolve_framed_pose(galaxy_pos, SOLAR_SYSTEM_FRAMING)

        planet = find_planet(system, state.focused_planet_id)
        if planet is None:
            return None
        if level is FocusLevel.PLANET:
            return planet_surface_pose()

        moon = find_moon(planet, state.focused_moon_id)
        if moon is None:
            return None
        return resolve_framed_pose(self.moon_positions(planet, self.sim_time_s)[moon.id], MOON_FRAMING)

    def _on_navigation(self, state: NavigationState) -> None:
        if not state.is_transitioning:
            self.choreographer.cancel()
            self._apply_pose(DEFAULT_CAMERA_POSES["universe"])
            return

        target = self.target_pose(state)
        if target is None:
            logger.warning(
                "Cannot resolve camera target for %s:%s; completing transition in place",
                state.focus_level.name, state.focused_id(state.focus_level),
            )
            self.choreographer.cancel()
            self.machine.complete_transition()
            return

        duration = transition_duration_ms(
            self.choreographer.config.duration_ms, self.prefers_reduced_motion,
        )
        self.choreographer.start(
            self._pose,
            target,
            duration_ms=duration,
            on_complete=self.machine.complete_transition,
        )

    # ── Frame loop ──────────────────────────────────────────────────────

    def _apply_pose(self, pose: CameraPose) -> None:
        self._pose = pose
        if self.camera is not None:
            self.camera.set_pose(pose)

    def frame(self, timestamp_ms: float) -> bool:
        """
        Advance the camera for one rendered frame.

        Returns:
            True when a transition completed on this frame.
        """
        if not self.choreographer.is_active:
            return False
        # Completion may drain the queue and move the focus on
        label = self.machine.focus_level.name
        done = self.choreographer.tick(timestamp_ms)
        if self.record_samples:
            self.samples.append(PoseSample(
                timestamp_ms=timestamp_ms,
                pose=self._pose,
                progress=1.0 if done else self.choreographer.progress,
                label=label,
            ))
        return done
