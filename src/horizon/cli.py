# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for universe layout and camera flights.

Usage:
    # Galaxy placement and recommended camera distance
    horizon -i universe.json --layout
    horizon -i universe.json --layout --spacing 60 --export-layout galaxies.csv

    # Planet orbital offsets for a solar system at a given time
    horizon -i universe.json --orbits sol --time 120

    # Simulate a camera flight (requests are queued in order)
    horizon -i universe.json --fly galaxy:milky-way solar-system:sol planet:earth
    horizon -i universe.json --fly galaxy:milky-way --back 1 --export-poses poses.csv
    horizon -i universe.json --fly galaxy:milky-way --reduced-motion
"""
import argparse
import logging
import sys
from dataclasses import replace

from horizon.adapters.csv_exporter import CsvLayoutExporter, CsvPoseExporter
from horizon.adapters.json_universe import JsonUniverseReader
from horizon.adapters.recording_camera import RecordingCamera
from horizon.director import SceneDirector
from horizon.domain.choreographer import DEFAULT_TRANSITION, TransitionConfig
from horizon.domain.easing import EASINGS
from horizon.domain.galaxy_layout import GalaxyLayout, recommended_camera_distance
from horizon.domain.navigation import DEFAULT_MAX_QUEUE_LENGTH, FocusLevel, NavigationStateMachine
from horizon.domain.scale import GALAXY_SCALE
from horizon.domain.universe import Universe, find_solar_system

logger = logging.getLogger(__name__)

# Extra frames allowed per transition before the flight is declared stuck
_WATCHDOG_SLACK_FRAMES = 10


def parse_focus_request(token: str) -> tuple[FocusLevel, str | None]:
    """Parse 'level:id' (or 'universe') into a focus request."""
    level_name, _, target_id = token.partition(':')
    key = level_name.strip().upper().replace('-', '_')
    try:
        level = FocusLevel[key]
    except KeyError:
        choices = ", ".join(fl.name.lower().replace('_', '-') for fl in FocusLevel)
        raise ValueError(f"Unknown focus level '{level_name}' (expected one of: {choices})")
    if level is not FocusLevel.UNIVERSE and not target_id:
        raise ValueError(f"Focus request '{token}' needs an id, e.g. {level_name}:my-id")
    return level, (target_id or None)


def run_layout(universe: Universe, spacing: float = GALAXY_SCALE.LAYOUT_SPACING) -> GalaxyLayout:
    """Symmetric galaxy layout for the universe."""
    director = SceneDirector(universe, layout_spacing=spacing)
    return director.layout


def _settle(director: SceneDirector, clock: list[float], frame_ms: float, max_frames: int) -> bool:
    """Tick frames until the machine is idle. False if the watchdog tripped."""
    frames = 0
    while director.machine.is_transitioning:
        if frames >= max_frames:
            return False
        director.frame(clock[0])
        clock[0] += frame_ms
        frames += 1
    return True


def run_flight(
    universe: Universe,
    requests: list[tuple[FocusLevel, str | None]],
    back_steps: int = 0,
    fps: float = 60.0,
    transition: TransitionConfig = DEFAULT_TRANSITION,
    reduced_motion: bool = False,
    max_queue_length: int | None = DEFAULT_MAX_QUEUE_LENGTH,
    spacing: float = GALAXY_SCALE.LAYOUT_SPACING,
) -> SceneDirector:
    """
    Simulate a camera flight through the universe.

    All focus requests are issued up front (the first commits, the rest
    queue), frames are simulated at fps until the machine is idle, then
    each back step is issued and settled in turn.

    Returns:
        The SceneDirector, with recorded pose samples.

    Raises:
        RuntimeError: a transition did not finish within its frame limit.
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")

    camera = RecordingCamera(keep_history=False)
    director = SceneDirector(
        universe,
        camera=camera,
        machine=NavigationStateMachine(max_queue_length=max_queue_length),
        transition=transition,
        prefers_reduced_motion=reduced_motion,
        layout_spacing=spacing,
        record_samples=True,
    )

    frame_ms = 1000.0 / fps
    per_transition = int(max(transition.duration_ms, 0.0) / frame_ms) + _WATCHDOG_SLACK_FRAMES
    clock = [0.0]

    for level, target_id in requests:
        director.machine.request_focus(level, target_id)
    if not _settle(director, clock, frame_ms, per_transition * (len(requests) + 1)):
        raise RuntimeError("Camera flight did not settle; transition appears stuck")

    for _ in range(back_steps):
        director.machine.request_back()
        if not _settle(director, clock, frame_ms, per_transition):
            raise RuntimeError("Camera flight did not settle; transition appears stuck")

    return director


def _format_vec(v) -> str:
    return f"({v[0]:.3f}, {v[1]:.3f}, {v[2]:.3f})"


def _print_orbits(universe: Universe, solar_system_id: str, time_s: float) -> None:
    for galaxy in universe.galaxies:
        system = find_solar_system(galaxy, solar_system_id)
        if system is None:
            continue
        director = SceneDirector(universe)
        elements = director.planet_elements(system)
        positions = director.planet_positions(galaxy.id, system.id, time_s)
        print(f"Solar system {system.id} ({len(system.planets)} planets) at t={time_s:g}:")
        for planet, el in zip(system.planets, elements):
            print(
                f"  {planet.id}: a={el.semi_major_axis:.3f} e={el.eccentricity:.4f} "
                f"offset={_format_vec(positions[planet.id])}"
            )
        return
    raise ValueError(f"Solar system '{solar_system_id}' not found")


def main():
    parser = argparse.ArgumentParser(
        description="Deterministic universe layout and camera navigation",
    )
    parser.add_argument(
        '--input', '-i', required=True,
        help="Universe content JSON file",
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Log navigation and transition diagnostics to stderr",
    )

    layout_group = parser.add_argument_group('layout')
    layout_group.add_argument(
        '--layout', action='store_true', default=False,
        help="Print symmetric galaxy positions",
    )
    layout_group.add_argument(
        '--spacing', type=float, default=GALAXY_SCALE.LAYOUT_SPACING,
        help=f"Minimum galaxy center spacing (default: {GALAXY_SCALE.LAYOUT_SPACING:g})",
    )
    layout_group.add_argument(
        '--export-layout',
        help="Export galaxy positions to CSV",
    )
    layout_group.add_argument(
        '--orbits', metavar='SOLAR_SYSTEM_ID',
        help="Print planet orbital offsets for a solar system",
    )
    layout_group.add_argument(
        '--time', type=float, default=0.0,
        help="Scene time for --orbits (default: 0)",
    )

    flight_group = parser.add_argument_group('camera flight')
    flight_group.add_argument(
        '--fly', nargs='+', metavar='LEVEL:ID',
        help="Focus requests in order, e.g. galaxy:g1 solar-system:s1",
    )
    flight_group.add_argument(
        '--back', type=int, default=0,
        help="Back steps to take after the flight settles",
    )
    flight_group.add_argument(
        '--fps', type=float, default=60.0,
        help="Simulated frame rate (default: 60)",
    )
    flight_group.add_argument(
        '--duration-ms', type=float, default=DEFAULT_TRANSITION.duration_ms,
        help=f"Transition duration (default: {DEFAULT_TRANSITION.duration_ms:g})",
    )
    flight_group.add_argument(
        '--easing', choices=sorted(EASINGS), default='in-out-cubic',
        help="Transition easing (default: in-out-cubic)",
    )
    flight_group.add_argument(
        '--reduced-motion', action='store_true', default=False,
        help="Instantaneous transitions",
    )
    flight_group.add_argument(
        '--max-queue', type=int, default=DEFAULT_MAX_QUEUE_LENGTH,
        help=f"Maximum queued focus requests (default: {DEFAULT_MAX_QUEUE_LENGTH})",
    )
    flight_group.add_argument(
        '--export-poses',
        help="Export sampled camera poses to CSV",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        universe = JsonUniverseReader().read_universe(args.input)
        print(f"Loaded {args.input} with {len(universe.galaxies)} galaxies.")

        if args.layout or args.export_layout:
            result = run_layout(universe, args.spacing)
            if args.layout:
                for galaxy_id, pos in result.positions.items():
                    print(f"  {galaxy_id}: {_format_vec(pos)}")
                distance = recommended_camera_distance(result.bounding_radius)
                print(f"Bounding radius {result.bounding_radius:.3f}, "
                      f"recommended camera distance {distance:.3f}")
            if args.export_layout:
                n = CsvLayoutExporter().export(result.positions, args.export_layout)
                print(f"Exported {n} galaxy positions to {args.export_layout}")

        if args.orbits:
            _print_orbits(universe, args.orbits, args.time)

        if args.fly or args.back:
            requests = [parse_focus_request(token) for token in (args.fly or [])]
            transition = replace(
                DEFAULT_TRANSITION,
                duration_ms=args.duration_ms,
                easing=EASINGS[args.easing],
            )
            director = run_flight(
                universe,
                requests,
                back_steps=args.back,
                fps=args.fps,
                transition=transition,
                reduced_motion=args.reduced_motion,
                max_queue_length=args.max_queue,
                spacing=args.spacing,
            )
            state = director.machine.state
            ids = ", ".join(
                f"{level.name.lower()}={state.focused_id(level)}"
                for level in FocusLevel
                if level is not FocusLevel.UNIVERSE and state.focused_id(level)
            )
            print(f"Focus: {state.focus_level.name}" + (f" ({ids})" if ids else ""))
            print(f"Camera: position {_format_vec(director.pose.position)} "
                  f"look_at {_format_vec(director.pose.look_at)}")
            print(f"Simulated {len(director.samples)} frames.")
            if args.export_poses:
                n = CsvPoseExporter().export(director.samples, args.export_poses)
                print(f"Exported {n} pose samples to {args.export_poses}")

    except FileNotFoundError:
        print(
            f"Error: Input file not found: {args.input}\n"
            f"Expected a universe JSON file with a 'galaxies' list.",
            file=sys.stderr,
        )
        sys.exit(1)
    except (ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
