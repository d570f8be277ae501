# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for frame-driven camera transitions."""
import pytest

from horizon.domain.camera import CameraPose
from horizon.domain.choreographer import (
    DEFAULT_TRANSITION,
    CameraChoreographer,
    TransitionConfig,
)
from horizon.domain.easing import linear
from horizon.domain.vector import vec_isclose

FROM = CameraPose(position=(0.0, 0.0, 0.0), look_at=(0.0, 0.0, -1.0))
TO = CameraPose(position=(10.0, 0.0, 0.0), look_at=(10.0, 0.0, -1.0))
FAR = CameraPose(position=(100.0, 0.0, 0.0), look_at=(0.0, 0.0, 0.0))


def _linear_choreographer(applied=None):
    config = TransitionConfig(duration_ms=1000.0, easing=linear)
    sink = applied.append if applied is not None else None
    return CameraChoreographer(apply_pose=sink, config=config)


class TestLifecycle:

    def test_idle_tick_returns_false(self):
        choreo = CameraChoreographer()
        assert choreo.is_active is False
        assert choreo.tick(0.0) is False

    def test_first_tick_writes_start_pose(self):
        applied = []
        choreo = _linear_choreographer(applied)
        choreo.start(FROM, TO)
        assert applied == []
        assert choreo.tick(5000.0) is False
        assert applied == [FROM]

    def test_reference_time_taken_from_first_tick(self):
        choreo = _linear_choreographer()
        session = choreo.start(FROM, TO)
        assert session.start_ms is None
        choreo.tick(250.0)
        assert session.start_ms == 250.0

    def test_midway(self):
        choreo = _linear_choreographer()
        choreo.start(FROM, TO)
        choreo.tick(0.0)
        choreo.tick(500.0)
        assert choreo.progress == pytest.approx(0.5)
        assert vec_isclose(choreo.current_pose.position, (5.0, 0.0, 0.0))
        assert vec_isclose(choreo.current_pose.look_at, (5.0, 0.0, -1.0))

    def test_completion_lands_exactly_on_target(self):
        calls = []
        choreo = _linear_choreographer()
        choreo.start(FROM, TO, on_complete=lambda: calls.append("done"))
        choreo.tick(0.0)
        assert choreo.tick(1000.0) is True
        assert choreo.current_pose == TO
        assert choreo.is_active is False
        assert calls == ["done"]

    def test_on_complete_fires_once(self):
        calls = []
        choreo = _linear_choreographer()
        choreo.start(FROM, TO, on_complete=lambda: calls.append(1))
        choreo.tick(0.0)
        choreo.tick(2000.0)
        assert choreo.tick(3000.0) is False
        assert calls == [1]

    def test_overshoot_clamps(self):
        choreo = _linear_choreographer()
        choreo.start(FROM, TO)
        choreo.tick(0.0)
        choreo.tick(10_000.0)
        assert choreo.progress == 1.0
        assert choreo.current_pose == TO

    def test_zero_duration_completes_on_first_tick(self):
        calls = []
        choreo = _linear_choreographer()
        choreo.start(FROM, TO, duration_ms=0.0, on_complete=lambda: calls.append(1))
        assert choreo.tick(42.0) is True
        assert choreo.current_pose == TO
        assert calls == [1]

    def test_non_monotonic_tick_holds_at_start(self):
        choreo = _linear_choreographer()
        choreo.start(FROM, TO)
        choreo.tick(1000.0)
        choreo.tick(400.0)
        assert choreo.progress == 0.0
        assert choreo.current_pose == FROM


class TestCancelAndSupersede:

    def test_cancel_suppresses_completion(self):
        calls = []
        choreo = _linear_choreographer()
        choreo.start(FROM, TO, on_complete=lambda: calls.append(1))
        choreo.tick(0.0)
        assert choreo.cancel() is True
        assert choreo.tick(5000.0) is False
        assert calls == []

    def test_cancel_when_idle(self):
        assert CameraChoreographer().cancel() is False

    def test_start_supersedes_running_session(self):
        calls = []
        choreo = _linear_choreographer()
        choreo.start(FROM, TO, on_complete=lambda: calls.append("first"))
        choreo.tick(0.0)
        choreo.start(TO, FROM, on_complete=lambda: calls.append("second"))
        choreo.tick(100.0)
        choreo.tick(1100.0)
        assert calls == ["second"]
        assert choreo.current_pose == FROM

    def test_on_complete_may_start_next_session(self):
        choreo = _linear_choreographer()

        def chain():
            choreo.start(TO, FROM)

        choreo.start(FROM, TO, on_complete=chain)
        choreo.tick(0.0)
        assert choreo.tick(1000.0) is True
        assert choreo.is_active is True
        assert choreo.session.from_pose == TO


class TestPathSelection:

    def test_short_hop_is_straight(self):
        choreo = CameraChoreographer()
        assert choreo.start(FROM, TO).path is None

    def test_long_hop_is_curved(self):
        choreo = CameraChoreographer()
        assert choreo.start(FROM, FAR).path is not None

    def test_forced_path(self):
        choreo = CameraChoreographer()
        assert choreo.start(FROM, TO, use_path=True).path is not None
        assert choreo.start(FROM, FAR, use_path=False).path is None

    def test_threshold_disabled(self):
        choreo = CameraChoreographer(config=TransitionConfig(path_threshold=None))
        assert choreo.start(FROM, FAR).path is None

    def test_curved_flight_ends_on_target(self):
        choreo = CameraChoreographer(config=TransitionConfig(duration_ms=1000.0))
        choreo.start(FROM, FAR)
        choreo.tick(0.0)
        choreo.tick(500.0)
        assert choreo.current_pose.position[1] > 0.0
        choreo.tick(1000.0)
        assert choreo.current_pose == FAR


class TestDefaults:

    def test_default_duration(self):
        assert DEFAULT_TRANSITION.duration_ms == 1500.0

    def test_session_uses_config_defaults(self):
        choreo = CameraChoreographer()
        session = choreo.start(FROM, TO)
        assert session.duration_ms == DEFAULT_TRANSITION.duration_ms
        assert session.easing is DEFAULT_TRANSITION.easing

    def test_apply_pose_receives_each_frame(self):
        applied = []
        choreo = _linear_choreographer(applied)
        choreo.start(FROM, TO)
        for t in (0.0, 250.0, 500.0, 1000.0):
            choreo.tick(t)
        assert len(applied) == 4
        assert applied[-1] == TO
