# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Focus navigation state machine.

Tracks which rung of the hierarchy the camera is centered on and
serializes focus changes against the camera transition in flight:

- Idle + request_focus      -> focus committed, Transitioning
- Transitioning + request_focus -> request queued (FIFO)
- Idle + request_back       -> one level up, Transitioning
- Transitioning + request_back  -> ignored (back requests are never queued)
- complete_transition       -> next queued request committed in the same
                               state swap, or Idle if the queue is empty

State is an immutable snapshot replaced by a single assignment, so no
observer can see a half-applied transition. Invalid requests are logged
and ignored; nothing here raises on user intent. Single-writer: callers
that drive the machine from several threads must serialize access.
"""
import logging
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Callable

logger = logging.getLogger(__name__)

DEFAULT_MAX_QUEUE_LENGTH: int = 16


class FocusLevel(IntEnum):
    """Rungs of the hierarchy, ordered from the root."""
    UNIVERSE = 0
    GALAXY = 1
    SOLAR_SYSTEM = 2
    PLANET = 3
    MOON = 4

    @property
    def parent(self) -> "FocusLevel | None":
        """Next level toward UNIVERSE, or None at the root."""
        if self is FocusLevel.UNIVERSE:
            return None
        return FocusLevel(self - 1)


# Which state field holds the focused id for each level below the root
_ID_FIELDS: dict[FocusLevel, str] = {
    FocusLevel.GALAXY: "focused_galaxy_id",
    FocusLevel.SOLAR_SYSTEM: "focused_solar_system_id",
    FocusLevel.PLANET: "focused_planet_id",
    FocusLevel.MOON: "focused_moon_id",
}


@dataclass(frozen=True)
class PendingNavigation:
    """A focus request waiting for the current transition to finish."""
    target_level: FocusLevel
    target_id: str | None


@dataclass(frozen=True)
class NavigationState:
    """Immutable snapshot of the navigation state.

    Ids below focus_level are always None.
    """
    focus_level: FocusLevel = FocusLevel.UNIVERSE
    focused_galaxy_id: str | None = None
    focused_solar_system_id: str | None = None
    focused_planet_id: str | None = None
    focused_moon_id: str | None = None
    is_transitioning: bool = False
    transition_queue: tuple[PendingNavigation, ...] = field(default_factory=tuple)

    def focused_id(self, level: FocusLevel) -> str | None:
        """Id focused at level (None for UNIVERSE)."""
        name = _ID_FIELDS.get(FocusLevel(level))
        return getattr(self, name) if name else None


INITIAL_STATE: NavigationState = NavigationState()


def commit_focus(state: NavigationState, level: FocusLevel, target_id: str | None) -> NavigationState:
    """
    State with focus moved to level/target_id and a transition started.

    Ids above level are kept, the id at level is set, ids below are cleared.
    """
    ids = {}
    for id_level, name in _ID_FIELDS.items():
        if id_level > level:
            ids[name] = None
        elif id_level == level:
            ids[name] = target_id
    return replace(state, focus_level=level, is_transitioning=True, **ids)


def _coerce_level(level) -> FocusLevel | None:
    try:
        return FocusLevel(level)
    except ValueError:
        return None


StateListener = Callable[[NavigationState], None]


class NavigationStateMachine:
    """Owns one NavigationState and the rules for changing it.

    Listeners registered with subscribe() are called with the new state
    whenever a focus is committed (a transition begins) and after reset().
    """

    def __init__(
        self,
        max_queue_length: int | None = DEFAULT_MAX_QUEUE_LENGTH,
        initial_state: NavigationState = INITIAL_STATE,
    ) -> None:
        if max_queue_length is not None and max_queue_length < 1:
            raise ValueError(f"max_queue_length must be >= 1 or None, got {max_queue_length}")
        self.max_queue_length = max_queue_length
        self._state = initial_state
        self._listeners: list[StateListener] = []

    # ── Read access ─────────────────────────────────────────────────────

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def focus_level(self) -> FocusLevel:
        return self._state.focus_level

    @property
    def is_transitioning(self) -> bool:
        return self._state.is_transitioning

    @property
    def transition_queue(self) -> tuple[PendingNavigation, ...]:
        return self._state.transition_queue

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        # A failing listener must not undo or block the committed state
        state = self._state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Navigation listener %r failed", listener)

    # ── Intents ─────────────────────────────────────────────────────────

    def request_focus(self, level: FocusLevel, target_id: str | None = None) -> NavigationState:
        """
        Focus level/target_id now, or queue it behind the running transition.

        target_id is required below UNIVERSE and ignored at UNIVERSE.
        Malformed requests are logged and dropped.
        """
        focus = _coerce_level(level)
        if focus is None:
            logger.warning("Ignoring focus request for unknown level %r", level)
            return self._state

        if focus is FocusLevel.UNIVERSE:
            target_id = None
        elif not isinstance(target_id, str) or not target_id.strip():
            logger.warning(
                "Ignoring focus request for %s: id must be a non-empty string, got %r",
                focus.name, target_id,
            )
            return self._state

        state = self._state
        if state.is_transitioning:
            queue = state.transition_queue
            if self.max_queue_length is not None and len(queue) >= self.max_queue_length:
                dropped = queue[0]
                queue = queue[1:]
                logger.warning(
                    "Navigation queue full (%d); dropping oldest request %s:%s",
                    self.max_queue_length, dropped.target_level.name, dropped.target_id,
                )
            pending = PendingNavigation(target_level=focus, target_id=target_id)
            self._state = replace(state, transition_queue=queue + (pending,))
            logger.debug("Queued focus request %s:%s", focus.name, target_id)
            return self._state

        self._state = commit_focus(state, focus, target_id)
        logger.debug("Focus committed: %s:%s", focus.name, target_id)
        self._notify()
        return self._state

    def request_back(self) -> NavigationState:
        """Move one level toward UNIVERSE when idle; otherwise do nothing."""
        state = self._state
        if state.is_transitioning:
            logger.debug("Back request ignored while transitioning")
            return state

        parent = state.focus_level.parent
        if parent is None:
            logger.debug("Back request ignored at %s", state.focus_level.name)
            return state

        self._state = commit_focus(state, parent, state.focused_id(parent))
        logger.debug("Focus moved back to %s", parent.name)
        self._notify()
        return self._state

    def complete_transition(self) -> NavigationState:
        """
        Finish the running transition.

        With a non-empty queue the head request is committed in the same
        state swap, so the machine never reports Idle in between.
        """
        state = self._state
        if not state.transition_queue:
            if state.is_transitioning:
                logger.debug("Transition complete at %s", state.focus_level.name)
            self._state = replace(state, is_transitioning=False)
            return self._state

        head = state.transition_queue[0]
        remaining = replace(state, transition_queue=state.transition_queue[1:])
        self._state = commit_focus(remaining, head.target_level, head.target_id)
        logger.debug(
            "Draining queued focus request %s:%s (%d left)",
            head.target_level.name, head.target_id, len(remaining.transition_queue),
        )
        self._notify()
        return self._state

    def reset(self) -> NavigationState:
        """Back to UNIVERSE, all ids cleared, queue empty, idle."""
        self._state = INITIAL_STATE
        self._notify()
        return self._state

    # ── Convenience intents ─────────────────────────────────────────────

    def navigate_to_universe(self) -> NavigationState:
        return self.request_focus(FocusLevel.UNIVERSE)

    def navigate_to_galaxy(self, galaxy_id: str) -> NavigationState:
        return self.request_focus(FocusLevel.GALAXY, galaxy_id)

    def navigate_to_solar_system(self, solar_system_id: str) -> NavigationState:
        return self.request_focus(FocusLevel.SOLAR_SYSTEM, solar_system_id)

    def navigate_to_planet(self, planet_id: str) -> NavigationState:
        return self.request_focus(FocusLevel.PLANET, planet_id)

    def navigate_to_moon(self, moon_id: str) -> NavigationState:
        return self.request_focus(FocusLevel.MOON, moon_id)
