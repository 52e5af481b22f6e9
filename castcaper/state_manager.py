"""Holds the active game state and forwards the frame loop to it."""

from typing import Protocol


class GameState(Protocol):
    """A screen of the game driven by the frame loop."""

    def update(self, delta_time):
        """Advance the state by delta_time seconds."""

    def render(self):
        """Draw the state."""

    def destroy(self):
        """Release whatever the state holds."""


class StateManager:
    """Keeps one current state and calls its hooks when present."""

    def __init__(self):
        self._current = None

    @property
    def current(self):
        return self._current

    def set_state(self, state):
        self._current = state

    def _call(self, name, *args):
        state = self._current
        hook = getattr(state, name, None) if state is not None else None
        if callable(hook):
            hook(*args)

    def update(self, delta_time):
        self._call("update", delta_time)

    def render(self):
        self._call("render")

    def destroy_current(self):
        """Destroy the current state and leave no state active."""
        state = self._current
        if state is None:
            return
        self._current = None
        hook = getattr(state, "destroy", None)
        if callable(hook):
            hook()