"""Keyboard state tracked per frame, keyed by virtual key code."""

KEY_COUNT = 256


def _valid(code):
    return 0 <= code < KEY_COUNT


class Keyboard:
    """Current and previous-frame key state for codes 0-255."""

    def __init__(self):
        self._current = [False] * KEY_COUNT
        self._previous = [False] * KEY_COUNT

    def update(self):
        """Remember the current state as the previous frame's state."""
        self._previous = list(self._current)

    def key_down(self, code):
        if _valid(code):
            self._current[code] = True

    def key_up(self, code):
        if _valid(code):
            self._current[code] = False

    def is_pressed(self, code):
        """True while the key is held."""
        return _valid(code) and self._current[code]

    def just_pressed(self, code):
        """True only on the frame the key went down."""
        return _valid(code) and self._current[code] and not self._previous[code]