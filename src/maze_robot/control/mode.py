"""
Autonomous mode selection.

The operator picks a mode on the chooser; at session start the
controller resolves it once with select_session_kind(). A replay
request with nothing stored falls back to solving.
"""

from __future__ import annotations

from enum import Enum

from maze_robot.config import MODE_REPLAY_LABEL, MODE_SOLVE_LABEL


class SessionKind(Enum):
    """Kind of autonomous session. Values are the chooser labels."""

    SOLVE = MODE_SOLVE_LABEL
    REPLAY = MODE_REPLAY_LABEL


def select_session_kind(requested: SessionKind, has_stored_run: bool) -> SessionKind:
    """Honor REPLAY only when a non-empty run is stored."""
    if requested == SessionKind.REPLAY and has_stored_run:
        return SessionKind.REPLAY
    return SessionKind.SOLVE


class ModeChooser:
    """Two-option operator chooser, "Solve Maze" by default."""

    def __init__(self):
        self._selected = SessionKind.SOLVE

    @property
    def labels(self) -> list[str]:
        return [kind.value for kind in SessionKind]

    @property
    def selected(self) -> SessionKind:
        return self._selected

    def select(self, label: str) -> SessionKind:
        """Select a mode by its label."""
        try:
            self._selected = SessionKind(label)
        except ValueError:
            raise ValueError(f"Unknown mode {label!r}, expected one of {self.labels}") from None
        return self._selected
