"""
Movement log for a solve run.

Records every action taken while solving, in order. The log must be
armed with clear() at the start of a solve session and is frozen when
the maze is complete. Misuse raises MovementLogError so a stale log
can never leak movements into the next session.
"""

from __future__ import annotations

import logging
from enum import Enum, auto

from maze_robot.decision import Action

logger = logging.getLogger(__name__)


class MovementLogError(RuntimeError):
    """Movement log used outside its solve-session lifecycle."""


class LogState(Enum):
    """Lifecycle of a movement log."""

    UNARMED = auto()  # Created, not yet cleared for a session
    RECORDING = auto()
    FROZEN = auto()


class MovementLog:
    """Append-only action record owned by one solve session."""

    def __init__(self):
        self._movements: list[Action] = []
        self.state = LogState.UNARMED

    def __len__(self) -> int:
        return len(self._movements)

    @property
    def is_frozen(self) -> bool:
        return self.state == LogState.FROZEN

    @property
    def movements(self) -> tuple[Action, ...]:
        """Read-only view of the recorded actions."""
        return tuple(self._movements)

    def clear(self):
        """Empty the log and start recording for a new solve session."""
        if self.state == LogState.RECORDING:
            raise MovementLogError("Cannot clear a log while a session is recording")
        self._movements = []
        self.state = LogState.RECORDING

    def append(self, action: Action):
        """Record one action. Only valid while recording."""
        if self.state != LogState.RECORDING:
            raise MovementLogError(f"Cannot append {action.name} to a {self.state.name} log")
        self._movements.append(action)

    def freeze(self) -> tuple[Action, ...]:
        """Stop recording and return the accumulated actions."""
        if self.state != LogState.RECORDING:
            raise MovementLogError(f"Cannot freeze a {self.state.name} log")
        self.state = LogState.FROZEN
        logger.info(f"Movement log frozen with {len(self._movements)} actions")
        return self.movements
