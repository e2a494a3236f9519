"""
Discrete drive actions.

One Action is produced per control tick, either by the navigator while
solving or by the replay engine. Each maps to a fixed pair of signed
unit wheel speeds. The right motor is mounted mirrored, so driving
straight means opposite signs.
"""

from __future__ import annotations

from enum import Enum


class Action(Enum):
    """Drive action. Values are the names stored in saved runs."""

    FORWARD = "FORWARD"
    BACKUP = "BACKUP"
    TURN_RIGHT = "RIGHT"
    STOP = "STOP"

    @property
    def wheel_speeds(self) -> tuple[int, int]:
        """(left, right) signed unit speeds for this action."""
        return WHEEL_SPEEDS[self]


WHEEL_SPEEDS: dict[Action, tuple[int, int]] = {
    Action.FORWARD: (1, -1),
    Action.BACKUP: (-1, 1),
    Action.TURN_RIGHT: (-1, -1),
    Action.STOP: (0, 0),
}
