"""
Replay engine.

Plays back a stored run one action per tick. No sensors are read and
there is no timing correction: each recorded action lasts exactly one
tick, whatever the original solve took.
"""

from __future__ import annotations

from maze_robot.decision import Action
from maze_robot.mission.optimizer import RunSequence


class ReplayEngine:
    """Single-cursor playback over a RunSequence."""

    def __init__(self, run: RunSequence):
        self.run = run
        self.index = 0

    @property
    def finished(self) -> bool:
        return self.index >= len(self.run)

    def step(self) -> tuple[Action, bool]:
        """
        Return the next action.

        Returns:
            (action, finished). Once the end is reached, every call
            returns (STOP, True) and the cursor stays put.
        """
        if self.finished:
            return Action.STOP, True
        action = self.run[self.index]
        self.index += 1
        return action, False
