"""
Movement optimizer.

Compacts a completed solve log into the sequence that gets replayed.
BACKUP moves are recoveries from hitting an obstacle, not progress
toward the exit, so they are dropped. Everything else is kept as is,
in order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from maze_robot.decision import Action


@dataclass(frozen=True)
class RunSequence:
    """Optimized, replayable actions from a completed solve."""

    actions: tuple[Action, ...] = ()

    def __len__(self) -> int:
        return len(self.actions)

    def __iter__(self):
        return iter(self.actions)

    def __getitem__(self, index: int) -> Action:
        return self.actions[index]

    def names(self) -> list[str]:
        """Action names, as written to saved run files."""
        return [action.value for action in self.actions]


def optimize(movements: Iterable[Action]) -> RunSequence:
    """Drop every BACKUP, keeping all other actions in original order."""
    return RunSequence(tuple(a for a in movements if a is not Action.BACKUP))
