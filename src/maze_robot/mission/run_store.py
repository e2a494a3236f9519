"""
Run store - the most recent optimized solve.

Holds at most one RunSequence. replace() swaps the whole sequence in a
single assignment, so readers see either the old run or the new one.
When given a path, every replace() is also written to a JSON file (temp
file + rename) and load() restores it on the next start.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from maze_robot.decision import Action
from maze_robot.mission.movement_log import MovementLog, MovementLogError
from maze_robot.mission.optimizer import RunSequence, optimize

logger = logging.getLogger(__name__)


class RunStore:
    """Holds the last optimized run, optionally backed by a JSON file."""

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else None
        self._run = RunSequence()

    @property
    def run(self) -> RunSequence:
        return self._run

    @property
    def has_run(self) -> bool:
        """True if a stored run has at least one action."""
        return len(self._run) > 0

    def replace(self, run: RunSequence):
        """
        Swap in a new run, then persist it if file-backed.

        The in-memory run is the source of truth: a failed file write is
        logged and the new run stays in memory.
        """
        if not isinstance(run, RunSequence):
            raise TypeError(f"Expected RunSequence, got {type(run).__name__}")
        self._run = run
        logger.info(f"Optimized movements saved: {run.names()}")
        if self.path is not None:
            try:
                self._write(run)
            except OSError as e:
                logger.error(f"Failed to write run to {self.path}: {e}")

    def promote(self, log: MovementLog) -> RunSequence:
        """Optimize a frozen solve log and make it the stored run."""
        if not log.is_frozen:
            raise MovementLogError("Only a completed (frozen) log can be saved as a run")
        run = optimize(log.movements)
        self.replace(run)
        return run

    def _write(self, run: RunSequence):
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp, "w") as f:
                json.dump({"movements": run.names()}, f, indent=2)
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError):
            tmp.unlink(missing_ok=True)
            raise

    @classmethod
    def load(cls, path: Path | str | None) -> RunStore:
        """Create a store, restoring the saved run if the file is readable."""
        store = cls(path)
        if store.path is None or not store.path.exists():
            return store
        try:
            with open(store.path) as f:
                data = json.load(f)
            actions = tuple(Action(name) for name in data["movements"])
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Failed to load {store.path}: {e}, starting with no saved run")
            return store
        # Saved files only ever hold optimizer output
        store._run = optimize(actions)
        logger.info(f"Loaded saved run ({len(store._run)} actions) from {store.path}")
        return store
