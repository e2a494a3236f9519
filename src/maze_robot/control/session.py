"""
Autonomous sessions.

A session is created once per autonomous period and ticked by the
controller. SolveSession navigates live and records its moves; when the
maze is complete the log is frozen, optimized and saved to the run
store. ReplaySession plays the stored run back. Neither drives the
motors: tick() returns the action and the controller applies it.

Session states:
    Solve:  IDLE -> SOLVING -> COMPLETE
    Replay: IDLE -> REPLAYING -> DONE
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable

from maze_robot.control.mode import SessionKind
from maze_robot.decision import Action, NavigationStrategy
from maze_robot.mission import MovementLog, ReplayEngine, RunStore
from maze_robot.perception import Measurement

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Session state enumeration."""

    IDLE = auto()
    SOLVING = auto()
    COMPLETE = auto()
    REPLAYING = auto()
    DONE = auto()


class SolveSession:
    """
    Live maze solve.

    Usage:
        session = SolveSession(navigator, run_store)
        session.start()

        # Each tick:
        action = session.tick(sensors.read)
    """

    kind = SessionKind.SOLVE

    def __init__(self, navigator: NavigationStrategy, run_store: RunStore):
        self.navigator = navigator
        self.run_store = run_store
        self.log = MovementLog()
        self.state = SessionState.IDLE

    @property
    def finished(self) -> bool:
        return self.state == SessionState.COMPLETE

    def start(self):
        """Begin solving with an empty movement log."""
        self.log.clear()
        self.state = SessionState.SOLVING
        logger.info("Starting Solve Mode")

    def tick(self, read: Callable[[], Measurement]) -> Action:
        """Read sensors once, decide, and record the action."""
        if self.state == SessionState.IDLE:
            raise RuntimeError("Solve session ticked before start()")
        if self.state == SessionState.COMPLETE:
            return Action.STOP

        action, completed = self.navigator.decide(read())
        if completed:
            self.log.freeze()
            self.state = SessionState.COMPLETE
            logger.info(f"Maze Complete! ({len(self.log)} moves recorded)")
            self.run_store.promote(self.log)
            return Action.STOP

        self.log.append(action)
        return action

    def abort(self):
        """Host disabled mid-solve: drop the unfinished log."""
        if self.state != SessionState.SOLVING:
            return
        logger.info(f"Solve aborted, discarding {len(self.log)} unsaved moves")
        self.log = MovementLog()
        self.state = SessionState.IDLE


class ReplaySession:
    """Blind playback of the stored run, one action per tick."""

    kind = SessionKind.REPLAY

    def __init__(self, run_store: RunStore):
        self.run_store = run_store
        self.engine: ReplayEngine | None = None
        self.state = SessionState.IDLE

    @property
    def finished(self) -> bool:
        return self.state == SessionState.DONE

    def start(self):
        """Rewind to the first action of the stored run."""
        self.engine = ReplayEngine(self.run_store.run)
        self.state = SessionState.REPLAYING
        logger.info(f"Starting Replay Mode ({len(self.engine.run)} actions)")

    def tick(self, read: Callable[[], Measurement] | None = None) -> Action:
        """Next stored action. Sensors are never read."""
        if self.state == SessionState.IDLE:
            raise RuntimeError("Replay session ticked before start()")

        action, finished = self.engine.step()
        if finished and self.state == SessionState.REPLAYING:
            self.state = SessionState.DONE
            logger.info("Replay Complete!")
        return action

    def abort(self):
        """Host disabled mid-replay."""
        if self.state == SessionState.REPLAYING:
            logger.info(f"Replay aborted at action {self.engine.index}")
            self.state = SessionState.IDLE
