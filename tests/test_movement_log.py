"""Tests for the movement log lifecycle."""

from __future__ import annotations

import pytest

from maze_robot.decision import Action
from maze_robot.mission import LogState, MovementLog, MovementLogError


@pytest.fixture
def recording_log() -> MovementLog:
    log = MovementLog()
    log.clear()
    return log


class TestRecording:
    """Tests for appending while a solve session records."""

    def test_new_log_is_unarmed_and_empty(self) -> None:
        """A fresh log holds nothing and is not recording."""
        log = MovementLog()
        assert log.state == LogState.UNARMED
        assert len(log) == 0

    def test_append_preserves_order(self, recording_log: MovementLog) -> None:
        """Actions are kept in the order they were appended."""
        for action in (Action.FORWARD, Action.BACKUP, Action.TURN_RIGHT):
            recording_log.append(action)
        assert recording_log.movements == (Action.FORWARD, Action.BACKUP, Action.TURN_RIGHT)

    def test_each_append_grows_by_one(self, recording_log: MovementLog) -> None:
        """Length grows by exactly one per append."""
        for expected in range(1, 6):
            recording_log.append(Action.FORWARD)
            assert len(recording_log) == expected

    def test_movements_is_a_snapshot(self, recording_log: MovementLog) -> None:
        """The returned tuple is not affected by later appends."""
        recording_log.append(Action.FORWARD)
        snapshot = recording_log.movements
        recording_log.append(Action.TURN_RIGHT)
        assert snapshot == (Action.FORWARD,)


class TestFreeze:
    """Tests for freezing a completed log."""

    def test_freeze_returns_movements(self, recording_log: MovementLog) -> None:
        """freeze() hands back everything recorded."""
        recording_log.append(Action.FORWARD)
        recording_log.append(Action.TURN_RIGHT)
        assert recording_log.freeze() == (Action.FORWARD, Action.TURN_RIGHT)
        assert recording_log.is_frozen

    def test_freeze_empty_log(self, recording_log: MovementLog) -> None:
        """Completing on the first tick freezes an empty log."""
        assert recording_log.freeze() == ()

    def test_freeze_twice_raises(self, recording_log: MovementLog) -> None:
        """A log can only be frozen once."""
        recording_log.freeze()
        with pytest.raises(MovementLogError, match="freeze"):
            recording_log.freeze()

    def test_freeze_unarmed_raises(self) -> None:
        """Freezing a log that never recorded is an error."""
        with pytest.raises(MovementLogError):
            MovementLog().freeze()


class TestMisuse:
    """Stale or unarmed logs must fail loudly."""

    def test_append_before_clear_raises(self) -> None:
        """Appending before the session armed the log is an error."""
        log = MovementLog()
        with pytest.raises(MovementLogError, match="UNARMED"):
            log.append(Action.FORWARD)
        assert len(log) == 0

    def test_append_after_freeze_raises(self, recording_log: MovementLog) -> None:
        """Appending to a frozen log is an error and changes nothing."""
        recording_log.append(Action.FORWARD)
        recording_log.freeze()
        with pytest.raises(MovementLogError, match="FROZEN"):
            recording_log.append(Action.TURN_RIGHT)
        assert recording_log.movements == (Action.FORWARD,)

    def test_clear_while_recording_raises(self, recording_log: MovementLog) -> None:
        """clear() is only valid at session start."""
        with pytest.raises(MovementLogError, match="clear"):
            recording_log.clear()

    def test_clear_after_freeze_starts_fresh(self, recording_log: MovementLog) -> None:
        """A frozen log can be re-armed for a new session."""
        recording_log.append(Action.FORWARD)
        recording_log.freeze()
        recording_log.clear()
        assert recording_log.state == LogState.RECORDING
        assert len(recording_log) == 0

    def test_error_is_runtime_error(self) -> None:
        """MovementLogError is a RuntimeError subclass."""
        assert issubclass(MovementLogError, RuntimeError)
