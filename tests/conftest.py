"""Shared fixtures and hardware fakes for the test suite."""

from __future__ import annotations

import pytest

from maze_robot.decision import Action
from maze_robot.mission import RunStore, optimize
from maze_robot.params import Parameters
from maze_robot.perception import Measurement
from maze_robot.sensors import Motor


class FakeSerial:
    """Stands in for serial.Serial: records writes, replays queued lines."""

    def __init__(self, lines: list[bytes] | None = None) -> None:
        self.lines = list(lines or [])
        self.written: list[bytes] = []
        self.closed = False
        self.flushed = 0

    @property
    def in_waiting(self) -> int:
        return sum(len(line) for line in self.lines)

    def readline(self) -> bytes:
        return self.lines.pop(0) if self.lines else b""

    def write(self, data: bytes) -> int:
        self.written.append(data)
        return len(data)

    def reset_input_buffer(self) -> None:
        self.lines.clear()
        self.flushed += 1

    def close(self) -> None:
        self.closed = True

    @property
    def commands(self) -> list[str]:
        return [data.decode().strip() for data in self.written]


class ScriptedSensors:
    """Sensor reader returning a fixed script, repeating the last entry."""

    def __init__(self, measurements: list[Measurement]) -> None:
        self.measurements = list(measurements)
        self.reads = 0

    def read(self) -> Measurement:
        index = min(self.reads, len(self.measurements) - 1)
        self.reads += 1
        return self.measurements[index]


def open_floor(distance_mm: float) -> Measurement:
    """Measurement over dark floor (no boundary tape)."""
    return Measurement(distance_mm=distance_mm, left_reflectance=3.0, right_reflectance=3.0)


def on_tape(distance_mm: float = 500.0) -> Measurement:
    """Measurement with the left sensor on boundary tape."""
    return Measurement(distance_mm=distance_mm, left_reflectance=0.5, right_reflectance=3.0)


@pytest.fixture
def params() -> Parameters:
    return Parameters()


@pytest.fixture
def fake_serial() -> FakeSerial:
    return FakeSerial()


@pytest.fixture
def motor(params: Parameters, fake_serial: FakeSerial) -> Motor:
    """Motor wired to a fake serial port."""
    m = Motor(params=params)
    m._serial = fake_serial
    m._connected = True
    return m


@pytest.fixture
def stored_store() -> RunStore:
    """In-memory store holding [FORWARD, TURN_RIGHT]."""
    store = RunStore()
    store.replace(optimize([Action.FORWARD, Action.TURN_RIGHT]))
    return store
