"""
Analog sensor reader.

Turns raw voltages into a Measurement: ultrasonic volts are scaled
linearly to millimeters, reflectance volts pass through unchanged.
Out-of-range voltages are not validated.
"""

from __future__ import annotations

from typing import Callable

from maze_robot.config import (
    LEFT_REFLECTANCE_CHANNEL,
    RIGHT_REFLECTANCE_CHANNEL,
    ULTRASONIC_CHANNEL,
)
from maze_robot.params import Parameters
from maze_robot.perception import Measurement


class AnalogSensors:
    """
    Forward ultrasonic + two downward reflectance sensors.

    Usage:
        sensors = AnalogSensors(motor.voltage, params)
        measurement = sensors.read()
    """

    def __init__(self, voltage_fn: Callable[[int], float], params: Parameters | None = None):
        """
        Args:
            voltage_fn: Returns the latest voltage for an analog channel
            params: Shared Parameters (distance scaling)
        """
        self._voltage = voltage_fn
        self.params = params or Parameters()

    def read(self) -> Measurement:
        """Take one snapshot of all three sensors."""
        return Measurement(
            distance_mm=self._voltage(ULTRASONIC_CHANNEL) * self.params.distance_mm_per_volt,
            left_reflectance=self._voltage(LEFT_REFLECTANCE_CHANNEL),
            right_reflectance=self._voltage(RIGHT_REFLECTANCE_CHANNEL),
        )
