"""
Motor actuator - microcontroller serial link.

Handles:
- Sending left/right wheel commands
- Emergency stop
- Reading analog sensor voltages reported back on the same link
"""

from __future__ import annotations

import logging

import serial

from maze_robot.config import ANALOG_CHANNELS, MCU_BAUDRATE, MCU_PORT, MOTOR_MAX_COMMAND
from maze_robot.decision import Action

logger = logging.getLogger(__name__)


class Motor:
    """
    Two-wheel drive over the microcontroller serial link.

    Protocol:
        Commands (Pi -> MCU):
            M:<left>,<right>\\n   - each -100..100
            E\\n                  - emergency stop

        Status (MCU -> Pi):
            A:<v0>,<v1>,<v2>\\n   - analog input voltages, 0..5
            E:<error_code>\\n
    """

    def __init__(self, port: str = MCU_PORT, baudrate: int = MCU_BAUDRATE, params=None):
        self.port = port
        self.baudrate = baudrate
        self.params = params

        self._serial: serial.Serial | None = None
        self._left = 0.0
        self._right = 0.0
        self._voltages = [0.0] * ANALOG_CHANNELS
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    @property
    def left(self) -> float:
        return self._left

    @property
    def right(self) -> float:
        return self._right

    @property
    def voltages(self) -> tuple[float, ...]:
        return tuple(self._voltages)

    def voltage(self, channel: int) -> float:
        """Latest voltage reported for an analog channel."""
        return self._voltages[channel]

    def connect(self) -> bool:
        """Open serial connection to the microcontroller."""
        try:
            self._serial = serial.Serial(
                port=self.port,
                baudrate=self.baudrate,
                timeout=0.005
            )
            self._connected = True
            logger.info(f"Connected to motor controller on {self.port}")
            return True
        except (serial.SerialException, OSError) as e:
            logger.error(f"Failed to connect to motor controller: {e}")
            self._connected = False
            return False

    def disconnect(self):
        """Close serial connection."""
        if self._serial:
            self.emergency_stop()
            self._serial.close()
            self._serial = None
        self._connected = False
        logger.info("Disconnected from motor controller")

    def drive(self, left: float, right: float):
        """
        Set wheel speeds, then send to the microcontroller.

        Args:
            left: -1.0 to 1.0 (negative = reverse)
            right: -1.0 to 1.0 (right motor is mirrored)
        """
        self._left = max(-1.0, min(1.0, left))
        self._right = max(-1.0, min(1.0, right))
        self._send_command()

    def apply(self, action: Action):
        """Drive with the fixed wheel speeds of an action."""
        self.drive(*action.wheel_speeds)

    def stop(self):
        """Stop both wheels."""
        self.drive(0, 0)
        logger.info("Motors stopped")

    def emergency_stop(self):
        """Emergency stop - sends E command."""
        if self._serial:
            self._serial.write(b"E\n")
            self._left = 0.0
            self._right = 0.0
            logger.warning("EMERGENCY STOP")

    def update(self) -> bool:
        """
        Drain status from the microcontroller (non-blocking).

        Call this every tick before reading sensors. Every queued line is
        consumed so the voltages are the newest reported.

        Returns:
            True if any status line was received
        """
        received = False
        while self._serial and self._serial.in_waiting:
            if not self._read_status():
                break
            received = True
        return received

    def _read_status(self) -> bool:
        """Read and apply one status line."""
        try:
            line = self._serial.readline().decode(errors="ignore").strip()

            if line.startswith("A:"):
                # Analog: A:<v0>,<v1>,<v2>
                parts = line[2:].split(",")
                if len(parts) >= ANALOG_CHANNELS:
                    self._voltages = [float(p) for p in parts[:ANALOG_CHANNELS]]
                return True

            elif line.startswith("E:"):
                error_code = line[2:]
                logger.error(f"Motor controller error: {error_code}")
                return True

            # Unknown line, keep draining
            return bool(line)

        except (serial.SerialException, ValueError) as e:
            logger.error(f"Error reading motor controller status: {e}")
            # Flush the input buffer to avoid getting stuck in a read loop
            if self._serial:
                self._serial.reset_input_buffer()

        return False

    def _command_value(self, speed: float) -> int:
        power = self.params.motor_power if self.params else MOTOR_MAX_COMMAND
        return int(round(speed * power))

    def _send_command(self):
        """Send current wheel speeds to the microcontroller."""
        if not self._serial:
            logger.warning("Not connected to motor controller")
            return

        command = f"M:{self._command_value(self._left)},{self._command_value(self._right)}\n"
        self._serial.write(command.encode())
        logger.debug(f"Sent: {command.strip()}")

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.disconnect()
