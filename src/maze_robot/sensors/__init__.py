"""
Sensor Layer - Hardware interfaces.

Provides access to the robot hardware:
- Motor: Microcontroller link for wheel commands and analog voltages
- AnalogSensors: Ultrasonic distance + left/right reflectance
"""

from .analog import AnalogSensors
from .motor import Motor

__all__ = ["AnalogSensors", "Motor"]
