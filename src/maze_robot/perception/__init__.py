"""
Perception Layer - What the robot sees.

- Measurement: Distance + reflectance snapshot for one control tick
"""

from .measurement import Measurement

__all__ = ["Measurement"]
