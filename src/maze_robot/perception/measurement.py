"""
Measurement - one tick's sensor snapshot.

Produced fresh by the sensor reader every tick and consumed by the
navigator. Never mutated and never kept past the tick that made it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Measurement:
    """Semantic sensor readings for a single tick."""

    distance_mm: float  # Forward obstacle distance
    left_reflectance: float  # Raw volts, low = light surface
    right_reflectance: float  # Raw volts, low = light surface

    def on_boundary(self, threshold: float) -> bool:
        """Check if either wheel sensor sits on light boundary tape."""
        return self.left_reflectance <= threshold or self.right_reflectance <= threshold
