"""
Decision Layer - What to do.

Contains:
- Action: Discrete drive commands with their wheel-speed mapping
- NavigationStrategy: Swappable per-tick decision algorithms
"""

from .actions import WHEEL_SPEEDS, Action
from .navigator import DistanceTierNavigator, NavigationStrategy

__all__ = ["Action", "WHEEL_SPEEDS", "NavigationStrategy", "DistanceTierNavigator"]
