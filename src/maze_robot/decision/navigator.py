"""
Navigation decision strategies.

Takes the current Measurement and returns (action, completed). A strategy
only decides: the caller applies the action to the motors and records it
in the movement log.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from maze_robot.decision.actions import Action
from maze_robot.params import Parameters
from maze_robot.perception import Measurement

logger = logging.getLogger(__name__)


class NavigationStrategy(ABC):
    """Base class for maze navigation algorithms."""

    @abstractmethod
    def decide(self, measurement: Measurement) -> tuple[Action, bool]:
        """
        Decide the action for one tick.

        Args:
            measurement: This tick's sensor snapshot.

        Returns:
            (action, completed) tuple. completed is True once the
            maze exit has been reached.
        """
        ...


class DistanceTierNavigator(NavigationStrategy):
    """
    Forward-progress heuristic from a single distance sensor.

    Priority:
    1. Either reflectance on boundary tape -> STOP, maze complete
    2. Distance >= forward_clear_mm -> FORWARD
    3. Distance <= backup_distance_mm -> BACKUP
    4. Anything in between -> TURN_RIGHT

    Stateless: thresholds are read from params on every call so web
    tuning applies on the next tick.
    """

    def __init__(self, params: Parameters | None = None):
        self.params = params or Parameters()

    def decide(self, measurement: Measurement) -> tuple[Action, bool]:
        if measurement.on_boundary(self.params.reflectance_threshold):
            logger.debug(
                f"Boundary tape L={measurement.left_reflectance:.2f}V "
                f"R={measurement.right_reflectance:.2f}V"
            )
            return Action.STOP, True

        distance = measurement.distance_mm
        if distance >= self.params.forward_clear_mm:
            action = Action.FORWARD
        elif distance <= self.params.backup_distance_mm:
            action = Action.BACKUP
        else:
            action = Action.TURN_RIGHT

        logger.debug(f"dist={distance:.0f}mm -> {action.name}")
        return action, False
