"""
Mission layer - recording, optimizing and replaying maze runs.
"""

from .movement_log import LogState, MovementLog, MovementLogError
from .optimizer import RunSequence, optimize
from .replay import ReplayEngine
from .run_store import RunStore

__all__ = [
    "LogState",
    "MovementLog",
    "MovementLogError",
    "RunSequence",
    "optimize",
    "ReplayEngine",
    "RunStore",
]
