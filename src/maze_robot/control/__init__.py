"""
Control Layer - Execution.

Main control loop, autonomous sessions and mode selection.
"""

from .controller import Controller
from .mode import ModeChooser, SessionKind, select_session_kind
from .session import ReplaySession, SessionState, SolveSession

__all__ = [
    "Controller",
    "ModeChooser",
    "SessionKind",
    "select_session_kind",
    "ReplaySession",
    "SessionState",
    "SolveSession",
]
