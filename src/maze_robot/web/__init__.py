"""
Web Layer - Operator interface.

Provides:
- Autonomous mode chooser
- Session start/stop
- Stored run and status view
- Parameter tuning
"""

from .server import create_app, run_server

__all__ = ["create_app", "run_server"]
