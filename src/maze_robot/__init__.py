"""
Maze Robot - solve a maze with one distance sensor, then replay the solution.

Layers:
- sensors: Motor link and analog sensor reader
- perception: Per-tick Measurement
- decision: Actions and navigation strategies
- mission: Movement log, optimizer, run store, replay
- control: Sessions, mode selection and the main loop
- web: Operator interface
"""

__version__ = "0.1.0"
