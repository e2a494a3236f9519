"""
Main controller - Coordinates all layers.

Owns the session context (motor, sensors, mode chooser, run store)
and runs the control loop that, once per tick:
1. Reads the microcontroller status (analog voltages)
2. Steps the active session (solve or replay)
3. Sends the resulting action to the motors
"""

from __future__ import annotations

import asyncio
import logging
import signal
from typing import Optional, Union

from maze_robot.config import CONTROL_LOOP_HZ
from maze_robot.control.mode import ModeChooser, SessionKind, select_session_kind
from maze_robot.control.session import ReplaySession, SolveSession
from maze_robot.decision import Action, DistanceTierNavigator, NavigationStrategy
from maze_robot.mission import RunStore
from maze_robot.params import Parameters
from maze_robot.sensors import AnalogSensors, Motor

logger = logging.getLogger(__name__)

Session = Union[SolveSession, ReplaySession]


class Controller:
    """
    Main robot controller.

    Coordinates:
    - Sensor layer (Motor, AnalogSensors)
    - Decision layer (NavigationStrategy)
    - Mission layer (RunStore)
    - Mode selection (ModeChooser)

    Usage:
        controller = Controller()
        asyncio.run(controller.run())

        # Or driven by an external scheduler:
        controller.start_session()
        while not controller.session.finished:
            controller.tick()
        controller.stop_session()
    """

    def __init__(
        self,
        params: Parameters | None = None,
        motor: Motor | None = None,
        sensors: AnalogSensors | None = None,
        run_store: RunStore | None = None,
        navigator: NavigationStrategy | None = None,
        chooser: ModeChooser | None = None,
    ):
        # Runtime parameters (shared, tunable via web)
        self.params = params or Parameters.load()

        # Hardware
        self.motor = motor or Motor(params=self.params)
        self.sensors = sensors or AnalogSensors(self.motor.voltage, self.params)

        # Decision + stored run
        self.navigator = navigator or DistanceTierNavigator(self.params)
        self.run_store = run_store or RunStore()
        self.chooser = chooser or ModeChooser()

        # Active autonomous session
        self.session: Optional[Session] = None
        self.last_action = Action.STOP

        # Control state
        self._running = False
        self._loop_count = 0
        self._auto_task: Optional[asyncio.Task] = None

    @property
    def auto_running(self) -> bool:
        return self._auto_task is not None and not self._auto_task.done()

    # --- Session lifecycle ---

    def start_session(self, requested: SessionKind | None = None) -> Session:
        """
        Pick solve or replay for this autonomous session and start it.

        Args:
            requested: Mode to run, defaults to the chooser selection
        """
        requested = requested or self.chooser.selected
        kind = select_session_kind(requested, self.run_store.has_run)
        if kind != requested:
            logger.warning("Replay requested but no saved run, solving instead")

        if kind == SessionKind.REPLAY:
            self.session = ReplaySession(self.run_store)
        else:
            self.session = SolveSession(self.navigator, self.run_store)
        self.session.start()
        self.last_action = Action.STOP
        self._loop_count = 0
        return self.session

    def tick(self) -> Action:
        """One control period: step the session and drive the motors."""
        if self.session is None:
            raise RuntimeError("No autonomous session started")

        self.motor.update()
        action = self.session.tick(self.sensors.read)
        self.motor.apply(action)
        self.last_action = action
        self._loop_count += 1
        return action

    def stop_session(self):
        """Disable: stop the motors and drop any unfinished solve."""
        if self.session is not None:
            self.session.abort()
        self.motor.stop()
        self.last_action = Action.STOP

    # --- Loop ---

    async def run_session(self, requested: SessionKind | None = None):
        """Run one autonomous session at CONTROL_LOOP_HZ until it ends."""
        period = 1.0 / CONTROL_LOOP_HZ
        session = self.start_session(requested)
        self._running = True

        try:
            while self._running and not session.finished:
                loop_start = asyncio.get_event_loop().time()

                self.tick()

                elapsed = asyncio.get_event_loop().time() - loop_start
                await asyncio.sleep(max(0, period - elapsed))

                # Log stats periodically
                if self._loop_count % (CONTROL_LOOP_HZ * 5) == 0:  # Every 5 seconds
                    self._log_stats()

            if session.finished:
                logger.info(f"{session.kind.value} finished after {self._loop_count} ticks")
        finally:
            self._running = False
            self.stop_session()

    async def start_auto(self, requested: SessionKind | None = None):
        """Start an autonomous session as a background task."""
        if self.auto_running:
            raise RuntimeError("Autonomous session already running")
        self._auto_task = asyncio.ensure_future(self._auto_loop(requested))
        # Let the task start its session before returning
        await asyncio.sleep(0)
        logger.info("Auto mode started")

    async def _auto_loop(self, requested: SessionKind | None):
        """Background session (runs as asyncio task)."""
        try:
            await self.run_session(requested)
        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error(f"Auto loop error: {e}", exc_info=True)
            # Session may have failed before run_session could stop it
            self._running = False
            self.stop_session()

    async def stop_auto(self):
        """Stop the background autonomous session."""
        self._running = False
        if self._auto_task:
            self._auto_task.cancel()
            try:
                await self._auto_task
            except asyncio.CancelledError:
                pass
            self._auto_task = None
        logger.info("Auto mode stopped")

    async def run(self, requested: SessionKind | None = None):
        """Connect hardware, run a single session, then clean up."""
        logger.info("Controller starting...")

        # Setup signal handlers for graceful shutdown
        loop = asyncio.get_event_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, self._shutdown)

        try:
            if not self._init_hardware():
                logger.error("Failed to initialize hardware")
                return

            logger.info("Entering main control loop")
            await self.run_session(requested)

        except Exception as e:
            logger.error(f"Controller error: {e}")
            raise
        finally:
            self._cleanup()

    def _init_hardware(self) -> bool:
        """Initialize all hardware."""
        logger.info("Initializing hardware...")
        if not self.motor.connect():
            logger.error("Failed to connect to motor controller")
            return False
        logger.info("Hardware initialized")
        return True

    def _cleanup(self):
        """Cleanup on shutdown."""
        logger.info("Cleaning up...")
        self._running = False
        if self.motor.is_connected:
            self.motor.stop()
            self.motor.disconnect()
        logger.info("Cleanup complete")

    def _shutdown(self):
        """Handle shutdown signal."""
        logger.info("Shutdown requested")
        self._running = False

    def _log_stats(self):
        """Log periodic statistics."""
        session = self.session
        recorded = len(session.log) if isinstance(session, SolveSession) else 0
        logger.info(
            f"Loop {self._loop_count}: "
            f"Mode={session.kind.value}, "
            f"State={session.state.name}, "
            f"Recorded={recorded}, "
            f"Action={self.last_action.name}"
        )

    def status(self) -> dict:
        """Snapshot for the web API."""
        session = self.session
        return {
            "mode": self.chooser.selected.value,
            "session": session.kind.value if session else None,
            "state": session.state.name if session else "IDLE",
            "running": self.auto_running,
            "recorded": len(session.log) if isinstance(session, SolveSession) else 0,
            "stored_run": len(self.run_store.run),
            "last_action": self.last_action.name,
            "ticks": self._loop_count,
        }
