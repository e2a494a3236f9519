"""
Web server - aiohttp application for the operator interface.
"""

import logging

from aiohttp import web

from maze_robot.config import WEB_HOST, WEB_PORT
from maze_robot.params import PARAMS_FILE

logger = logging.getLogger(__name__)


class WebServer:
    """
    Operator web interface server.

    Provides:
    - Autonomous mode chooser (Solve Maze / Replay Last Maze)
    - Start/stop of the autonomous session
    - Robot and stored run status
    - Parameter tuning
    """

    def __init__(self, controller=None, params_file=PARAMS_FILE):
        """
        Args:
            controller: Optional Controller instance for live data
            params_file: Where POST /api/params saves to
        """
        self.controller = controller
        self.params_file = params_file
        self.app = web.Application()
        self._setup_routes()
        self.app.on_cleanup.append(self._on_cleanup)

    def _setup_routes(self):
        """Configure routes."""
        self.app.router.add_get("/api/status", self.api_status)

        # Mode chooser
        self.app.router.add_get("/api/mode", self.api_mode_get)
        self.app.router.add_post("/api/mode", self.api_mode_set)

        # Autonomous session
        self.app.router.add_post("/api/auto/start", self.api_auto_start)
        self.app.router.add_post("/api/auto/stop", self.api_auto_stop)

        # Stored run
        self.app.router.add_get("/api/run", self.api_run)

        # Runtime parameters (thresholds, scaling)
        self.app.router.add_get("/api/params", self.api_params_get)
        self.app.router.add_post("/api/params", self.api_params_set)

    def _no_controller(self):
        return web.json_response({"error": "Controller not available"}, status=404)

    async def _json_object(self, request):
        """Request body as a dict, or None if it is not a JSON object."""
        try:
            data = await request.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None

    def _bad_body(self):
        return web.json_response({"error": "Body must be a JSON object"}, status=400)

    async def api_status(self, request):
        """Get current robot status."""
        if not self.controller:
            return web.json_response({"state": "unknown"})
        return web.json_response(self.controller.status())

    async def api_mode_get(self, request):
        """Get chooser options and current selection."""
        if not self.controller:
            return self._no_controller()
        chooser = self.controller.chooser
        return web.json_response({
            "options": chooser.labels,
            "selected": chooser.selected.value,
        })

    async def api_mode_set(self, request):
        """POST /api/mode - Select the autonomous mode by label."""
        if not self.controller:
            return self._no_controller()
        data = await self._json_object(request)
        if data is None:
            return self._bad_body()
        try:
            kind = self.controller.chooser.select(data.get("mode"))
        except ValueError as e:
            return web.json_response({"error": str(e)}, status=400)
        logger.info(f"Autonomous mode set to {kind.value}")
        return web.json_response({"ok": True, "selected": kind.value})

    async def api_auto_start(self, request):
        """POST /api/auto/start - Start an autonomous session."""
        if not self.controller:
            return self._no_controller()
        if self.controller.auto_running:
            return web.json_response({"error": "Session already running"}, status=409)
        await self.controller.start_auto()
        return web.json_response({"ok": True, **self.controller.status()})

    async def api_auto_stop(self, request):
        """POST /api/auto/stop - Disable the robot."""
        if not self.controller:
            return self._no_controller()
        await self.controller.stop_auto()
        return web.json_response({"ok": True, **self.controller.status()})

    async def api_run(self, request):
        """Get the stored (optimized) run."""
        if not self.controller:
            return self._no_controller()
        run = self.controller.run_store.run
        return web.json_response({"movements": run.names(), "length": len(run)})

    async def api_params_get(self, request):
        """Get runtime parameters."""
        if not self.controller:
            return self._no_controller()
        return web.json_response(self.controller.params.to_dict())

    async def api_params_set(self, request):
        """Update runtime parameters, optionally persisting them."""
        if not self.controller:
            return self._no_controller()
        data = await self._json_object(request)
        if data is None:
            return self._bad_body()
        save = data.pop("save", False)
        params = self.controller.params
        params.update(**data)
        if save:
            params.save(self.params_file)
        return web.json_response(params.to_dict())

    async def _on_cleanup(self, app):
        """Stop any running session when the server shuts down."""
        if self.controller and self.controller.auto_running:
            await self.controller.stop_auto()


def create_app(controller=None, params_file=PARAMS_FILE) -> web.Application:
    """Create the web application."""
    server = WebServer(controller, params_file)
    return server.app


async def run_server(controller=None, host=WEB_HOST, port=WEB_PORT, params_file=PARAMS_FILE):
    """Run the web server."""
    app = create_app(controller, params_file)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    await site.start()
    logger.info(f"Web server running at http://{host}:{port}")
    return runner
