#!/usr/bin/env python3
"""
Maze Robot - Main Entry Point

Usage:
    maze-robot                          # Solve once, then exit
    maze-robot --mode replay            # Replay the saved run (solves if none)
    maze-robot --web                    # Operator interface, start/stop from browser
    maze-robot --run-file run.json      # Keep the optimized run between restarts
"""

import argparse
import asyncio
import logging
from pathlib import Path

from maze_robot.config import RUN_FILE, WEB_HOST, WEB_PORT

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Maze Robot Controller")
    parser.add_argument(
        "--web",
        action="store_true",
        help="Enable web interface (mode chooser, start/stop)",
    )
    parser.add_argument(
        "--mode",
        default="solve",
        choices=["solve", "replay"],
        help="Autonomous mode when running without --web",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=WEB_PORT,
        help="Web interface port",
    )
    parser.add_argument(
        "--run-file",
        type=Path,
        default=RUN_FILE,
        help="JSON file for the saved run (default: memory only)",
    )
    parser.add_argument(
        "--params-file",
        type=Path,
        default=None,
        help="JSON file for runtime parameters",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


async def run_web(controller, port, params_file):
    """Serve the operator interface until interrupted."""
    from maze_robot.web import run_server

    if not controller._init_hardware():
        logger.error("Failed to initialize hardware")
        return

    runner = await run_server(controller=controller, host=WEB_HOST, port=port, params_file=params_file)
    logger.info("Press Ctrl+C to stop")
    try:
        while True:
            await asyncio.sleep(1)
    except asyncio.CancelledError:
        pass
    finally:
        if controller.auto_running:
            await controller.stop_auto()
        controller._cleanup()
        await runner.cleanup()


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)

    logger.info("Maze Robot starting...")

    from maze_robot.control import Controller, SessionKind
    from maze_robot.mission import RunStore
    from maze_robot.params import PARAMS_FILE, Parameters

    params_file = args.params_file or PARAMS_FILE
    controller = Controller(
        params=Parameters.load(params_file),
        run_store=RunStore.load(args.run_file),
    )

    if args.web:
        try:
            asyncio.run(run_web(controller, args.port, params_file))
        except KeyboardInterrupt:
            logger.info("Stopped")
    else:
        requested = SessionKind.REPLAY if args.mode == "replay" else SessionKind.SOLVE
        asyncio.run(controller.run(requested))


if __name__ == "__main__":
    main()
