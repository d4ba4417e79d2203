"""
Main entry point for the Tube Times helper.
Author: Oliver Ernster

This module sets up logging, loads the configuration, runs one arrivals
and one line status request, and prints the payloads as JSON.
"""

import asyncio
import json
import logging
import os
import sys
from pathlib import Path

from src.managers.tube_config import ConfigurationError, TubeConfigFactory
from src.managers.tube_times_helper import TubeTimesHelper
from version import __app_name__, get_version_string


def setup_logging():
    """Setup application logging with file and console output."""
    # Create log directory in user's home directory
    if sys.platform == "darwin":  # macOS
        log_dir = Path.home() / "Library" / "Logs" / __app_name__
    elif sys.platform == "win32":  # Windows
        log_dir = Path(os.environ.get("APPDATA", Path.home())) / __app_name__ / "logs"
    else:  # Linux and others
        log_dir = Path.home() / ".local" / "share" / "tubetimes" / "logs"

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "tube_times.log"

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(str(log_file)), logging.StreamHandler()],
    )

    # Set specific log levels for different modules
    logging.getLogger("src.api").setLevel(logging.INFO)
    logging.getLogger("src.managers").setLevel(logging.INFO)


async def run_once(helper: TubeTimesHelper) -> dict:
    """Run one request per configured flow and collect the payloads."""
    config = helper.config
    results = {}

    try:
        if config.stop_point_id:
            results["arrivals"] = await helper.get_tube_times(config.arrivals_url())
        if config.line_id:
            results["line_status"] = await helper.get_tube_line_status(
                config.line_status_url()
            )
    finally:
        await helper.shutdown()

    return results


def main():
    """Main application entry point."""
    setup_logging()
    logger = logging.getLogger(__name__)

    try:
        if len(sys.argv) > 1:
            config = TubeConfigFactory.load_from_file(sys.argv[1])
        else:
            config = TubeConfigFactory.create_default_config()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    if not (config.stop_point_id or config.line_id):
        logger.error("Nothing to fetch: set stop_point_id and/or line_id")
        return 1

    helper = TubeTimesHelper(config)
    helper.start()
    logger.info(f"Starting {get_version_string()}")

    results = asyncio.run(run_once(helper))
    print(json.dumps(results, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
