#!/usr/bin/env python3

"""
Startup script for the Airspace Explorer mock API server.
"""

import argparse
import logging
import sys
from pathlib import Path

import uvicorn

from airspace_explorer.web.server.config import Settings, LOG_FORMAT
from airspace_explorer.web.server.main import create_app

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    defaults = Settings.from_env()

    parser = argparse.ArgumentParser(description="Serve the synthetic airspace dataset over HTTP")
    parser.add_argument("--data", default=defaults.data_path,
                        help=f"Path to the generated dataset (default: {defaults.data_path})")
    parser.add_argument("--host", default=defaults.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=defaults.port, help="Port to listen on")
    parser.add_argument("--simulate-latency", action="store_true", default=defaults.simulate_latency,
                        help="Delay responses by a random 50-600ms to mimic a remote API")
    parser.add_argument("--log-level", default=defaults.log_level, help="Logging level")
    args = parser.parse_args(argv)

    args.settings = Settings(
        data_path=args.data,
        host=args.host,
        port=args.port,
        log_level=args.log_level.upper(),
        simulate_latency=args.simulate_latency,
        allowed_origins=defaults.allowed_origins,
    )
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = args.settings

    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO), format=LOG_FORMAT)

    if not Path(settings.data_path).is_file():
        logger.error(f"Dataset file '{settings.data_path}' not found")
        logger.error("Generate one with: python example/generate_airspaces.py --output airspaceData.json")
        return 1

    logger.info(f"Mock airspace server running on http://{settings.host}:{settings.port}")
    logger.info("Available endpoints:")
    logger.info("  GET /api/airspaces?north=&south=&east=&west=")
    logger.info("  GET /api/airspaces/{id}")
    logger.info("  GET /api/health")
    logger.info("  GET /api/statistics/overview")

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
