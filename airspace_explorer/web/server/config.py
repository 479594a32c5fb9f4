#!/usr/bin/env python3

"""
Configuration for the airspace query server.

Values come from environment variables so the same app can run locally,
in tests and behind a reverse proxy.
"""

import os
from dataclasses import dataclass, field
from typing import List, Tuple

DEFAULT_DATA_PATH = "airspaceData.json"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3001

# Simulated response latency ranges in seconds (list, detail)
LIST_LATENCY_RANGE = (0.1, 0.6)
DETAIL_LATENCY_RANGE = (0.05, 0.25)

# Logging Configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Security Headers
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: List[str]) -> List[str]:
    value = os.getenv(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Runtime settings of the query server."""

    data_path: str = DEFAULT_DATA_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    simulate_latency: bool = False
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    list_latency_range: Tuple[float, float] = LIST_LATENCY_RANGE
    detail_latency_range: Tuple[float, float] = DETAIL_LATENCY_RANGE

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from AIRSPACE_DATA, HOST, PORT, LOG_LEVEL, SIMULATE_LATENCY and ALLOWED_ORIGINS."""
        return cls(
            data_path=os.getenv("AIRSPACE_DATA", DEFAULT_DATA_PATH),
            host=os.getenv("HOST", DEFAULT_HOST),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            simulate_latency=_env_bool("SIMULATE_LATENCY"),
            allowed_origins=_env_list("ALLOWED_ORIGINS", ["*"]),
        )
