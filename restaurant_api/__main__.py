"""
Run the API server.

Usage:
    python -m restaurant_api
"""
from __future__ import annotations

import uvicorn

from .config import DEFAULT_APP_CONFIG, setup_logging


def run_server() -> None:
    setup_logging(DEFAULT_APP_CONFIG)
    uvicorn.run(
        "restaurant_api.app:app",
        host=DEFAULT_APP_CONFIG.host,
        port=DEFAULT_APP_CONFIG.port,
        log_level=DEFAULT_APP_CONFIG.log_level.lower(),
    )


if __name__ == "__main__":
    run_server()
