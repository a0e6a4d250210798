#!/usr/bin/env python3
"""
Scripts for running the API server.
"""

import logging

import uvicorn

from travel_assistant.config import get_settings

logger = logging.getLogger(__name__)


def run_backend():
    """Run the Travel Assistant API server."""
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
    logger.info(
        f"Servidor MCP en funcionamiento en http://localhost:{settings.port}"
    )

    uvicorn.run(
        "travel_assistant.api:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run_backend()
