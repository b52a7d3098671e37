"""Entry point for the Contact Directory API.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root.  Host and port come
from the ``HOST`` and ``PORT`` environment variables and default to
``localhost:8000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from contact_directory_api.app.core.config import settings
from contact_directory_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    asyncio.run(run_api())


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
