"""Entry point for the Agri Ledger API server.

Serves ``agri_ledger_api.app.main:app`` with Uvicorn.  It is intended
to be executed from the project root, e.g. under Docker, where you
only specify a single Python file to run.

Configuration is read from environment variables: ``HOST`` and
``PORT`` for the listener, ``DATABASE_URL`` for the SQLite file and
``LOG_LEVEL`` / ``LOG_FILE`` for logging.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from agri_ledger_api.app.core.config import settings
from agri_ledger_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger("agri_ledger_api").info("Starting Agri Ledger API on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
