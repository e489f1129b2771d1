"""
Main entrypoint for the Agri Ledger API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` is the composition root:
it owns the ``LedgerState`` (identifier counter plus the four record
stores) and attaches it to ``app.state.ledger`` where the request
dependencies pick it up.  An application instance is created at
import time as ``app`` so it can be served directly, e.g.::

    uvicorn agri_ledger_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.errors import RecordTooLargeError
from .core.logging_config import setup_logging
from .core.state import LedgerState


def create_app(
    app_settings: Optional[Settings] = None,
    state: Optional[LedgerState] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the environment derived defaults.
    state : Optional[LedgerState]
        Pre‑built state, typically from a test fixture.  The caller
        keeps ownership and is responsible for closing it.  When
        omitted, the state is opened from ``database_url`` on startup
        and closed on shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings)
    logger = logging.getLogger(__name__)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.include_router(v1_router, prefix="/api/v1")
    app.state.ledger = state

    @app.exception_handler(RecordTooLargeError)
    async def handle_record_too_large(request: Request, exc: RecordTooLargeError) -> JSONResponse:
        logger.warning("Rejected oversized record on %s: %s", request.url.path, exc.msg)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.msg})

    @app.on_event("startup")
    async def startup_event() -> None:
        if app.state.ledger is None:
            app.state.ledger = LedgerState.open(app_settings.database_url)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        # Only close what startup opened; injected state belongs to the caller.
        if state is None and app.state.ledger is not None:
            app.state.ledger.close()
            app.state.ledger = None

    return app


app = create_app()
