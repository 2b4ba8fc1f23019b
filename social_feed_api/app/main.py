"""
Main entrypoint for the Social Feed API.

This module assembles the FastAPI application: it sets up logging,
builds the ``Database`` handle, enables CORS for the browser client
and mounts the routes under ``/api``.  The schema is created on
start up.  Run it with::

    uvicorn social_feed_api.app.main:app --reload

or with ``python run.py`` from the project root.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.endpoints.members import MISSING_DATA
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import Database, get_database_path
from .core.logging_config import configure_logging


logger = logging.getLogger(__name__)

# Routes whose failure envelope carries a message for the client to show.
ACCOUNT_PATHS = ("/registro", "/login")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed requests with the client's failure shape instead of a 422.

    Reads degrade to an empty list.  Registration and login get the
    ``Faltan datos`` envelope; other writes a bare ``{"success": false}``.
    """
    logger.info(
        "Rejected malformed request %s %s: %d validation errors",
        request.method,
        request.url.path,
        len(exc.errors()),
    )
    if request.method == "GET":
        return JSONResponse(content=[])
    if request.url.path.rstrip("/").endswith(ACCOUNT_PATHS):
        return JSONResponse(content={"success": False, "message": MISSING_DATA})
    return JSONResponse(content={"success": False})


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use instead of the ones read from the environment;
        tests pass one pointing at a temporary database file.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or default_settings
    configure_logging(config)

    db = Database(get_database_path(config))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.init_schema()
        yield

    app = FastAPI(
        title=config.project_name,
        version=config.api_version,
        debug=config.debug,
        lifespan=lifespan,
    )
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
