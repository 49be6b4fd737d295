"""
Assistant Server Application Entry Point

Builds the FastAPI app: exception handlers, the health, chat and
extraction routers, and a startup hook that loads the knowledge base,
intents and abbreviations before the first request is served.

Tests import `app` and swap collaborators through
`app.dependency_overrides`.
"""

from __future__ import annotations

import logging
from fastapi import FastAPI

from .config import settings
from .core.errors import (
    DocumentSourceError,
    document_source_exception_handler,
    unhandled_exception_handler,
)

from .api import (
    chat_routes,
    extraction_routes,
    health_routes,
)
from .api.dependencies import get_abbreviation_expander, get_assistant_state


logger = logging.getLogger("bothn.app")


# ---------------------------------------------------------------------
# Application Factory (Test-Friendly)
# ---------------------------------------------------------------------

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns
    -------
    FastAPI
        Fully configured FastAPI application.
    """
    logging.getLogger("bothn").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="bothn-server",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # --------------------------------------------------------------
    # Global Exception Handling
    # --------------------------------------------------------------

    app.add_exception_handler(DocumentSourceError, document_source_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # --------------------------------------------------------------
    # Router Registration
    # --------------------------------------------------------------

    app.include_router(health_routes.router)
    app.include_router(chat_routes.router)
    app.include_router(extraction_routes.router)

    # --------------------------------------------------------------
    # Startup Validation Hook
    # --------------------------------------------------------------

    @app.on_event("startup")
    async def _startup_validation() -> None:
        """
        Load the static assistant data now (not at first use), so a broken
        data file stops the server instead of failing the first chat.
        """
        logger.info("Starting bothn-server")

        state = get_assistant_state()
        expander = get_abbreviation_expander()

        logger.info(
            "Assistant data loaded: %d Q&A pairs, %d intents, %d abbreviations",
            len(state.knowledge_base),
            len(state.intents),
            len(expander),
        )

    @app.on_event("shutdown")
    async def _shutdown_cleanup() -> None:
        logger.info("Shutting down bothn-server")

    return app


# ---------------------------------------------------------------------
# Default Application Instance (for Uvicorn/Gunicorn)
# ---------------------------------------------------------------------

app = create_app()
