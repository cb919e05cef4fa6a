# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from catalog.logging import logger
from catalog.middlewares.correlation_id import CorrelationIDMiddleware
from catalog.middlewares.logging_context import LoggingContextMiddleware
from catalog.routing import collect_subrouters
from catalog.storage.db import engine, wait_and_init_db
from catalog.utils.error_handler import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application startup and shutdown.

    Startup waits for the database and creates the catalog tables;
    shutdown closes every pooled database connection.
    """
    logger.info("Application startup initiated")
    await wait_and_init_db()
    logger.info("Initialized database and tables")

    yield

    logger.info("Application shutdown initiated")
    await engine.dispose()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    Sets up:
    - Lifespan handler: database readiness on startup, engine disposal on
      shutdown.
    - Routers collected by ``catalog.routing.collect_subrouters()``.
    - Exception handlers rendering the error view for failures raised
      outside an endpoint body (``register_exception_handlers``).
    - Middlewares: ``CorrelationIDMiddleware`` and
      ``LoggingContextMiddleware``.
    """
    app = FastAPI(
        title="Local Library",
        description="Catalog of books, authors and genres",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(collect_subrouters())
    register_exception_handlers(app)

    # Middlewares execute in REVERSE order of registration:
    # CorrelationIDMiddleware → LoggingContextMiddleware → routes
    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    return app


app = application()  # Need for fastapi cli
