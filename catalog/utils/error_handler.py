"""
Error handling for the HTML endpoints.

This is the generic fault boundary of the catalog: AppException instances
and store failures raised anywhere below a handler are turned into the
``error`` view with the message and status code, instead of each handler
repeating its own try/except blocks. Nothing is retried.

Two layers share the same rendering:

- ``handle_http_errors`` wraps individual endpoints.
- ``register_exception_handlers`` installs app-wide handlers for failures
  raised outside an endpoint body, e.g. while a dependency opens or
  commits its database session.
"""

from functools import wraps
from typing import Any, Callable

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError

from catalog.exceptions import AppException, DatabaseError
from catalog.logging import logger
from catalog.views import render

DATABASE_ERROR_MSG = "Database error occurred"

# asyncpg reports refused or dropped connections as OSError subclasses
# (ConnectionRefusedError, ConnectionResetError) that SQLAlchemy does not wrap
STORE_ERRORS = (SQLAlchemyError, OSError)


def render_error(request: Request, ex: AppException) -> HTMLResponse:
    """
    Render the error view for an application exception.

    Args:
        request: Current request.
        ex: Exception carrying message and http_status.

    Returns:
        Error page with the exception's status code.
    """
    return render(
        request,
        "error",
        status_code=ex.http_status,
        title="Error",
        message=ex.message,
        status=ex.http_status,
    )


def render_store_error(request: Request, ex: Exception) -> HTMLResponse:
    """Log a store failure with its traceback and render the generic 500 page."""
    logger.error(f"Database error on {request.url.path}: {ex}", exc_info=ex)
    return render_error(request, DatabaseError(DATABASE_ERROR_MSG))


def handle_http_errors(func: Callable) -> Callable:
    """
    Decorator for HTML endpoints converting failures into the error view.

    The wrapped endpoint must accept ``request: Request``.

    Args:
        func: The HTTP endpoint function to wrap.

    Returns:
        Wrapped function that handles exceptions.

    Example:
        ```python
        @router.get("/genre/{genre_id}")
        @handle_http_errors
        async def genre_detail(request: Request, genre_id: int, ...):
            detail = await GetGenreDetailCommand(...).execute(genre_id)
            return render(request, "genre_detail", ...)
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        request: Request = kwargs["request"]
        try:
            return await func(*args, **kwargs)
        except AppException as ex:
            logger.warning(
                f"AppException in {func.__name__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            return render_error(request, ex)
        except STORE_ERRORS as ex:
            return render_store_error(request, ex)

    return wrapper


async def app_exception_handler(
    request: Request, ex: AppException
) -> HTMLResponse:
    logger.warning(
        f"AppException on {request.url.path}: {ex.message}",
        extra={"exception_type": type(ex).__name__},
    )
    return render_error(request, ex)


async def store_exception_handler(
    request: Request, ex: Exception
) -> HTMLResponse:
    return render_store_error(request, ex)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the error view as the app-wide handler for catalog failures.

    Args:
        app: Application to configure.
    """
    app.add_exception_handler(AppException, app_exception_handler)
    for exc_class in STORE_ERRORS:
        app.add_exception_handler(exc_class, store_exception_handler)
