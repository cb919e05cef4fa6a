import os
import pkgutil
from importlib import import_module
from typing import Iterable, Iterator

from fastapi import APIRouter
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute

from catalog.logging import logger

# Track registered modules to prevent duplicate logging
_registered_http_modules: set[str] = set()


def collect_subrouters() -> APIRouter:
    """
    Collect the routers of every module under ``api/http``.

    Each module in that directory must expose a module-level ``router``.
    Adding a page group therefore only needs a new module there.

    Returns:
        APIRouter including every discovered router.
    """
    main_router: APIRouter = APIRouter()

    app_dir = os.path.dirname(__file__)
    app_name = os.path.basename(app_dir)

    for _, module, _ in pkgutil.iter_modules([f"{app_dir}/api/http"]):
        api = import_module(f".{module}", package=f"{app_name}.api.http")
        main_router.include_router(api.router)

        if module not in _registered_http_modules:
            logger.info(f'Register "{module}" api')
            _registered_http_modules.add(module)

    return main_router


def iter_api_routes(
    routes: Iterable[BaseRoute], prefix: str = ""
) -> Iterator[tuple[str, APIRoute]]:
    """
    Yield every APIRoute reachable from routes with its full path.

    Older FastAPI releases copy the routes of an included router into the
    parent; newer ones keep a single node per included router that holds
    the original router and the include prefix. Both layouts are walked.

    Args:
        routes: Routes of an application or router.
        prefix: Path prefix accumulated from enclosing includes.

    Yields:
        Tuples of (path, route).
    """
    for route in routes:
        if isinstance(route, APIRoute):
            yield prefix + route.path, route
            continue

        included = getattr(route, "original_router", None)
        if included is not None:
            context = getattr(route, "include_context", None)
            yield from iter_api_routes(
                included.routes, prefix + getattr(context, "prefix", "")
            )
