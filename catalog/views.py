"""
View helpers shared by the HTML routers.

Handlers hand a template name plus a context to ``render`` or finish with
``redirect``; nothing else in the application knows about Jinja2.
"""

from typing import Any

from fastapi import Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from catalog.settings import app_settings

templates = Jinja2Templates(directory=app_settings.TEMPLATES_DIR)


def render(
    request: Request,
    name: str,
    status_code: int = status.HTTP_200_OK,
    **context: Any,
) -> HTMLResponse:
    """
    Render a catalog view.

    Args:
        request: Current request, needed by Jinja2Templates.
        name: View name without extension, e.g. "genre_list".
        status_code: HTTP status of the rendered page.
        **context: Data exposed to the template.

    Returns:
        The rendered template response.
    """
    return templates.TemplateResponse(
        request, f"{name}.html", context, status_code=status_code
    )


def redirect(url: str) -> RedirectResponse:
    """Redirect the browser to url with a GET (303 See Other)."""
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)
