"""Read-only author pages."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from catalog.commands.author_commands import GetAuthorCommand, GetAuthorsCommand
from catalog.constants import CATALOG_URL_PREFIX
from catalog.dependencies import AuthorRepoDep
from catalog.utils.error_handler import handle_http_errors
from catalog.views import render

router = APIRouter(prefix=CATALOG_URL_PREFIX, tags=["authors"])


@router.get("/authors", response_class=HTMLResponse, summary="List authors")
@handle_http_errors
async def author_list(request: Request, repo: AuthorRepoDep) -> HTMLResponse:
    authors = await GetAuthorsCommand(repo).execute()
    return render(
        request, "author_list", title="Author List", author_list=authors
    )


@router.get(
    "/author/{author_id}", response_class=HTMLResponse, summary="Author detail"
)
@handle_http_errors
async def author_detail(
    request: Request, author_id: int, repo: AuthorRepoDep
) -> HTMLResponse:
    author = await GetAuthorCommand(repo).execute(author_id)
    return render(request, "author_detail", title="Author Detail", author=author)
