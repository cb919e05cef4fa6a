"""
Genre pages: list, detail, create, delete and update.

Handlers only parse the request, run the validation stage or a command,
and render a view or redirect. Business rules live in
catalog.commands.genre_commands; failures are rendered by
``handle_http_errors``.
"""

from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from catalog.commands.genre_commands import (
    CreateGenreCommand,
    CreateGenreInput,
    DeleteGenreCommand,
    DeleteOutcome,
    GetGenreCommand,
    GetGenreDeleteInfoCommand,
    GetGenreDetailCommand,
    GetGenresCommand,
    UpdateGenreCommand,
    UpdateGenreInput,
)
from catalog.constants import CATALOG_URL_PREFIX, GENRE_LIST_URL
from catalog.dependencies import BookRepoDep, GenreRepoDep
from catalog.utils.error_handler import handle_http_errors
from catalog.validation import validate_genre_form
from catalog.views import redirect, render

router = APIRouter(prefix=CATALOG_URL_PREFIX, tags=["genres"])

NameField = Annotated[str | None, Form()]

CREATE_TITLE = "Create Genre"
UPDATE_TITLE = "Update Genre"
DELETE_TITLE = "Delete Genre"


@router.get("/genres", response_class=HTMLResponse, summary="List genres")
@handle_http_errors
async def genre_list(request: Request, repo: GenreRepoDep) -> HTMLResponse:
    genres = await GetGenresCommand(repo).execute()
    return render(
        request, "genre_list", title="Genre List", genre_list=genres
    )


@router.get(
    "/genre/create", response_class=HTMLResponse, summary="Genre create form"
)
async def genre_create_get(request: Request) -> HTMLResponse:
    return render(request, "genre_form", title=CREATE_TITLE)


@router.post("/genre/create", response_model=None, summary="Create a genre")
@handle_http_errors
async def genre_create_post(
    request: Request,
    repo: GenreRepoDep,
    name: NameField = None,
) -> HTMLResponse | RedirectResponse:
    """
    Create a genre from the submitted form.

    Invalid input re-renders the form with the sanitized value and the
    itemized errors (status 200, nothing stored). A name that already
    exists redirects to the existing genre instead of creating another.
    """
    result = validate_genre_form(name)
    if not result.is_valid:
        return render(
            request,
            "genre_form",
            title=CREATE_TITLE,
            genre_name=result.value,
            errors=result.errors,
        )

    created = await CreateGenreCommand(repo).execute(
        CreateGenreInput(name=result.value)
    )
    return redirect(created.genre.url)


@router.get(
    "/genre/{genre_id}", response_class=HTMLResponse, summary="Genre detail"
)
@handle_http_errors
async def genre_detail(
    request: Request,
    genre_id: int,
    genre_repo: GenreRepoDep,
    book_repo: BookRepoDep,
) -> HTMLResponse:
    detail = await GetGenreDetailCommand(genre_repo, book_repo).execute(
        genre_id
    )
    return render(
        request,
        "genre_detail",
        title="Genre Detail",
        genre=detail.genre,
        genre_books=detail.books,
    )


@router.get(
    "/genre/{genre_id}/delete",
    response_model=None,
    summary="Genre delete confirmation",
)
@handle_http_errors
async def genre_delete_get(
    request: Request,
    genre_id: int,
    genre_repo: GenreRepoDep,
    book_repo: BookRepoDep,
) -> HTMLResponse | RedirectResponse:
    info = await GetGenreDeleteInfoCommand(genre_repo, book_repo).execute(
        genre_id
    )
    if info is None:
        return redirect(GENRE_LIST_URL)

    return render(
        request,
        "genre_delete",
        title=DELETE_TITLE,
        genre=info.genre,
        books=info.books,
    )


@router.post(
    "/genre/{genre_id}/delete", response_model=None, summary="Delete a genre"
)
@handle_http_errors
async def genre_delete_post(
    request: Request,
    genre_id: int,
    genre_repo: GenreRepoDep,
    book_repo: BookRepoDep,
) -> HTMLResponse | RedirectResponse:
    """
    Delete the genre named by the path.

    While books still reference the genre the confirmation page is shown
    again with those books and nothing is deleted.
    """
    result = await DeleteGenreCommand(genre_repo, book_repo).execute(genre_id)
    if result.outcome == DeleteOutcome.BLOCKED:
        return render(
            request,
            "genre_delete",
            title=DELETE_TITLE,
            genre=result.genre,
            books=result.books,
        )
    return redirect(GENRE_LIST_URL)


@router.get(
    "/genre/{genre_id}/update",
    response_class=HTMLResponse,
    summary="Genre update form",
)
@handle_http_errors
async def genre_update_get(
    request: Request, genre_id: int, repo: GenreRepoDep
) -> HTMLResponse:
    genre = await GetGenreCommand(repo).execute(genre_id)
    return render(
        request,
        "genre_form",
        title=UPDATE_TITLE,
        genre=genre,
        genre_name=genre.name,
    )


@router.post(
    "/genre/{genre_id}/update", response_model=None, summary="Rename a genre"
)
@handle_http_errors
async def genre_update_post(
    request: Request,
    genre_id: int,
    repo: GenreRepoDep,
    name: NameField = None,
) -> HTMLResponse | RedirectResponse:
    """
    Rename a genre.

    Names must be alphanumeric here, which is stricter than creation.
    The update is unconditional and always ends on the genre list.
    """
    result = validate_genre_form(name, alphanumeric=True)
    if not result.is_valid:
        return render(
            request,
            "genre_form",
            title=UPDATE_TITLE,
            genre_id=genre_id,
            genre_name=result.value,
            errors=result.errors,
        )

    await UpdateGenreCommand(repo).execute(
        UpdateGenreInput(id=genre_id, name=result.value)
    )
    return redirect(GENRE_LIST_URL)
