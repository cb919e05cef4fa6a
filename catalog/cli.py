"""
CLI tool for catalog management.

Provides commands for listing the registered HTTP routes and for creating
the database tables outside of the web process.
"""

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="catalog-cli",
    help="Local Library catalog management CLI",
    add_completion=False,
)
console = Console()


@typer_app.command(name="routes")
def routes():
    """
    Display a table of all registered HTTP routes.

    Example:
        catalog-cli routes
    """
    from catalog import app
    from catalog.routing import iter_api_routes

    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Registered HTTP Routes[/bold cyan]",
            border_style="cyan",
        )
    )
    console.print()

    table = Table(
        "Methods",
        "Path",
        "Handler Path",
        title="Catalog Routes",
        show_lines=True,
    )

    api_routes = sorted(iter_api_routes(app.routes), key=lambda r: r[0])
    for path, route in api_routes:
        handler_path = (
            f"{route.endpoint.__module__}."
            f"[yellow]{route.endpoint.__name__}[/yellow]"
        )
        table.add_row(
            f"[green]{', '.join(sorted(route.methods))}[/green]",
            path,
            handler_path,
        )

    console.print(table)
    console.print()
    console.print(f"[bold]Summary:[/bold] {len(api_routes)} routes registered")
    console.print()


@typer_app.command(name="init-db")
def init_db(
    retries: int = typer.Option(
        None,
        "--retries",
        "-r",
        help="Maximum connection attempts (defaults to DB_INIT_MAX_RETRIES)",
    ),
):
    """
    Wait for the database and create the catalog tables.

    Example:
        catalog-cli init-db --retries 10
    """
    from catalog.storage.db import engine, wait_and_init_db

    async def run() -> None:
        try:
            await wait_and_init_db(max_retries=retries)
        finally:
            await engine.dispose()

    try:
        asyncio.run(run())
    except RuntimeError as e:
        console.print(
            Panel.fit(
                f"[red]Database initialization failed[/red]\n\n{e}",
                border_style="red",
                title="Error",
            )
        )
        raise typer.Exit(code=1)

    console.print(
        Panel.fit(
            "[green]✓ Catalog tables are ready[/green]",
            border_style="green",
            title="Success",
        )
    )


if __name__ == "__main__":
    typer_app()
