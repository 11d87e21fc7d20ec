"""Command line entry point for running and preparing the service."""

import typer
from rich.console import Console

console = Console()

app = typer.Typer(
    help="Book catalog API tools",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command(name="serve")
def serve(
    host: str | None = typer.Option(None, help="Host to bind, defaults to config"),
    port: int | None = typer.Option(None, help="Port to bind, defaults to config"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option("info", help="Uvicorn log level"),
) -> None:
    """Start the HTTP server."""
    import uvicorn

    from src.catalog.runtime.context import get_config

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        access_log=False,
    )


@app.command(name="init-db")
def init_database() -> None:
    """Create the database tables."""
    from src.catalog.runtime.context import get_config
    from src.catalog.runtime.init_db import init_db

    init_db()
    console.print(f"[green]Tables created[/green] in {get_config().database.url}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
