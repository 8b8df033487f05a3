"""Command-line interface for running and preparing the Bookshelf service."""

import typer
from rich.console import Console

from bookshelf.runtime.context import get_config

console = Console()

app = typer.Typer(
    name="bookshelf",
    help="📚 Bookshelf API - serve the book catalogue and manage its database",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address (defaults to config app.host)"),
    port: int | None = typer.Option(None, help="Port (defaults to config app.port)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port
    console.print(f"[green]Serving Bookshelf API on {bind_host}:{bind_port}[/green]")
    uvicorn.run(
        "bookshelf.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,
    )


@app.command("init-db")
def init_db_command() -> None:
    """Create all database tables for the configured database."""
    from bookshelf.runtime.init_db import init_db

    try:
        init_db()
    except Exception as e:
        console.print(f"[red]❌ Database initialization failed: {e}[/red]")
        raise typer.Exit(1) from e
    console.print("[green]✅ Database tables created[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
