"""Command-line entry points for running and preparing the service."""

import typer
from rich.console import Console

from src.product_api.api.utils.app_startup import configure_logging
from src.product_api.runtime.context import get_config

console = Console()

app = typer.Typer(
    help="Product API - serve the HTTP API or prepare its database",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to config)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to config)"),
) -> None:
    """Start the HTTP server and block until it is stopped."""
    import uvicorn

    from src.product_api.api.http.app import create_app

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port
    console.print(f"[blue]Serving on[/blue] http://{bind_host}:{bind_port}")
    uvicorn.run(
        create_app(config),
        host=bind_host,
        port=bind_port,
        access_log=False,
    )


@app.command(name="init-db")
def init_db_command() -> None:
    """Create the products table and insert sample rows if it is empty."""
    from src.product_api.runtime.init_db import init_db

    config = get_config()
    configure_logging(config)
    if not init_db(config):
        console.print("[red]Database initialization failed[/red]")
        raise typer.Exit(1)
    console.print("[green]Database ready[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
