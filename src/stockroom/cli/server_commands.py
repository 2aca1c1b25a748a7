"""Server and database maintenance CLI commands."""

from typing import Optional

import typer
import uvicorn
from rich.panel import Panel

from stockroom.runtime.context import get_config
from stockroom.runtime.init_db import init_db

from .app import app
from .utils import console


@app.command(name="init-db")
def init_db_command() -> None:
    """Create the database tables."""
    init_db()
    console.print(f"[green]✅ Database ready at {get_config().database.url}[/green]")


@app.command(name="serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Host to bind the server to"),
    port: Optional[int] = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """
    🚀 Start the HTTP API.

    Host and port default to the values in config.yaml.
    """
    config = get_config()
    if host is None:
        host = config.app.host
    if port is None:
        port = config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Starting Stockroom API[/bold green] on http://{host}:{port}",
            border_style="green",
        )
    )
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "stockroom.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=config.logging.level.lower(),
        log_config=None,
    )
