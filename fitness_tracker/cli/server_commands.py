"""Server CLI commands."""

import typer
from rich.panel import Panel

from fitness_tracker.runtime.context import get_config

from .utils import console


def serve(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            "[bold green]Starting Fitness Tracker API[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "fitness_tracker.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,
    )
