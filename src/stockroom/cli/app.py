"""Typer application shared by the command modules."""

import typer

from stockroom.api.utils.app_startup import configure_logging

app = typer.Typer(
    help="📦 Stockroom - track product stock from the command line",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Log level (debug, info, warning, error, critical)",
    ),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(level=log_level)
