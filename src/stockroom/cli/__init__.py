"""Main CLI application module."""

from . import product_commands, server_commands  # noqa: F401  (register commands)
from .app import app


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
