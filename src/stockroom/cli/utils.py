"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stockroom.core.services import DbSessionService, ProductService
from stockroom.entities.service.product import Product

console = Console()
err_console = Console(stderr=True)


@contextmanager
def product_service() -> Iterator[ProductService]:
    """Yield a ProductService whose changes are committed when the block succeeds."""
    db = DbSessionService()
    try:
        db.create_all()
        with db.session_scope() as session:
            yield ProductService.from_session(session)
    finally:
        db.dispose()


def print_product(product: Product) -> None:
    console.print(
        f"[green]✅[/green] [cyan]#{product.id}[/cyan] "
        f"{escape(product.name)}: quantity [bold]{product.quantity}[/bold]"
    )


def products_table(products: list[Product]) -> Table:
    table = Table(title="Products")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Quantity", style="magenta", justify="right")
    table.add_column("Created", style="dim")
    table.add_column("Updated", style="dim")

    for product in products:
        table.add_row(
            str(product.id),
            escape(product.name),
            str(product.quantity),
            product.created_at.strftime("%Y-%m-%d %H:%M:%S"),
            product.updated_at.strftime("%Y-%m-%d %H:%M:%S"),
        )
    return table


def print_error(message: str) -> None:
    err_console.print(f"[red]❌ {escape(message)}[/red]")
