"""Product CLI commands."""

import typer

from stockroom.core.exceptions import InventoryError

from .app import app
from .utils import console, print_error, print_product, product_service, products_table


@app.command("add")
def add_product(
    name: str = typer.Option(..., "--name", "-n", help="Product name"),
    quantity: int = typer.Option(0, "--quantity", "-q", help="Initial units in stock"),
) -> None:
    """Add a new product."""
    try:
        with product_service() as service:
            product = service.add_product(name, quantity)
    except InventoryError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_product(product)


@app.command("list")
def list_products() -> None:
    """List all products."""
    with product_service() as service:
        products = service.list_products()

    if not products:
        console.print("[yellow]No products found[/yellow]")
        return

    console.print(products_table(products))
    console.print(f"\n[green]Found {len(products)} products[/green]")


@app.command("show")
def show_product(
    product_id: int = typer.Option(..., "--id", help="Product ID"),
) -> None:
    """Show a single product."""
    try:
        with product_service() as service:
            product = service.get_product(product_id)
    except InventoryError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_product(product)


@app.command("increment")
def increment_product(
    product_id: int = typer.Option(..., "--id", help="Product ID"),
    quantity: int = typer.Option(..., "--quantity", "-q", help="Units to add"),
) -> None:
    """Add stock to a product."""
    try:
        with product_service() as service:
            product = service.increment_quantity(product_id, quantity)
    except InventoryError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_product(product)


@app.command("decrement")
def decrement_product(
    product_id: int = typer.Option(..., "--id", help="Product ID"),
    quantity: int = typer.Option(..., "--quantity", "-q", help="Units to remove"),
) -> None:
    """Remove stock from a product."""
    try:
        with product_service() as service:
            product = service.decrement_quantity(product_id, quantity)
    except InventoryError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_product(product)
