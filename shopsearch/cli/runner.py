# shopsearch/cli/runner.py

"""Headless CLI runner: search, detail lookup and the API server."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from shopsearch.config.settings import Settings
from shopsearch.core.exceptions import ShopSearchError
from shopsearch.models.product import ProductDetail, ProductSummary
from shopsearch.services.backend import build_backend
from shopsearch.services.search_view import SearchView

logger = logging.getLogger("shopsearch.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_summaries(products: list[ProductSummary]) -> None:
    """Render a Rich table of search results to stdout."""
    table = Table(
        title="Search Results",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Seller", style="magenta")
    table.add_column("Product ID", overflow="fold", style="dim")

    for idx, p in enumerate(products, 1):
        table.add_row(
            str(idx),
            p.name[:60],
            f"${p.price:,.2f}",
            p.seller,
            p.product_id or "-",
        )

    Console().print(table)


def _print_detail(product: ProductDetail) -> None:
    """Render a Rich key/value table for one product."""
    table = Table(title=product.name, show_header=False, title_style="bold cyan")
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")

    table.add_row("Price", f"${product.price:,.2f}")
    table.add_row("Shipping", f"${product.shipping:,.2f}")
    table.add_row("Total", f"${product.total_price:,.2f}")
    table.add_row("Seller", product.seller)
    if product.details:
        table.add_row("Details", product.details)
    table.add_row(
        "Description", product.description or "No description available"
    )
    for ext in product.extensions:
        table.add_row("Feature", ext)
    for spec in product.specifications:
        table.add_row(spec.key, spec.value)
    if product.url:
        table.add_row("Link", f"{Settings.PRODUCT_LINK_BASE}{product.url}")

    Console().print(table)


def _dump_json(data: object) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


async def cli_search(
    query: str,
    filter_text: str | None,
    output_format: str,
    api_url: str | None = None,
) -> int:
    """Run a headless search and return an exit code (0=ok, 1=fail)."""
    view = SearchView(build_backend(api_url))

    _err.print(f"[bold]Searching:[/bold] {query}")
    await view.set_query(query)

    if view.load_error:
        _err.print(view.load_error, style="red", markup=False)
        return 1

    if filter_text is not None:
        view.set_filter(filter_text)
        _err.print(f"[dim]Filter: {filter_text}[/dim]")

    products = view.visible_summaries
    if not products:
        _err.print("[yellow]No products found[/yellow]")
        return 1

    _err.print(
        f"[green]✓ {len(products)} of {len(view.summaries)} products[/green]"
    )

    if output_format == "table":
        _print_summaries(products)
    else:
        _dump_json([p.to_dict() for p in products])
    return 0


async def cli_detail(
    product_id: str,
    output_format: str,
    api_url: str | None = None,
) -> int:
    """Fetch and print one product's details."""
    backend = build_backend(api_url)
    try:
        product = await backend.detail(product_id)
    except ShopSearchError as exc:
        logger.error("Detail lookup for %s failed", product_id, exc_info=True)
        _err.print(str(exc), style="red", markup=False)
        return 1

    if output_format == "table":
        _print_detail(product)
    else:
        _dump_json(product.to_dict())
    return 0


def serve(host: str | None = None, port: int | None = None) -> int:
    """Run the HTTP API with uvicorn until interrupted."""
    import uvicorn

    bind_host = host or Settings.API_HOST
    bind_port = port or Settings.API_PORT
    if not Settings.ZENSERP_API_KEY:
        _err.print(
            "[yellow]ZENSERP_API_KEY is not set; "
            "endpoints will answer 500 until it is.[/yellow]"
        )
    _err.print(f"[bold]Serving on http://{bind_host}:{bind_port}[/bold]")
    uvicorn.run("shopsearch.api.app:app", host=bind_host, port=bind_port)
    return 0
