# shopsearch/ui/app.py

"""Terminal UI: search box, result list with filter, detail overlay."""

import logging
import webbrowser
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, VerticalScroll
from textual.screen import ModalScreen, Screen
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Static,
)

from shopsearch.config.settings import Settings
from shopsearch.models.product import ProductDetail, ProductSummary
from shopsearch.services.backend import build_backend
from shopsearch.services.search_view import ProductBackend, SearchView

logger = logging.getLogger("shopsearch.ui")

_CSS = """
#search_box, #detail_box {
    width: 80;
    height: auto;
    padding: 1 2;
    border: round $accent;
}
SearchScreen, DetailScreen {
    align: center middle;
}
#title {
    text-style: bold;
    content-align: center middle;
    width: 100%;
}
#detail_actions {
    height: auto;
    margin-top: 1;
}
"""


def _money(value: float) -> str:
    return f"${value:.2f}"


class SearchScreen(Screen[None]):
    """Landing screen: type a product name and search."""

    def compose(self) -> ComposeResult:
        """Build the search form."""
        yield Header()
        yield Container(
            Static("Search Product", id="title"),
            Input(placeholder="Enter the product name...", id="search_input"),
            Button("Search", variant="primary", id="search_btn"),
            id="search_box",
        )
        yield Footer()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle the Search button."""
        if event.button.id == "search_btn":
            self.open_results()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter in the search box."""
        if event.input.id == "search_input":
            self.open_results()

    def open_results(self) -> None:
        """Navigate to the results screen for the typed query."""
        query = self.query_one("#search_input", Input).value.strip()
        if not query:
            self.notify("Please enter a search term", severity="warning")
            return
        app = cast(ShopSearchApp, self.app)
        app.push_screen(ResultsScreen(app.backend, query))


class DetailScreen(ModalScreen[None]):
    """Overlay for the selected product; upgraded in place by the view."""

    BINDINGS = [Binding("escape", "close", "Close")]

    def __init__(self, view: SearchView, summary: ProductSummary) -> None:
        super().__init__()
        self.view = view
        self.summary = summary
        self._ready = False

    def compose(self) -> ComposeResult:
        """Build the overlay widgets."""
        yield VerticalScroll(
            Static(id="detail_name"),
            Static(id="detail_body"),
            Horizontal(
                Button("Close", id="close_btn"),
                Button("Go to Product", variant="primary", id="link_btn"),
                id="detail_actions",
            ),
            id="detail_box",
        )

    def on_mount(self) -> None:
        """Render the selection and follow it until the overlay closes."""
        self._ready = True
        self.view.subscribe(self.refresh_selection)
        self.show(self.view.selected or self.summary)

    def on_unmount(self) -> None:
        """Stop following the view once the overlay is gone."""
        self._ready = False
        self.view.unsubscribe(self.refresh_selection)

    def refresh_selection(self) -> None:
        """Re-render when the view upgrades or clears the selection."""
        self.show(self.view.selected)

    def show(self, product: ProductSummary | ProductDetail | None) -> None:
        """Render *product*; summaries show only the fields they have."""
        if product is None or not self._ready:
            return
        self.query_one("#detail_name", Static).update(
            Text(product.name, style="bold")
        )

        body = Text()
        if isinstance(product, ProductDetail):
            body.append(
                (product.description or "No description available") + "\n\n"
            )
        body.append(f"Price: {_money(product.price)}\n", style="bold")
        if isinstance(product, ProductDetail):
            body.append(f"Shipping: {_money(product.shipping)}\n")
            body.append(f"Total: {_money(product.total_price)}\n")
        body.append(f"Seller: {product.seller}\n")
        if isinstance(product, ProductDetail):
            if product.details:
                body.append(f"Details: {product.details}\n")
            if product.extensions:
                body.append("\nFeatures:\n", style="bold")
                for ext in product.extensions:
                    body.append(f"  • {ext}\n")
            if product.specifications:
                body.append("\nSpecifications:\n", style="bold")
                for spec in product.specifications:
                    body.append(f"  {spec.key}: ", style="bold")
                    body.append(f"{spec.value}\n")
        self.query_one("#detail_body", Static).update(body)

        link_btn = self.query_one("#link_btn", Button)
        link_btn.display = bool(
            isinstance(product, ProductDetail) and product.url
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle Close / Go to Product."""
        if event.button.id == "close_btn":
            self.action_close()
        elif event.button.id == "link_btn":
            self.open_link()

    def open_link(self) -> None:
        """Open the seller page in the default browser."""
        product = self.view.selected
        if isinstance(product, ProductDetail) and product.url:
            webbrowser.open(f"{Settings.PRODUCT_LINK_BASE}{product.url}")

    def action_close(self) -> None:
        """Dismiss the overlay and clear the selection."""
        self.view.close_detail()
        self.dismiss()


class ResultsScreen(Screen[None]):
    """Search results for one query, with a local name filter."""

    BINDINGS = [Binding("escape", "app.pop_screen", "Back")]

    def __init__(self, backend: ProductBackend, query: str) -> None:
        super().__init__()
        self.view = SearchView(backend)
        self.initial_query = query
        self._rows: list[ProductSummary] = []

    def compose(self) -> ComposeResult:
        """Build the results layout."""
        yield Header()
        yield Static(
            f'Search Results for "{self.initial_query}"',
            id="title",
            markup=False,
        )
        yield Input(
            value=self.initial_query,
            placeholder="Search by product name...",
            id="filter_input",
        )
        yield Static("Loading...", id="status")
        yield DataTable(id="results_table", zebra_stripes=True, cursor_type="row")
        yield Footer()

    def on_mount(self) -> None:
        """Set up the table and start the search."""
        table = self.query_one("#results_table", DataTable)
        table.add_columns("Name", "Price", "Seller")
        self.view.subscribe(self.refresh_state)
        self.run_worker(self.view.set_query(self.initial_query))

    def refresh_state(self) -> None:
        """Re-render status and table from the view."""
        status = self.query_one("#status", Static)
        visible = self.view.visible_summaries
        if self.view.loading:
            status.update("Loading...")
        elif self.view.load_error:
            status.update(Text(self.view.load_error, style="red"))
        elif not visible:
            status.update("No products found")
        else:
            status.update(
                f"{len(visible)} of {len(self.view.summaries)} products"
            )

        self.populate_table(
            [] if self.view.loading or self.view.load_error else visible
        )

    def populate_table(self, products: list[ProductSummary]) -> None:
        """Fill the DataTable with *products*, keeping their order."""
        if products == self._rows:
            return
        table = self.query_one("#results_table", DataTable)
        table.clear()
        self._rows = list(products)
        for p in self._rows:
            table.add_row(p.name[:60], _money(p.price), p.seller)

    def on_input_changed(self, event: Input.Changed) -> None:
        """Filter locally as the user types."""
        if event.input.id == "filter_input":
            self.view.set_filter(event.value)

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Open the overlay and fetch the full product details."""
        if 0 <= event.cursor_row < len(self._rows):
            summary = self._rows[event.cursor_row]
            self.app.push_screen(DetailScreen(self.view, summary))
            self.run_worker(self.view.select(summary))


class ShopSearchApp(App[None]):
    """Terminal UI for Zenserp product search."""

    CSS = _CSS
    TITLE = "shopsearch"

    BINDINGS = [Binding("ctrl+q", "quit", "Quit")]

    def __init__(
        self,
        backend: ProductBackend | None = None,
        query: str | None = None,
    ) -> None:
        super().__init__()
        self.backend = backend or build_backend()
        self.initial_query = query

    def on_mount(self) -> None:
        """Start on the search form, or straight on the results."""
        self.push_screen(SearchScreen())
        if self.initial_query:
            self.push_screen(ResultsScreen(self.backend, self.initial_query))
