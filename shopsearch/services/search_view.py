# shopsearch/services/search_view.py

"""View state for the results screen: list, filter and selected product.

Fetches complete out of order, so every fetch captures a sequence token
when it starts and only applies its result if that token is still the
latest one issued for its kind:

- list fetches: a newer ``set_query`` makes older responses stale;
- detail fetches: a newer ``select`` or a ``close_detail`` makes older
  responses stale, so a dismissed overlay is never reopened.

Nothing is cancelled; stale results are logged and dropped.
"""

import logging
from collections.abc import Callable
from typing import Protocol

from shopsearch.core.exceptions import ShopSearchError
from shopsearch.filters.product_filter import ProductFilter
from shopsearch.models.product import ProductDetail, ProductSummary

logger = logging.getLogger("shopsearch.view")

LOAD_FAILED_MESSAGE = "Failed to load products"


class ProductBackend(Protocol):
    """Anything that can run the two endpoint operations."""

    async def search(self, query: str) -> list[ProductSummary]: ...

    async def detail(self, product_id: str) -> ProductDetail: ...


class SearchView:
    """Holds and reconciles the state rendered by the results screen."""

    def __init__(self, backend: ProductBackend) -> None:
        self.backend = backend
        self.query: str = ""
        self.summaries: list[ProductSummary] = []
        self.filter_text: str = ""
        self.selected: ProductSummary | ProductDetail | None = None
        self.loading: bool = False
        self.load_error: str | None = None
        self._list_token: int = 0
        self._detail_token: int = 0
        self._listeners: list[Callable[[], None]] = []

    # ── Observers ────────────────────────────────────────

    def subscribe(self, listener: Callable[[], None]) -> None:
        """Call *listener* after every state change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[], None]) -> None:
        """Stop calling *listener*; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ── Derived state ────────────────────────────────────

    @property
    def visible_summaries(self) -> list[ProductSummary]:
        """Summaries whose name contains the filter text."""
        return ProductFilter.filter_by_name(
            self.summaries, self.filter_text
        )

    # ── Search list ──────────────────────────────────────

    async def set_query(self, query: str) -> None:
        """Switch to *query* and fetch its results."""
        self.query = query
        self.filter_text = query
        self._list_token += 1
        token = self._list_token

        if not query:
            self.loading = False
            self._notify()
            return

        self.loading = True
        self.load_error = None
        self._notify()

        try:
            summaries = await self.backend.search(query)
        except ShopSearchError as exc:
            if token != self._list_token:
                logger.debug(
                    "Dropping stale search error for %r: %s", query, exc
                )
                return
            logger.warning("Search for %r failed: %s", query, exc)
            self.load_error = str(exc)
        except Exception:
            if token != self._list_token:
                logger.debug(
                    "Dropping stale search failure for %r",
                    query,
                    exc_info=True,
                )
                return
            logger.error("Search for %r failed", query, exc_info=True)
            self.load_error = LOAD_FAILED_MESSAGE
        else:
            if token != self._list_token:
                logger.debug(
                    "Dropping stale search results for %r", query
                )
                return
            self.summaries = summaries

        self.loading = False
        self._notify()

    def set_filter(self, text: str) -> None:
        """Update the local filter; never touches the network."""
        self.filter_text = text
        self._notify()

    # ── Detail overlay ───────────────────────────────────

    async def select(self, summary: ProductSummary) -> None:
        """Show *summary* at once, then upgrade it to the full detail."""
        self._detail_token += 1
        token = self._detail_token
        self.selected = summary
        self._notify()

        product_id = summary.product_id
        if not product_id:
            return

        try:
            detail = await self.backend.detail(product_id)
        except ShopSearchError as exc:
            logger.warning(
                "Failed to load product details for %s: %s",
                product_id,
                exc,
            )
            return
        except Exception:
            logger.warning(
                "Failed to load product details for %s",
                product_id,
                exc_info=True,
            )
            return

        if token != self._detail_token:
            logger.debug(
                "Dropping detail for %s; selection changed", product_id
            )
            return
        self.selected = detail
        self._notify()

    def close_detail(self) -> None:
        """Dismiss the overlay; in-flight detail responses are ignored."""
        self._detail_token += 1
        self.selected = None
        self._notify()
