# shopsearch/services/product_service.py

"""Search and detail operations behind the HTTP endpoints."""

import logging
from typing import Any

from shopsearch.clients.zenserp_client import ZenserpClient
from shopsearch.core.exceptions import ProductIdRequired, QueryRequired
from shopsearch.filters.normalizer import to_detail, to_summary
from shopsearch.models.product import ProductDetail, ProductSummary

logger = logging.getLogger("shopsearch.service")


class ProductService:
    """Validate input, call Zenserp and normalise the response.

    Errors from the client propagate unchanged; the HTTP layer turns
    them into responses and the view turns them into messages.
    """

    def __init__(self, client: ZenserpClient) -> None:
        self.client = client

    async def search(self, query: str) -> list[ProductSummary]:
        """Return normalised summaries for *query* in upstream order."""
        if not query or not query.strip():
            raise QueryRequired()

        data: Any = await self.client.search(query)
        results = (
            data.get("shopping_results") if isinstance(data, dict) else None
        )
        if not isinstance(results, list):
            results = []

        products = [
            to_summary(item, index) for index, item in enumerate(results)
        ]
        logger.info(
            "search q=%r returned %d products", query, len(products)
        )
        return products

    async def detail(self, product_id: str) -> ProductDetail:
        """Return the normalised detail for a single upstream product."""
        if not product_id or not product_id.strip():
            raise ProductIdRequired()

        data: Any = await self.client.fetch_detail(product_id)
        product = to_detail(data, product_id)
        logger.info("detail product_id=%r resolved", product_id)
        return product
