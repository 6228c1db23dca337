# shopsearch/filters/product_filter.py

"""Local, synchronous filtering of already-fetched search results."""

import logging

from shopsearch.models.product import ProductSummary

logger = logging.getLogger("shopsearch.filters")


class ProductFilter:
    """Narrow a summary list without touching the network."""

    @staticmethod
    def filter_by_name(
        products: list[ProductSummary],
        text: str,
    ) -> list[ProductSummary]:
        """Keep products whose name contains *text*, case-insensitively.

        An empty filter keeps everything; order is preserved.
        """
        if not text:
            return list(products)

        needle = text.lower()
        kept = [p for p in products if needle in p.name.lower()]

        if len(kept) != len(products):
            logger.debug(
                "Filter %r hid %d of %d products",
                text,
                len(products) - len(kept),
                len(products),
            )

        return kept
