# shopsearch/clients/api_client.py

"""HTTP backend for the views: calls a running shopsearch API."""

import logging
from typing import Any
from urllib.parse import quote

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession

from shopsearch.config.settings import Settings
from shopsearch.core.exceptions import ApiError, TransportError
from shopsearch.models.product import ProductDetail, ProductSummary


class ApiClient:
    """Same interface as ProductService, but over the HTTP endpoints."""

    def __init__(self, base_url: str | None = None) -> None:
        self.logger = logging.getLogger("shopsearch.api_client")
        self.settings = Settings()
        self.base_url = (base_url or self.settings.API_BASE_URL).rstrip("/")

    async def _get(
        self, path: str, params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            async with AsyncSession() as session:
                resp = await session.get(
                    url,
                    params=params,
                    timeout=self.settings.REQUEST_TIMEOUT,
                )
        except CurlError as exc:
            self.logger.warning("Request to %s failed: %s", url, exc)
            raise TransportError(str(exc)) from exc

        ok = 200 <= resp.status_code < 300
        try:
            payload: Any = resp.json()
        except ValueError as exc:
            if not ok:
                self.logger.warning(
                    "HTTP %d with a non-JSON body from %s",
                    resp.status_code,
                    url,
                )
                raise ApiError.from_payload(
                    resp.text, resp.status_code
                ) from exc
            raise TransportError(
                f"Malformed JSON from {url}: {exc}"
            ) from exc

        if not ok or (isinstance(payload, dict) and "error" in payload):
            raise ApiError.from_payload(payload, resp.status_code)
        if not isinstance(payload, dict):
            raise TransportError(f"Unexpected response from {url}")
        return payload

    async def search(self, query: str) -> list[ProductSummary]:
        """Call ``GET /search-endpoint``."""
        payload = await self._get("/search-endpoint", {"query": query})
        return [
            ProductSummary.from_dict(item)
            for item in payload.get("products") or []
        ]

    async def detail(self, product_id: str) -> ProductDetail:
        """Call ``GET /detail-endpoint/<product_id>``."""
        payload = await self._get(
            f"/detail-endpoint/{quote(product_id, safe='')}"
        )
        return ProductDetail.from_dict(payload.get("product") or {})
