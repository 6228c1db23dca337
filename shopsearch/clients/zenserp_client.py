# shopsearch/clients/zenserp_client.py

"""Async client for the Zenserp shopping-search API."""

import logging
from typing import Any

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession

from shopsearch.config.settings import Settings
from shopsearch.core.exceptions import (
    ConfigurationError,
    TransportError,
    UpstreamError,
)


class ZenserpClient:
    """Issue keyword-search and product-lookup requests to Zenserp.

    The API key is injected at construction; a missing key is reported as
    :class:`ConfigurationError` on each call, before any network traffic.
    Failures are never retried.
    """

    def __init__(self, api_key: str | None) -> None:
        self.logger = logging.getLogger("shopsearch.zenserp")
        self.settings = Settings()
        self._api_key = api_key

    @classmethod
    def from_settings(cls) -> "ZenserpClient":
        """Build a client from ``ZENSERP_API_KEY`` in the environment."""
        return cls(Settings.ZENSERP_API_KEY)

    def _require_key(self) -> str:
        if not self._api_key:
            self.logger.error("ZENSERP_API_KEY is not configured")
            raise ConfigurationError()
        return self._api_key

    async def _get_json(
        self, url: str, params: dict[str, str],
    ) -> Any:
        """GET *url* and decode the JSON body, mapping failures to errors."""
        try:
            async with AsyncSession(
                impersonate=self.settings.IMPERSONATE_BROWSER
            ) as session:
                resp = await session.get(
                    url,
                    params=params,
                    headers={"Accept": "application/json"},
                    timeout=self.settings.REQUEST_TIMEOUT,
                )
        except CurlError as exc:
            self.logger.error(
                "[zenserp] Request to %s failed: %s",
                url,
                exc,
                exc_info=True,
            )
            raise TransportError(str(exc)) from exc

        if not 200 <= resp.status_code < 300:
            body: Any
            try:
                body = resp.json()
            except ValueError:
                body = resp.text
            self.logger.warning(
                "[zenserp] HTTP %d from %s", resp.status_code, url
            )
            raise UpstreamError(resp.status_code, body)

        try:
            return resp.json()
        except ValueError as exc:
            self.logger.error(
                "[zenserp] Malformed JSON from %s: %s", url, exc
            )
            raise TransportError(
                f"Malformed JSON from Zenserp: {exc}"
            ) from exc

    async def search(self, query: str) -> Any:
        """Run a shopping keyword search and return the raw JSON."""
        api_key = self._require_key()
        self.logger.info("[zenserp] search q=%r", query)
        return await self._get_json(
            self.settings.ZENSERP_SEARCH_URL,
            {
                "apikey": api_key,
                "q": query,
                "tbm": self.settings.SEARCH_MODE,
            },
        )

    async def fetch_detail(self, product_id: str) -> Any:
        """Look up a single shopping product and return the raw JSON."""
        api_key = self._require_key()
        self.logger.info("[zenserp] detail product_id=%r", product_id)
        return await self._get_json(
            self.settings.ZENSERP_SHOPPING_URL,
            {
                "apikey": api_key,
                "product_id": product_id,
                "location": self.settings.DETAIL_LOCATION,
            },
        )
