# tests/test_api.py

"""HTTP-level tests for the search and detail endpoints."""

import json
import unittest
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

from fastapi.testclient import TestClient

from shopsearch.api.app import app, get_product_service
from shopsearch.clients.zenserp_client import ZenserpClient
from shopsearch.config.settings import Settings
from shopsearch.core.exceptions import (
    ConfigurationError,
    TransportError,
    UpstreamError,
)
from shopsearch.services.product_service import ProductService

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _fixture(name: str) -> dict:
    with open(FIXTURES_DIR / name, encoding="utf-8") as f:
        return json.load(f)


class _EndpointTestCase(unittest.TestCase):
    """Wire the app's service to a mocked Zenserp client."""

    def setUp(self) -> None:
        self.zenserp = MagicMock(spec=ZenserpClient)
        self.zenserp.search = AsyncMock(
            return_value=_fixture("zenserp_search.json")
        )
        self.zenserp.fetch_detail = AsyncMock(
            return_value=_fixture("zenserp_product.json")
        )
        app.dependency_overrides[get_product_service] = (
            lambda: ProductService(self.zenserp)
        )
        self.client = TestClient(app, raise_server_exceptions=False)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.client.close()


class TestSearchEndpoint(_EndpointTestCase):
    """GET /search-endpoint."""

    def test_returns_products(self) -> None:
        """Summaries come back in upstream order."""
        response = self.client.get(
            "/search-endpoint", params={"query": "laptop"}
        )
        self.assertEqual(response.status_code, 200)
        products = response.json()["products"]
        self.assertEqual([p["id"] for p in products], ["1234567890", "2"])
        self.assertEqual(products[0]["productId"], "1234567890")
        self.assertEqual(products[0]["price"], 1234.56)
        self.assertNotIn("productId", products[1])
        self.zenserp.search.assert_awaited_once_with("laptop")

    def test_empty_query_is_400(self) -> None:
        """An empty query never reaches Zenserp."""
        response = self.client.get("/search-endpoint", params={"query": ""})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Query is required"})
        self.zenserp.search.assert_not_awaited()

    def test_missing_query_is_400(self) -> None:
        response = self.client.get("/search-endpoint")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Query is required"})

    def test_missing_api_key_is_500(self) -> None:
        self.zenserp.search.side_effect = ConfigurationError()
        response = self.client.get(
            "/search-endpoint", params={"query": "laptop"}
        )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "API key is missing"})

    def test_upstream_status_is_mirrored(self) -> None:
        """Zenserp's status and body pass through."""
        self.zenserp.search.side_effect = UpstreamError(
            429, {"message": "quota"}
        )
        response = self.client.get(
            "/search-endpoint", params={"query": "laptop"}
        )
        self.assertEqual(response.status_code, 429)
        self.assertEqual(
            response.json(),
            {"error": "Zenserp API error", "details": {"message": "quota"}},
        )

    def test_transport_error_is_500(self) -> None:
        self.zenserp.search.side_effect = TransportError("connection reset")
        response = self.client.get(
            "/search-endpoint", params={"query": "laptop"}
        )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.json(),
            {"error": "Internal Server Error", "details": "connection reset"},
        )

    def test_unexpected_error_is_500(self) -> None:
        """Anything unforeseen becomes a generic 500."""
        self.zenserp.search.side_effect = RuntimeError("boom")
        response = self.client.get(
            "/search-endpoint", params={"query": "laptop"}
        )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.json(),
            {"error": "Internal Server Error", "details": "boom"},
        )

    def test_legacy_path_alias(self) -> None:
        response = self.client.get(
            "/api/products", params={"query": "laptop"}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()["products"]), 2)


class TestDetailEndpoint(_EndpointTestCase):
    """GET /detail-endpoint/<productId>."""

    def test_returns_product(self) -> None:
        """The first seller's data fills the detail."""
        response = self.client.get("/detail-endpoint/1234567890")
        self.assertEqual(response.status_code, 200)
        product = response.json()["product"]
        self.assertEqual(product["id"], "1234567890")
        self.assertEqual(product["seller"], "Best Buy")
        self.assertEqual(product["totalPrice"], 1244.55)
        self.assertEqual(
            product["specifications"][0],
            {"key": "Processor", "value": "AMD Ryzen 5"},
        )
        self.zenserp.fetch_detail.assert_awaited_once_with("1234567890")

    def test_upstream_503_is_mirrored(self) -> None:
        raw = {"error": "upstream maintenance"}
        self.zenserp.fetch_detail.side_effect = UpstreamError(503, raw)
        response = self.client.get("/detail-endpoint/abc")
        self.assertEqual(response.status_code, 503)
        body = response.json()
        self.assertEqual(body["error"], "Zenserp API error")
        self.assertEqual(body["details"], raw)

    def test_empty_id_is_400(self) -> None:
        """Both the bare path and a trailing slash are rejected."""
        for path in ("/detail-endpoint/", "/detail-endpoint"):
            with self.subTest(path=path):
                response = self.client.get(path)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(
                    response.json(), {"error": "Product ID is required"}
                )
        self.zenserp.fetch_detail.assert_not_awaited()

    def test_fallback_id_when_payload_has_none(self) -> None:
        self.zenserp.fetch_detail.return_value = {"title": "Mouse"}
        response = self.client.get("/api/products/xyz")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["product"]["id"], "xyz")
        self.assertEqual(response.json()["product"]["name"], "Mouse")


class TestDefaultWiring(unittest.TestCase):
    """Without overrides the service is built from Settings."""

    def test_missing_key_answers_500(self) -> None:
        with patch.object(Settings, "ZENSERP_API_KEY", None), TestClient(
            app, raise_server_exceptions=False
        ) as client:
            response = client.get(
                "/search-endpoint", params={"query": "laptop"}
            )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "API key is missing"})


if __name__ == "__main__":
    unittest.main()
