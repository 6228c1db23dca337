# shopsearch/services/backend.py

"""Pick the backend a view talks to."""

from shopsearch.clients.api_client import ApiClient
from shopsearch.clients.zenserp_client import ZenserpClient
from shopsearch.services.product_service import ProductService
from shopsearch.services.search_view import ProductBackend


def build_backend(api_url: str | None = None) -> ProductBackend:
    """Use a running API when *api_url* is given, else call Zenserp in-process."""
    if api_url:
        return ApiClient(api_url)
    return ProductService(ZenserpClient.from_settings())
