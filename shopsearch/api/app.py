# shopsearch/api/app.py

"""FastAPI application exposing the search and detail endpoints."""

import logging
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from shopsearch.clients.zenserp_client import ZenserpClient
from shopsearch.core.exceptions import ProductIdRequired, ShopSearchError
from shopsearch.services.product_service import ProductService

logger = logging.getLogger("shopsearch.api")

app = FastAPI(title="Product Search Proxy")


def get_product_service() -> ProductService:
    """Build a service per request so configuration changes are seen."""
    return ProductService(ZenserpClient.from_settings())


@app.exception_handler(ShopSearchError)
async def shopsearch_error_handler(
    request: Request, exc: ShopSearchError,
) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(Exception)
async def unhandled_error_handler(
    request: Request, exc: Exception,
) -> JSONResponse:
    logger.error(
        "Unhandled error in %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "details": str(exc)},
    )


@app.get("/search-endpoint")
@app.get("/api/products", include_in_schema=False)
async def search_endpoint(
    query: str = "",
    service: ProductService = Depends(get_product_service),
) -> dict[str, Any]:
    products = await service.search(query)
    return {"products": [p.to_dict() for p in products]}


@app.get("/detail-endpoint/{product_id:path}")
@app.get("/api/products/{product_id:path}", include_in_schema=False)
async def detail_endpoint(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> dict[str, Any]:
    product = await service.detail(product_id)
    return {"product": product.to_dict()}


@app.get("/detail-endpoint", include_in_schema=False)
async def detail_endpoint_without_id() -> dict[str, Any]:
    raise ProductIdRequired()
