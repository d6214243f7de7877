"""Cliente del catálogo de productos (API estilo DummyJSON).

Endpoints:
- GET {base}/products?limit=N
- GET {base}/products/{id}
- GET {base}/products/category/{category}?limit=N
- GET {base}/products/search?q=...&limit=N

Clasificación de errores (igual en las cuatro operaciones):
- status no-2xx          -> RemoteServiceError(status_code) / NotFound (404)
- httpx.TransportError   -> ConnectivityError
- cualquier otra cosa    -> RemoteServiceError sin status
Los errores ya clasificados se propagan sin re-envolver.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import (
    CatalogError,
    ConnectivityError,
    NotFound,
    RemoteServiceError,
)
from core.interfaces.catalog import CatalogSource, RawRecord

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network connection failed. Please check your internet connection."


class CatalogClient(CatalogSource):
    """Lee productos del catálogo remoto; una petición por llamada."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._base_url = (base_url or self._settings.catalog_base_url).rstrip("/")
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch_all(self, limit: int = 10) -> list[RawRecord]:
        payload = await self._get_json(
            "/products",
            params={"limit": limit},
            failure="Failed to fetch products",
            unexpected="An unexpected error occurred while fetching products",
        )
        return _extract_products(payload, "An unexpected error occurred while fetching products")

    async def fetch_by_id(self, product_id: int) -> RawRecord:
        unexpected = "An unexpected error occurred while fetching the product"
        payload = await self._get_json(
            f"/products/{product_id}",
            failure="Failed to fetch product",
            unexpected=unexpected,
            not_found=f"Product with ID {product_id} not found",
        )
        if not isinstance(payload, dict):
            raise RemoteServiceError(unexpected)
        return payload

    async def fetch_by_category(self, category: str, limit: int = 10) -> list[RawRecord]:
        unexpected = "An unexpected error occurred while fetching products by category"
        payload = await self._get_json(
            f"/products/category/{quote(category, safe='')}",
            params={"limit": limit},
            failure="Failed to fetch products by category",
            unexpected=unexpected,
            not_found=f"Category '{category}' not found",
        )
        return _extract_products(payload, unexpected)

    async def search(self, query: str, limit: int = 10) -> list[RawRecord]:
        unexpected = "An unexpected error occurred while searching products"
        # httpx codifica `q` (espacios, &, etc.).
        payload = await self._get_json(
            "/products/search",
            params={"q": query, "limit": limit},
            failure="Failed to search products",
            unexpected=unexpected,
        )
        return _extract_products(payload, unexpected)

    async def _get_json(
        self,
        path: str,
        *,
        failure: str,
        unexpected: str,
        params: dict[str, Any] | None = None,
        not_found: str | None = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url, params=params)

            if response.status_code == 404 and not_found is not None:
                raise NotFound(not_found)
            if not response.is_success:
                raise RemoteServiceError(
                    f"{failure}: {response.reason_phrase}",
                    response.status_code,
                )
            return response.json()

        except CatalogError as exc:
            logger.info("Catalog request failed: %s %s", url, exc)
            raise
        except httpx.TransportError as exc:
            logger.info("Catalog unreachable: %s (%s)", url, type(exc).__name__)
            raise ConnectivityError(NETWORK_ERROR_MESSAGE) from exc
        except Exception as exc:
            logger.info("Unexpected catalog failure: %s (%s)", url, type(exc).__name__)
            raise RemoteServiceError(unexpected) from exc


def _extract_products(payload: Any, unexpected: str) -> list[RawRecord]:
    """Extrae `products` de una respuesta de listado; ignora total/skip/limit."""

    if not isinstance(payload, dict):
        raise RemoteServiceError(unexpected)
    products = payload.get("products")
    if not isinstance(products, list):
        raise RemoteServiceError(unexpected)
    return products
