"""
DummyJSON Products HTTP Client.

Purpose:
- Fetches product data from the DummyJSON catalogue (GET /products, GET /products/{id})
- Decodes bodies into the contracts in src/integrations/contracts/products.py

Error handling:
- Every failure is raised as a ProductClientError subclass (see src/integrations/errors.py)
- Raw httpx / JSON / validation exceptions never leave this module

Important:
- This client is the ONLY place that talks to DummyJSON.
- No retries and no caching: one outbound call per invocation.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from src.integrations.contracts.products import Product, ProductListEnvelope
from src.integrations.errors import (
    INVALID_REQUEST_MESSAGE,
    InvalidProductRequestError,
    ProductNotFoundError,
    ProductServiceUnavailableError,
    classify_status,
)

logger = logging.getLogger(__name__)

LIST_FAILURE_MESSAGE = "Falha ao recuperar os produtos"
ITEM_FAILURE_MESSAGE = "Falha ao recuperar o produto"


def not_found_message(product_id: int) -> str:
    return f"Produto não encontrado com o ID: {product_id}"


class DummyJSONProductsClient:
    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        base_url = (base_url or "").strip().rstrip("/")
        if not base_url:
            raise ValueError("DummyJSON base URL is not configured.")
        self._base_url = base_url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch_all(self) -> List[Product]:
        """
        Return the products of the upstream list envelope.

        Raises InvalidProductRequestError on 4xx and ProductServiceUnavailableError
        on 5xx, transport failures or an unparsable envelope.
        """
        data = await self._get_json(
            "/products",
            client_error=InvalidProductRequestError,
            client_error_message=INVALID_REQUEST_MESSAGE,
            failure_message=LIST_FAILURE_MESSAGE,
        )
        try:
            envelope = ProductListEnvelope.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid product list envelope from DummyJSON: {e}")
            raise ProductServiceUnavailableError(LIST_FAILURE_MESSAGE) from e

        logger.info(
            "Fetched %d products from DummyJSON (total=%s skip=%s limit=%s)",
            len(envelope.products),
            envelope.total,
            envelope.skip,
            envelope.limit,
        )
        return envelope.products

    async def fetch_by_id(self, product_id: int) -> Product:
        """
        Return a single product.

        Raises ProductNotFoundError on 4xx (message carries the id) and
        ProductServiceUnavailableError on 5xx, transport failures or a bad body.
        """
        data = await self._get_json(
            f"/products/{product_id}",
            client_error=ProductNotFoundError,
            client_error_message=not_found_message(product_id),
            failure_message=ITEM_FAILURE_MESSAGE,
        )
        try:
            return Product.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid product payload from DummyJSON for id={product_id}: {e}")
            raise ProductServiceUnavailableError(ITEM_FAILURE_MESSAGE) from e

    async def _get_json(
        self,
        path: str,
        *,
        client_error: type,
        client_error_message: str,
        failure_message: str,
    ) -> Any:
        url = f"{self._base_url}{path}"
        try:
            logger.info(f"GET {url}")
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            # Timeouts and refused connections are both RequestError subclasses.
            logger.error(f"Request error connecting to DummyJSON at {url}: {e!r}")
            raise ProductServiceUnavailableError(failure_message) from e

        error = classify_status(
            response.status_code,
            client_error=client_error,
            client_error_message=client_error_message,
            fallback_message=failure_message,
        )
        if error is not None:
            logger.warning(
                "DummyJSON returned %s for %s; classified as %s",
                response.status_code,
                url,
                error.kind.value,
            )
            raise error

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"DummyJSON returned a non-JSON body for {url}: {response.text[:300]!r}")
            raise ProductServiceUnavailableError(failure_message) from e
