"""httpx-backed implementation of ProductCatalog.

Talks to the product service's ``GET /products/{id}`` endpoint.  The
client timeout is the request deadline; running out of it is reported
as the catalog being unavailable.
"""

from __future__ import annotations

import httpx
import structlog

from ordersvc.domain.exceptions import (
    ProductNotFoundError,
    UpstreamUnavailableError,
    ValidationError,
)
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.value_objects import Money
from ordersvc.domain.repository.product_catalog import ProductCatalog

logger = structlog.get_logger(__name__)


class HttpProductCatalog(ProductCatalog):

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def fetch_product(self, product_id: str) -> Product:
        try:
            response = self._client.get(f"/products/{product_id}")
        except httpx.TimeoutException as exc:
            logger.warning("Product service timed out", product_id=product_id)
            raise UpstreamUnavailableError(
                f"Product service timed out fetching product '{product_id}'"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "Product service request failed",
                product_id=product_id,
                error=str(exc),
            )
            raise UpstreamUnavailableError(
                f"Product service unreachable fetching product '{product_id}': {exc}"
            ) from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise ProductNotFoundError(f"Product not found: '{product_id}'")
        if response.is_error:
            logger.warning(
                "Product service returned an error",
                product_id=product_id,
                status_code=response.status_code,
            )
            raise UpstreamUnavailableError(
                f"Product service answered {response.status_code} "
                f"for product '{product_id}'"
            )

        try:
            return self._to_domain(response.json())
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise UpstreamUnavailableError(
                f"Malformed product payload for '{product_id}': {exc}"
            ) from exc

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpProductCatalog:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=str(raw["id"]),
            name=raw["name"],
            description=raw.get("description") or "",
            price=Money.of(raw["price"]),
            quantity=int(raw.get("quantity") or 0),
        )
