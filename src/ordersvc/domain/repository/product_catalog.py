"""Abstract gateway to the remote product catalog.

Defined in the domain layer so the domain never depends on the
transport.  The HTTP implementation lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordersvc.domain.model.product import Product


class ProductCatalog(ABC):

    @abstractmethod
    def fetch_product(self, product_id: str) -> Product:
        """Return the current catalog record for *product_id*.

        Raises ProductNotFoundError when the catalog does not know the
        product and UpstreamUnavailableError when it cannot be asked.
        """
