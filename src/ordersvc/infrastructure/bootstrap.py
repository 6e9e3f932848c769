"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from ordersvc.infrastructure.http.product_client import HttpProductCatalog
from ordersvc.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
_DEFAULT_PRODUCT_SERVICE_URL = "http://localhost:8081"
_DEFAULT_PRODUCT_TIMEOUT = 5.0


def data_dir() -> Path:
    return Path(os.getenv("ORDERSVC_DATA_DIR") or _DEFAULT_DATA_DIR)


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")


def product_catalog() -> HttpProductCatalog:
    return HttpProductCatalog(
        base_url=os.getenv("ORDERSVC_PRODUCT_SERVICE_URL", _DEFAULT_PRODUCT_SERVICE_URL),
        timeout=float(os.getenv("ORDERSVC_PRODUCT_TIMEOUT", _DEFAULT_PRODUCT_TIMEOUT)),
    )
