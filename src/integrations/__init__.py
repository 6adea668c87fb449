"""
Integrations layer.
This package contains all code used to communicate with external systems:
- DummyJSON product catalogue (list and single-product lookups)

Key rule:
- API endpoints MUST NOT call external APIs directly.
- Endpoints call integration clients (under src/integrations/clients).
- Clients raise only the classified errors defined in src/integrations/errors.py.

Wiring:
- The client instance is built from configuration in ONE place (src/api/main.py).
"""

from .contracts.products import Product, ProductListEnvelope
from .errors import (
    ErrorKind,
    InvalidProductRequestError,
    ProductClientError,
    ProductNotFoundError,
    ProductServiceUnavailableError,
    classify_status,
    status_for_error,
)

__all__ = [
    # contracts
    "Product", "ProductListEnvelope",
    # errors
    "ErrorKind", "ProductClientError", "ProductNotFoundError",
    "ProductServiceUnavailableError", "InvalidProductRequestError",
    "classify_status", "status_for_error",
]
