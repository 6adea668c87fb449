"""
Error taxonomy for the DummyJSON products integration.

Every failure the products client sees is classified into exactly one kind:
- NOT_FOUND: the requested product id does not exist upstream
- UNAVAILABLE: upstream 5xx, connection failure, timeout or unparsable body
- INVALID_REQUEST: upstream rejected the request as malformed

The API layer turns a kind into an HTTP status with `status_for_error`.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

SERVICE_UNAVAILABLE_MESSAGE = "Serviço DummyJSON indisponível"
INVALID_REQUEST_MESSAGE = "Requisição inválida"


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
    INVALID_REQUEST = "invalid_request"


class ProductClientError(Exception):
    """Base class for classified products client failures."""

    kind: ErrorKind = ErrorKind.UNAVAILABLE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ProductNotFoundError(ProductClientError):
    kind = ErrorKind.NOT_FOUND


class ProductServiceUnavailableError(ProductClientError):
    kind = ErrorKind.UNAVAILABLE


class InvalidProductRequestError(ProductClientError):
    kind = ErrorKind.INVALID_REQUEST


_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNAVAILABLE: 503,
    ErrorKind.INVALID_REQUEST: 400,
}


def classify_status(
    status_code: int,
    *,
    client_error: type = InvalidProductRequestError,
    client_error_message: str = INVALID_REQUEST_MESSAGE,
    fallback_message: str = SERVICE_UNAVAILABLE_MESSAGE,
) -> Optional[ProductClientError]:
    """
    Map an upstream status code to a classified error.

    Returns None for 2xx. 4xx produces `client_error(client_error_message)`,
    5xx produces the generic unavailable error and anything else (1xx, 3xx,
    out-of-range codes) is unavailable with `fallback_message`.
    """
    if 200 <= status_code < 300:
        return None
    if 400 <= status_code < 500:
        return client_error(client_error_message)
    if 500 <= status_code < 600:
        return ProductServiceUnavailableError(SERVICE_UNAVAILABLE_MESSAGE)
    return ProductServiceUnavailableError(fallback_message)


def status_for_error(error: ProductClientError) -> int:
    return _STATUS_BY_KIND[error.kind]
