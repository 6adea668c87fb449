import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from src.integrations.clients.real_http.dummyjson_products import DummyJSONProductsClient
from src.integrations.contracts.products import Product
from src.integrations.errors import ProductClientError, status_for_error

logger = logging.getLogger(__name__)

router = APIRouter()

# Plain ASCII digits only; ids must fit a signed 64-bit integer.
PRODUCT_ID_PATTERN = r"^-?[0-9]+$"
PRODUCT_ID_MIN = -(2**63)
PRODUCT_ID_MAX = 2**63 - 1


# Will be set by main.py after import
products_client: Optional[DummyJSONProductsClient] = None


def get_products_client() -> DummyJSONProductsClient:
    if products_client is None:
        raise RuntimeError("Products client is not configured. It is wired in src/api/main.py.")
    return products_client


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/products", tags=["Products"])
async def get_all_products(client: DummyJSONProductsClient = Depends(get_products_client)):
    """
    List all products from the upstream catalogue.
    - 200 with a JSON array when there is at least one product
    - 204 with no body when the catalogue is empty
    """
    products: List[Product] = await client.fetch_all()
    if not products:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return JSONResponse(content=[p.to_payload() for p in products])


@router.get("/products/{product_id}", tags=["Products"])
async def get_product_by_id(
    product_id: str = Path(..., pattern=PRODUCT_ID_PATTERN, description="ID do produto a ser buscado"),
    client: DummyJSONProductsClient = Depends(get_products_client),
):
    """Fetch a single product by its identifier."""
    # Longer digit runs cannot fit; skip int() so huge inputs never reach it.
    parsed_id = int(product_id) if len(product_id.lstrip("-")) <= 19 else None
    if parsed_id is None or not PRODUCT_ID_MIN <= parsed_id <= PRODUCT_ID_MAX:
        logger.info(f"Rejected out-of-range product id {product_id}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Parâmetro inválido: product_id")
    product = await client.fetch_by_id(parsed_id)
    return JSONResponse(content=product.to_payload())


async def product_client_error_handler(request: Request, exc: ProductClientError) -> JSONResponse:
    status_code = status_for_error(exc)
    logger.warning(f"{request.method} {request.url.path} -> {status_code} ({exc.kind.value}): {exc.message}")
    return error_response(status_code, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "path")
    message = f"Parâmetro inválido: {field}" if field else "Parâmetro inválido"
    logger.info(f"{request.method} {request.url.path} -> 400: {errors}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)
