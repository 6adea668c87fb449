"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

import src.api.endpoints.products as products_module
from src.api.endpoints.products import (
    product_client_error_handler,
    request_validation_error_handler,
    router as products_router,
)
from src.integrations.clients.real_http.dummyjson_products import DummyJSONProductsClient
from src.integrations.errors import ProductClientError
from src.utils.config_loader import load_dummyjson_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVICE_NAME = "DummyJSON API"
SERVICE_VERSION = "1.0.0"

# Initialize FastAPI app
app = FastAPI(
    title=SERVICE_NAME,
    description="API for interacting with DummyJSON data",
    version=SERVICE_VERSION,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================

# Load upstream configuration once per process
dummyjson_cfg = load_dummyjson_config()

products_module.products_client = DummyJSONProductsClient(
    base_url=dummyjson_cfg.base_url,
    timeout_seconds=dummyjson_cfg.timeout_seconds,
)

# Register products router (bare path plus the /api prefix used by existing callers)
app.include_router(products_router)
app.include_router(products_router, prefix="/api")

app.add_exception_handler(ProductClientError, product_client_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/", tags=["Health"])
async def root():
    """Health check endpoint."""
    return {"service": SERVICE_NAME, "status": "healthy", "version": SERVICE_VERSION, "timestamp": datetime.now().isoformat()}


@app.get("/health", tags=["Health"])
async def health_check():
    """Liveness check. Does not call the upstream catalogue."""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting {SERVICE_NAME} (upstream={dummyjson_cfg.base_url}, timeout={dummyjson_cfg.timeout_seconds}s)")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info(f"Shutting down {SERVICE_NAME}...")
