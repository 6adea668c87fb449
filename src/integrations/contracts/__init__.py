"""
Contracts (data models).

This folder defines the response shapes of the upstream product catalogue:
- Product: a single catalogue item
- ProductListEnvelope: the list endpoint wrapper with pagination fields

The products client decodes upstream bodies into these models and the API
layer serializes them back out, so nothing relies on ad-hoc dicts.
"""

from .products import Product, ProductListEnvelope

__all__ = ["Product", "ProductListEnvelope"]
