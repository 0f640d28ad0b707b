"""Exceptions raised around related-product selection.

The selector itself never raises; these come from catalog assembly and lookup.
"""

from __future__ import annotations


class RelatedProductsError(Exception):
    """Base class for related-products errors."""


class CatalogError(RelatedProductsError, ValueError):
    """Catalog data could not be read or failed validation."""


class ProductNotFoundError(RelatedProductsError, KeyError):
    """No product with the requested id exists in the catalog."""

    def __init__(self, product_id: str) -> None:
        super().__init__(product_id)
        self.product_id = product_id

    def __str__(self) -> str:
        return f"Product not found: {self.product_id}"
