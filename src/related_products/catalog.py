"""Product catalog assembly and lookup.

The storefront's candidate universe is the static category-keyed catalog
file (``{"solar-panels": [...], "inverters": [...]}``) followed by products
from other sources such as database rows. Products are deduplicated by id
and the first occurrence wins, so the static file takes precedence.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from pydantic import ValidationError

from ..common.models import Product
from .errors import CatalogError, ProductNotFoundError

logger = logging.getLogger(__name__)


def _to_product(record: object, where: str) -> Product:
    if isinstance(record, Product):
        return record
    if not isinstance(record, Mapping):
        raise CatalogError(f"{where}: expected a product object, got {type(record).__name__}")
    try:
        return Product.model_validate(dict(record))
    except ValidationError as e:
        raise CatalogError(f"{where}: invalid product record: {e}") from e


class ProductCatalog:
    """Immutable, id-unique list of catalog products.

    Usage:
        catalog = ProductCatalog.from_json("data/products.json")
        catalog = catalog.merge(db_rows)
        panel = catalog.get("SP-001")
    """

    def __init__(self, products: Iterable[Product | Mapping] = ()) -> None:
        unique: list[Product] = []
        index: dict[str, Product] = {}
        dropped = 0
        for i, record in enumerate(products):
            product = _to_product(record, f"product[{i}]")
            if product.id in index:
                dropped += 1
                continue
            index[product.id] = product
            unique.append(product)
        if dropped:
            logger.debug("Dropped %d duplicate product id(s)", dropped)
        self._products = tuple(unique)
        self._index = index

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_category_map(cls, data: Mapping[str, object]) -> ProductCatalog:
        """Flatten a ``{category_slug: [product, ...]}`` mapping in key order."""
        products: list[Product] = []
        for category, records in data.items():
            if not isinstance(records, list):
                raise CatalogError(
                    f"Category {category!r}: expected a list of products, "
                    f"got {type(records).__name__}"
                )
            for i, record in enumerate(records):
                products.append(_to_product(record, f"{category}[{i}]"))
        return cls(products)

    @classmethod
    def from_data(cls, data: object) -> ProductCatalog:
        """Build from parsed JSON: a category mapping or a flat product list."""
        if isinstance(data, Mapping):
            return cls.from_category_map(data)
        if isinstance(data, list):
            return cls(data)
        raise CatalogError(
            f"Catalog must be an object keyed by category or a list, "
            f"got {type(data).__name__}"
        )

    @classmethod
    def from_json(cls, path: str | Path) -> ProductCatalog:
        """Load a catalog JSON file (UTF-8)."""
        p = Path(path)
        try:
            with open(p, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise CatalogError(f"Catalog file not found: {p}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog file {p} is not valid JSON: {e}") from e

        catalog = cls.from_data(data)
        logger.info("Loaded %d products from %s", len(catalog), p)
        return catalog

    def merge(self, extra: Iterable[Product | Mapping]) -> ProductCatalog:
        """Return a new catalog with ``extra`` appended; existing ids win."""
        extra_products = [
            _to_product(record, f"extra[{i}]") for i, record in enumerate(extra)
        ]
        merged = ProductCatalog([*self._products, *extra_products])
        logger.info(
            "Merged %d extra products (%d new) into catalog of %d",
            len(extra_products), len(merged) - len(self), len(self),
        )
        return merged

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    def find(self, product_id: str) -> Product | None:
        return self._index.get(str(product_id))

    def get(self, product_id: str) -> Product:
        """Return the product with ``product_id``.

        Raises:
            ProductNotFoundError: If no such product exists.
        """
        product = self.find(product_id)
        if product is None:
            raise ProductNotFoundError(str(product_id))
        return product

    def categories(self) -> list[str]:
        """Distinct category slugs in first-seen order."""
        return list(dict.fromkeys(p.category for p in self._products))

    def by_category(self, category: str) -> list[Product]:
        return [p for p in self._products if p.category == category]

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __contains__(self, product_id: object) -> bool:
        return str(product_id) in self._index
