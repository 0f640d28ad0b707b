"""Related products for a catalog product id."""

from __future__ import annotations

import logging

from ..common.config import RelatedProductsSettings, settings as default_settings
from ..common.models import Product
from .catalog import ProductCatalog
from .models import RelatedSelection
from .selector import RelatedProductSelector
from .shuffle import RandomSource

logger = logging.getLogger(__name__)


class RelatedProductsService:
    """Looks a product up in the catalog and selects its related products.

    The whole catalog is the candidate pool, as on the product page.
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        settings: RelatedProductsSettings | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.catalog = catalog
        self.settings = settings or default_settings.related
        self.selector = RelatedProductSelector(
            target_count=self.settings.target_count,
            bucket_width=self.settings.score_bucket_width,
            comparable_keys=self.settings.comparable_spec_keys,
            rng=rng,
        )

    def select_for(self, product_id: str) -> RelatedSelection:
        """Build a RelatedSelection for ``product_id``.

        Raises:
            ProductNotFoundError: If the id is not in the catalog.
        """
        product = self.catalog.get(product_id)
        related = self.selector.select(product, self.catalog.products)
        logger.info(
            "Related products for %s (%s): %d found",
            product.id, product.category, len(related),
        )
        logger.debug("Related ids for %s: %s", product.id, [p.id for p in related])
        return RelatedSelection(
            product=product,
            related=related,
            pool_size=len(self.catalog),
        )

    def related_for(self, product_id: str) -> list[Product]:
        """Related products for ``product_id`` as a plain list."""
        return self.select_for(product_id).related
