"""Related Products Module: up to 4 related items for a product page.

Tiered selection: same brand + category first, then same category ranked
by spec similarity (wattage, capacity, power, ...), then a shuffled
same-category backfill.
"""

from .catalog import ProductCatalog
from .errors import CatalogError, ProductNotFoundError, RelatedProductsError
from .models import RelatedSelection, ScoredCandidate
from .scorer import SpecSimilarityScorer, similarity_score
from .selector import TARGET_COUNT, RelatedProductSelector, select_related
from .service import RelatedProductsService
from .shuffle import fisher_yates_shuffle
from .spec_parser import parse_leading_number

__all__ = [
    "CatalogError",
    "ProductCatalog",
    "ProductNotFoundError",
    "RelatedProductSelector",
    "RelatedProductsError",
    "RelatedProductsService",
    "RelatedSelection",
    "ScoredCandidate",
    "SpecSimilarityScorer",
    "TARGET_COUNT",
    "fisher_yates_shuffle",
    "parse_leading_number",
    "select_related",
    "similarity_score",
]
