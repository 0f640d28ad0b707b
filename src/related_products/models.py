"""Data models for the related-products module.

All models use @dataclass with to_dict() for JSON serialization,
matching the established pattern of the selector modules.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..common.models import Product


@dataclass
class ScoredCandidate:
    """A same-category candidate with its spec-similarity score."""

    product: Product
    score: float = 0.0
    bucket: int = 0
    shared_keys: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "product_id": self.product.id,
            "score": round(self.score, 3),
            "bucket": self.bucket,
            "shared_keys": list(self.shared_keys),
        }


@dataclass
class RelatedSelection:
    """Related products chosen for one product page."""

    product: Product
    related: list[Product] = field(default_factory=list)
    pool_size: int = 0

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def related_ids(self) -> list[str]:
        return [p.id for p in self.related]

    def to_dict(self) -> dict:
        return {
            "product_id": self.product.id,
            "category": self.product.category,
            "brand": self.product.brand,
            "pool_size": self.pool_size,
            "related": [p.to_dict() for p in self.related],
        }
