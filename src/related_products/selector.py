"""Related-products selector for the product detail page.

Algorithm (up to TARGET_COUNT = 4 products):
1. Drop the current product (and repeated ids) from the pool
2. Tier 1: same brand AND same category, pool order
3. Tier 2: same category, ranked by spec similarity; near-equal scores
   (same bucket of width 5) shuffled among themselves
4. Tier 3: any remaining same-category products, shuffled, as backfill
"""

from __future__ import annotations

from collections.abc import Sequence

from ..common.models import Product
from .scorer import COMPARABLE_SPEC_KEYS, SCORE_BUCKET_WIDTH, SpecSimilarityScorer
from .shuffle import RandomSource, fisher_yates_shuffle

TARGET_COUNT = 4


class RelatedProductSelector:
    """Picks related products with brand → similarity → backfill tiers.

    Pure: no I/O, no logging, and the only state is configuration. Pass a
    seeded ``random.Random`` as ``rng`` for reproducible tie-breaking.

    Usage:
        selector = RelatedProductSelector()
        related = selector.select(product, catalog_products)
    """

    def __init__(
        self,
        target_count: int = TARGET_COUNT,
        bucket_width: float = SCORE_BUCKET_WIDTH,
        comparable_keys: Sequence[str] = COMPARABLE_SPEC_KEYS,
        rng: RandomSource | None = None,
    ) -> None:
        if target_count < 1:
            raise ValueError(f"target_count must be at least 1, got {target_count}")
        self.target_count = target_count
        self.scorer = SpecSimilarityScorer(comparable_keys, bucket_width)
        self.rng = rng

    def select(
        self,
        current: Product,
        candidates: Sequence[Product],
        rng: RandomSource | None = None,
    ) -> list[Product]:
        """Select up to ``target_count`` products related to ``current``.

        Args:
            current: Product being viewed.
            candidates: Pool to choose from; may include ``current``.
            rng: Random source for tie-breaking, overriding the instance one.

        Returns:
            Related products, never containing ``current.id`` or a repeated id.
        """
        rng = rng if rng is not None else self.rng
        target = self.target_count
        pool = self._exclude_self(current, candidates)

        # Tier 1: same brand and category, pool order
        selected = [
            p for p in pool
            if p.brand == current.brand and p.category == current.category
        ][:target]

        if len(selected) >= target:
            return selected[:target]

        # Tier 2: same category, by spec similarity
        tier2 = self._unselected_in_category(current, pool, selected)
        remaining_slots = target - len(selected)
        ranked = self.scorer.rank(current, tier2, rng)
        selected.extend(s.product for s in ranked[:remaining_slots])

        # Tier 3: shuffled same-category backfill
        if len(selected) < target:
            backfill = self._unselected_in_category(current, pool, selected)
            shuffled = fisher_yates_shuffle(backfill, rng)
            selected.extend(shuffled[: target - len(selected)])

        return selected[:target]

    @staticmethod
    def _exclude_self(
        current: Product, candidates: Sequence[Product]
    ) -> list[Product]:
        """Drop the current product and any repeated id (first occurrence wins)."""
        seen = {current.id}
        pool: list[Product] = []
        for p in candidates:
            if p.id in seen:
                continue
            seen.add(p.id)
            pool.append(p)
        return pool

    @staticmethod
    def _unselected_in_category(
        current: Product,
        pool: Sequence[Product],
        selected: Sequence[Product],
    ) -> list[Product]:
        """Same-category pool members not yet selected, excluding ``current`` again."""
        taken = {p.id for p in selected}
        taken.add(current.id)
        return [
            p for p in pool
            if p.category == current.category and p.id not in taken
        ]


def select_related(
    current: Product,
    candidates: Sequence[Product],
    rng: RandomSource | None = None,
) -> list[Product]:
    """Select up to 4 products related to ``current`` with default settings."""
    return RelatedProductSelector().select(current, candidates, rng)
