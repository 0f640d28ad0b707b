"""Spec similarity scoring for same-category candidates.

For every comparable key that parses to a number on both products:

    similarity = 100 - |a - b| / max(a, b) * 100    (100 when max(a, b) <= 0)

and the candidate's score is the sum over shared keys. A candidate sharing
no comparable key scores 0. Scores are then grouped into buckets of width 5;
candidates in the same bucket count as tied and are shuffled among themselves.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from ..common.config import DEFAULT_COMPARABLE_SPEC_KEYS
from ..common.models import Product
from .models import ScoredCandidate
from .shuffle import RandomSource, fisher_yates_shuffle
from .spec_parser import parse_leading_number

COMPARABLE_SPEC_KEYS: tuple[str, ...] = tuple(DEFAULT_COMPARABLE_SPEC_KEYS)

SCORE_BUCKET_WIDTH = 5.0


def key_similarity(current: float, candidate: float) -> float:
    """Similarity of two numeric spec values on a 0–100 scale."""
    difference = abs(current - candidate)
    max_value = max(current, candidate)
    if max_value > 0:
        return 100 - (difference / max_value * 100)
    return 100.0


def similarity_score(
    current_specs: Mapping[str, object],
    candidate_specs: Mapping[str, object],
    keys: Sequence[str] = COMPARABLE_SPEC_KEYS,
) -> tuple[float, list[str]]:
    """Sum key similarities over the comparable keys both spec maps share.

    Keys missing on either side, or whose value has no leading number,
    are skipped rather than scored as zero.

    Returns:
        (score, shared_keys)
    """
    score = 0.0
    shared: list[str] = []
    for key in keys:
        current = parse_leading_number(current_specs.get(key))
        candidate = parse_leading_number(candidate_specs.get(key))
        if current is None or candidate is None:
            continue
        score += key_similarity(current, candidate)
        shared.append(key)
    return score, shared


def score_bucket(score: float, width: float = SCORE_BUCKET_WIDTH) -> int:
    """Bucket index for a score: half-up rounding of score / width."""
    return math.floor(score / width + 0.5)


class SpecSimilarityScorer:
    """Ranks same-category candidates by spec similarity to a product.

    Usage:
        scorer = SpecSimilarityScorer()
        ranked = scorer.rank(current, candidates, rng=random.Random(7))
        # ranked[0].product is the closest match (ties shuffled)
    """

    def __init__(
        self,
        keys: Sequence[str] = COMPARABLE_SPEC_KEYS,
        bucket_width: float = SCORE_BUCKET_WIDTH,
    ) -> None:
        if bucket_width <= 0:
            raise ValueError(f"bucket_width must be positive, got {bucket_width}")
        self.keys = tuple(keys)
        self.bucket_width = bucket_width

    def score(self, current: Product, candidate: Product) -> ScoredCandidate:
        """Score one candidate against the current product."""
        score, shared = similarity_score(current.specs, candidate.specs, self.keys)
        return ScoredCandidate(
            product=candidate,
            score=score,
            bucket=score_bucket(score, self.bucket_width),
            shared_keys=shared,
        )

    def score_all(
        self, current: Product, candidates: Sequence[Product]
    ) -> list[ScoredCandidate]:
        """Score candidates, sorted by score descending (stable for equal scores)."""
        scored = [self.score(current, c) for c in candidates]
        scored.sort(key=lambda s: s.score, reverse=True)
        return scored

    def rank(
        self,
        current: Product,
        candidates: Sequence[Product],
        rng: RandomSource | None = None,
    ) -> list[ScoredCandidate]:
        """Score, bucket and order candidates.

        Buckets come out highest first; order inside a bucket is a fresh
        Fisher–Yates permutation on every call.
        """
        buckets: dict[int, list[ScoredCandidate]] = {}
        for item in self.score_all(current, candidates):
            buckets.setdefault(item.bucket, []).append(item)

        ranked: list[ScoredCandidate] = []
        for bucket in sorted(buckets, reverse=True):
            ranked.extend(fisher_yates_shuffle(buckets[bucket], rng))
        return ranked


def rank_by_similarity(
    current: Product,
    candidates: Sequence[Product],
    rng: RandomSource | None = None,
    bucket_width: float = SCORE_BUCKET_WIDTH,
    keys: Sequence[str] = COMPARABLE_SPEC_KEYS,
) -> list[ScoredCandidate]:
    """Functional shortcut for SpecSimilarityScorer(keys, bucket_width).rank()."""
    return SpecSimilarityScorer(keys, bucket_width).rank(current, candidates, rng)
