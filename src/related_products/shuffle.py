"""Fisher–Yates shuffle with an injectable random source."""

from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything with ``random() -> float`` in [0, 1), e.g. random.Random."""

    def random(self) -> float: ...


def fisher_yates_shuffle(
    items: Sequence[T],
    rng: RandomSource | None = None,
) -> list[T]:
    """Return a uniformly shuffled copy of ``items``.

    The input sequence is left untouched. Pass ``random.Random(seed)`` for
    reproducible output; without one a fresh, unseeded generator is used so
    no module-level random state is shared between callers.
    """
    if rng is None:
        rng = random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
