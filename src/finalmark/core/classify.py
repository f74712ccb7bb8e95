from __future__ import annotations

import math
from enum import Enum


class Category(str, Enum):
    SECURED = "secured"
    ACHIEVABLE = "achievable"
    DIFFICULT = "difficult"
    UNLIKELY = "unlikely"
    IMPOSSIBLE = "impossible"


# (inclusive upper bound, category), checked in order
CATEGORY_BANDS: list[tuple[float, Category]] = [
    (0, Category.SECURED),
    (85, Category.ACHIEVABLE),
    (95, Category.DIFFICULT),
    (100, Category.UNLIKELY),
]


def classify(required_score: float) -> Category:
    if math.isnan(required_score):
        return Category.IMPOSSIBLE
    for upper, category in CATEGORY_BANDS:
        if required_score <= upper:
            return category
    return Category.IMPOSSIBLE
