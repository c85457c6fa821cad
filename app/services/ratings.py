from __future__ import annotations

import math
from typing import Any

MIN_STARS = 1
MAX_STARS = 5


def is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        return False


def stars_for(vote: Any) -> int:
    # TMDB votes are 0-10; always show at least one star.
    if not is_finite_number(vote):
        return MIN_STARS
    return min(MAX_STARS, max(MIN_STARS, math.ceil(vote / 2)))
