# matching.py
from __future__ import annotations

import random
from typing import Any, Sequence


def sample_matches(candidates: Sequence[Any], limit: int, rng: random.Random | None = None) -> list[Any]:
    """Uniform random sample without replacement of ``min(limit, len(candidates))``.

    There is no scoring; this is a placeholder until a real ranking exists.
    The input sequence is not reordered.
    """
    if limit <= 0 or not candidates:
        return []
    chooser = rng or random
    return chooser.sample(list(candidates), min(limit, len(candidates)))
