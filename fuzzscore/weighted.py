"""
Composite scorers built on the ratio family.

Summary:
- `quick_ratio`: `ratio` of the normalized strings.
- `weighted_ratio`: picks the best of several scorers, down-weighting the
  partial and token variants depending on how different the input lengths
  are. A reasonable default when nothing is known about the inputs.

Score range:
- Returns an int in [0, 100]. If either input normalizes to empty, returns 0.
"""

from __future__ import annotations

from .ratio import _partial_ratio, _ratio
from .registry import SCORER_REGISTRY
from .tokens import (
    partial_token_set_ratio,
    partial_token_sort_ratio,
    token_set_ratio,
    token_sort_ratio,
)
from .utils import full_process, intr, validate_string

UNBASE_SCALE = 0.95
PARTIAL_SCALE = 0.90
LONG_PARTIAL_SCALE = 0.60
# length ratios at which partial matching kicks in / gets penalized harder
PARTIAL_MIN_LENGTH_RATIO = 1.5
LONG_LENGTH_RATIO = 8


def quick_ratio(text_a: str, text_b: str, force_ascii: bool = False) -> int:
    p_a = full_process(text_a, force_ascii=force_ascii)
    p_b = full_process(text_b, force_ascii=force_ascii)
    if not validate_string(p_a) or not validate_string(p_b):
        return 0
    return _ratio(p_a, p_b)


def weighted_ratio(text_a: str, text_b: str, force_ascii: bool = False) -> int:
    """Best of the ratio family, weighted by the length difference.

    - Lengths within a factor of 1.5: max of `ratio` and the token sort/set
      ratios scaled by 0.95.
    - Otherwise the partial variants are tried too, scaled by 0.9 (0.6 when
      one string is more than 8 times longer).
    """
    p_a = full_process(text_a, force_ascii=force_ascii)
    p_b = full_process(text_b, force_ascii=force_ascii)
    if not validate_string(p_a) or not validate_string(p_b):
        return 0

    base = _ratio(p_a, p_b)
    len_ratio = max(len(p_a), len(p_b)) / min(len(p_a), len(p_b))

    if len_ratio < PARTIAL_MIN_LENGTH_RATIO:
        tsor = token_sort_ratio(p_a, p_b, full_process=False) * UNBASE_SCALE
        tser = token_set_ratio(p_a, p_b, full_process=False) * UNBASE_SCALE
        return intr(max(base, tsor, tser))

    partial_scale = LONG_PARTIAL_SCALE if len_ratio > LONG_LENGTH_RATIO else PARTIAL_SCALE
    partial = _partial_ratio(p_a, p_b) * partial_scale
    ptsor = (
        partial_token_sort_ratio(p_a, p_b, full_process=False)
        * UNBASE_SCALE
        * partial_scale
    )
    ptser = (
        partial_token_set_ratio(p_a, p_b, full_process=False)
        * UNBASE_SCALE
        * partial_scale
    )
    return intr(max(base, partial, ptsor, ptser))


# Register in global registry
SCORER_REGISTRY["quick_ratio"] = quick_ratio
SCORER_REGISTRY["weighted_ratio"] = weighted_ratio
