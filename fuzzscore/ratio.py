"""
Character-level ratio scorers.

Summary:
- `ratio`: share of characters covered by the matching blocks,
  200 * matched / (len(a) + len(b)), rounded half-down.
- `partial_ratio`: best `ratio` of the shorter string against an equally long
  window of the longer one. Windows are anchored on the matching blocks.

When to use:
- `ratio` for strings of similar length where case and order matter.
- `partial_ratio` when one string is expected inside the other
  (e.g. "new york mets" vs "the wonderful new york mets").

Score range:
- Returns an int in [0, 100]. `ratio("", "") == 100`; `partial_ratio` returns
  0 whenever the shorter string is empty.
"""

from __future__ import annotations

from typing import Sequence

from .matcher import get_matching_blocks
from .registry import SCORER_REGISTRY
from .utils import check_string, round_score


def _ratio(a: Sequence, b: Sequence) -> int:
    total = len(a) + len(b)
    if total == 0:
        return 100
    # canonical order keeps the score symmetric
    if (len(a), a) > (len(b), b):
        a, b = b, a
    matched = sum(block.size for block in get_matching_blocks(a, b))
    return round_score(2.0 * matched / total)


def _partial_ratio(a: str, b: str) -> int:
    if len(a) <= len(b):
        shorter, longer = a, b
    else:
        shorter, longer = b, a
    if not shorter:
        return 0

    best = 0
    seen = set()
    for block in get_matching_blocks(shorter, longer):
        start = max(0, block.b - block.a)
        end = min(start + len(shorter), len(longer))
        if (start, end) in seen:
            continue
        seen.add((start, end))
        score = _ratio(shorter, longer[start:end])
        if score > best:
            best = score
            if best == 100:
                break
    return best


def ratio(text_a: str, text_b: str) -> int:
    """Similarity of two raw strings (case sensitive, order sensitive)."""
    check_string(text_a, "text_a")
    check_string(text_b, "text_b")
    return _ratio(text_a, text_b)


def partial_ratio(text_a: str, text_b: str) -> int:
    """Best `ratio` of the shorter string against windows of the longer one."""
    check_string(text_a, "text_a")
    check_string(text_b, "text_b")
    return _partial_ratio(text_a, text_b)


# Register in global registry
SCORER_REGISTRY["ratio"] = ratio
SCORER_REGISTRY["partial_ratio"] = partial_ratio
