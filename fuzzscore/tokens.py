"""
Token-level ratio scorers.

Summary:
- `token_sort_ratio`: normalize, sort the tokens, then `ratio`. Insensitive to
  word order and case.
- `token_set_ratio`: splits both token sets into the shared part and each
  side's leftovers, and keeps the best of the three pairwise comparisons.
  Extra words on either side barely move the score.
- `partial_token_sort_ratio` / `partial_token_set_ratio`: the same
  constructions compared with `partial_ratio`.

When to use:
- Useful when token order differs (e.g., "new york mets" vs "mets new york")
  and where repeated or extra tokens should not dominate the score.

Limitations:
- Purely lexical; tokens must match exactly after normalization.

Score range:
- Returns an int in [0, 100]. Both inputs normalizing to empty -> 100;
  exactly one empty -> 0 (token set variants).
"""

from __future__ import annotations

from typing import Callable, Iterable, List

from . import utils
from .ratio import _partial_ratio, _ratio
from .registry import SCORER_REGISTRY


class _TokenSet:
    """Ordered, duplicate-free collection of tokens."""

    __slots__ = ("_items",)

    def __init__(self, tokens: Iterable[str] = ()):
        self._items = dict.fromkeys(tokens)

    @classmethod
    def from_string(cls, s: str) -> "_TokenSet":
        return cls(utils.split(s))

    def __contains__(self, token: str) -> bool:
        return token in self._items

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def intersection(self, other: "_TokenSet") -> "_TokenSet":
        return _TokenSet(t for t in self if t in other)

    def difference(self, other: "_TokenSet") -> "_TokenSet":
        return _TokenSet(t for t in self if t not in other)

    def union(self, other: "_TokenSet") -> "_TokenSet":
        return _TokenSet(list(self) + list(other))

    def sorted_join(self, glue: str = " ") -> str:
        return glue.join(sorted(self))


def _prepare(s: str, force_ascii: bool, full_process: bool) -> str:
    utils.check_string(s)
    if full_process:
        return utils.full_process(s, force_ascii=force_ascii)
    return s


def _sorted_tokens(s: str) -> str:
    return " ".join(sorted(utils.split(s)))


def _token_sort(
    text_a: str,
    text_b: str,
    partial: bool,
    force_ascii: bool,
    full_process: bool,
) -> int:
    sorted_a = _sorted_tokens(_prepare(text_a, force_ascii, full_process))
    sorted_b = _sorted_tokens(_prepare(text_b, force_ascii, full_process))
    if partial:
        return _partial_ratio(sorted_a, sorted_b)
    return _ratio(sorted_a, sorted_b)


def _token_set(
    text_a: str,
    text_b: str,
    compare: Callable[[str, str], int],
    force_ascii: bool,
    full_process: bool,
) -> int:
    p_a = _prepare(text_a, force_ascii, full_process)
    p_b = _prepare(text_b, force_ascii, full_process)
    tokens_a = _TokenSet.from_string(p_a)
    tokens_b = _TokenSet.from_string(p_b)
    if not tokens_a and not tokens_b:
        return 100
    if not tokens_a or not tokens_b:
        return 0

    common = tokens_a.intersection(tokens_b)
    diff_a = tokens_a.difference(common)
    diff_b = tokens_b.difference(common)

    sorted_common = common.sorted_join()
    combined_a = common.union(diff_a).sorted_join()
    combined_b = common.union(diff_b).sorted_join()

    pairwise: List[int] = [
        compare(sorted_common, combined_a),
        compare(sorted_common, combined_b),
        compare(combined_a, combined_b),
    ]
    return max(pairwise)


def token_sort_ratio(
    text_a: str, text_b: str, force_ascii: bool = False, full_process: bool = True
) -> int:
    """`ratio` of the alphabetically sorted, normalized tokens."""
    return _token_sort(text_a, text_b, False, force_ascii, full_process)


def partial_token_sort_ratio(
    text_a: str, text_b: str, force_ascii: bool = False, full_process: bool = True
) -> int:
    return _token_sort(text_a, text_b, True, force_ascii, full_process)


def token_set_ratio(
    text_a: str, text_b: str, force_ascii: bool = False, full_process: bool = True
) -> int:
    """Compare the shared tokens against each side's full token set.

    Method: with `I` the shared tokens and `A`, `B` each side's tokens, scores
    `ratio(I, A)`, `ratio(I, B)` and `ratio(A, B)` (all sorted and joined with
    single spaces) and returns the maximum.
    """
    return _token_set(text_a, text_b, _ratio, force_ascii, full_process)


def partial_token_set_ratio(
    text_a: str, text_b: str, force_ascii: bool = False, full_process: bool = True
) -> int:
    return _token_set(text_a, text_b, _partial_ratio, force_ascii, full_process)


# Register in global registry
SCORER_REGISTRY["token_sort_ratio"] = token_sort_ratio
SCORER_REGISTRY["token_set_ratio"] = token_set_ratio
SCORER_REGISTRY["partial_token_sort_ratio"] = partial_token_sort_ratio
SCORER_REGISTRY["partial_token_set_ratio"] = partial_token_set_ratio
