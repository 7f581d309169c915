"""
Longest matching blocks between two sequences.

Summary:
- Ratcliff/Obershelp decomposition: find the longest run shared by both
  sequences, then repeat on the unmatched parts to its left and right.
- Works on any indexable sequences of hashable units, so the same code serves
  character-level (`str`) and token-level (`list[str]`) comparisons.

Tie-break:
- Among equally long runs the one starting earliest in `a` wins, then the one
  starting earliest in `b`. Downstream scores depend on this placement, so it
  must not be swapped for LCS or edit distance.

Performance:
- Each longest-match search is O(len(a) * occurrences in b); the decomposition
  repeats it once per block found. Callers scoring very long or adversarial
  inputs should cap lengths before calling.
"""

from __future__ import annotations

from typing import Dict, Hashable, List, NamedTuple, Optional, Sequence


class MatchingBlock(NamedTuple):
    a: int
    b: int
    size: int


def _index(b: Sequence[Hashable]) -> Dict[Hashable, List[int]]:
    b2j: Dict[Hashable, List[int]] = {}
    for j, unit in enumerate(b):
        b2j.setdefault(unit, []).append(j)
    return b2j


def find_longest_match(
    a: Sequence[Hashable],
    b: Sequence[Hashable],
    alo: int,
    ahi: int,
    blo: int,
    bhi: int,
    b2j: Optional[Dict[Hashable, List[int]]] = None,
) -> MatchingBlock:
    """Return the longest block shared by `a[alo:ahi]` and `b[blo:bhi]`.

    If nothing matches, returns `MatchingBlock(alo, blo, 0)`.
    """
    if b2j is None:
        b2j = _index(b)
    besti, bestj, bestsize = alo, blo, 0
    # runs[j] = length of the match ending at a[i-1], b[j]
    runs: Dict[int, int] = {}
    for i in range(alo, ahi):
        new_runs: Dict[int, int] = {}
        for j in b2j.get(a[i], ()):
            if j < blo:
                continue
            if j >= bhi:
                break
            k = new_runs[j] = runs.get(j - 1, 0) + 1
            # strict '>' keeps the earliest start on ties
            if k > bestsize:
                besti, bestj, bestsize = i - k + 1, j - k + 1, k
        runs = new_runs
    return MatchingBlock(besti, bestj, bestsize)


def get_matching_blocks(
    a: Sequence[Hashable], b: Sequence[Hashable]
) -> List[MatchingBlock]:
    """Return the non-overlapping matching blocks of `a` and `b`.

    Blocks are ordered by increasing position in `a` (and therefore in `b`).
    Zero-length blocks are never included.
    """
    b2j = _index(b)
    blocks: List[MatchingBlock] = []
    pending = [(0, len(a), 0, len(b))]
    while pending:
        alo, ahi, blo, bhi = pending.pop()
        block = find_longest_match(a, b, alo, ahi, blo, bhi, b2j)
        i, j, k = block
        if not k:
            continue
        blocks.append(block)
        if alo < i and blo < j:
            pending.append((alo, i, blo, j))
        if i + k < ahi and j + k < bhi:
            pending.append((i + k, ahi, j + k, bhi))
    blocks.sort()
    return blocks
