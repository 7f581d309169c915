"""
Batch extraction: score one query against many choices.

Summary:
- `extract` / `extract_bests` / `extract_one` return the best-scoring choices
  for a query; `dedupe` collapses fuzzy duplicates in a list.
- `scorer` may be a callable or any key of `SCORER_REGISTRY`.
- Choices may be a sequence (results are `(choice, score)`) or a mapping /
  pandas Series (results are `(choice, score, key)`).

Each pair is scored independently, so callers are free to split large choice
lists across workers.
"""

from __future__ import annotations

import heapq
import logging
from operator import itemgetter
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

from .registry import Scorer, get_scorer
from .tokens import token_set_ratio
from .utils import full_process, validate_string
from .weighted import weighted_ratio

logger = logging.getLogger(__name__)

DEFAULT_SCORER: Scorer = weighted_ratio
DEFAULT_LIMIT = 5
DEDUPE_THRESHOLD = 70


def default_processor(value: Any) -> str:
    return full_process(str(value))


def _iter_choices(choices) -> Iterator[Tuple[Any, Any]]:
    # Mappings and pandas Series carry a key alongside each choice.
    if hasattr(choices, "items"):
        for key, choice in choices.items():
            yield key, choice
    else:
        for choice in choices:
            yield None, choice


def extract_without_order(
    query: Any,
    choices: Iterable,
    processor: Optional[Callable[[Any], str]] = default_processor,
    scorer: Union[str, Scorer] = DEFAULT_SCORER,
    score_cutoff: int = 0,
) -> Iterator[tuple]:
    """Yield every choice scoring at least `score_cutoff`, in input order."""
    score_fn = get_scorer(scorer)
    process = processor if processor is not None else (lambda x: x)

    processed_query = process(query)
    if not validate_string(processed_query):
        logger.warning(
            "Applied processor reduces query to an empty string, "
            "all comparisons will have score 0. [Query: %r]",
            query,
        )

    keyed = hasattr(choices, "items")
    for key, choice in _iter_choices(choices):
        if choice is None:
            continue
        score = score_fn(processed_query, process(choice))
        if score >= score_cutoff:
            yield (choice, score, key) if keyed else (choice, score)


def extract(
    query: Any,
    choices: Iterable,
    processor: Optional[Callable[[Any], str]] = default_processor,
    scorer: Union[str, Scorer] = DEFAULT_SCORER,
    limit: Optional[int] = DEFAULT_LIMIT,
) -> List[tuple]:
    """Return the `limit` best matches for `query`, best first.

    `limit=None` returns every choice, sorted by descending score.
    """
    return extract_bests(query, choices, processor, scorer, 0, limit)


def extract_bests(
    query: Any,
    choices: Iterable,
    processor: Optional[Callable[[Any], str]] = default_processor,
    scorer: Union[str, Scorer] = DEFAULT_SCORER,
    score_cutoff: int = 0,
    limit: Optional[int] = DEFAULT_LIMIT,
) -> List[tuple]:
    best = extract_without_order(query, choices, processor, scorer, score_cutoff)
    if limit is None:
        results = sorted(best, key=itemgetter(1), reverse=True)
    else:
        results = heapq.nlargest(limit, best, key=itemgetter(1))
    logger.debug("extract: %d result(s) for query %r", len(results), query)
    return results


def extract_one(
    query: Any,
    choices: Iterable,
    processor: Optional[Callable[[Any], str]] = default_processor,
    scorer: Union[str, Scorer] = DEFAULT_SCORER,
    score_cutoff: int = 0,
) -> Optional[tuple]:
    """Return the single best match, or None if nothing reaches the cutoff."""
    best = extract_without_order(query, choices, processor, scorer, score_cutoff)
    try:
        return max(best, key=itemgetter(1))
    except ValueError:
        return None


def dedupe(
    contains_dupes: List[str],
    threshold: int = DEDUPE_THRESHOLD,
    scorer: Union[str, Scorer] = token_set_ratio,
) -> List[str]:
    """Collapse fuzzy duplicates, keeping the longest spelling of each.

    Every item is matched against the whole list; matches scoring above
    `threshold` form its cluster, represented by the longest member
    (alphabetically first on equal length). If no duplicates are found the
    original list is returned.
    """
    representatives = []
    for item in contains_dupes:
        matches = extract(item, contains_dupes, limit=None, scorer=scorer)
        cluster = [m for m in matches if m[1] > threshold]
        if not cluster:
            representatives.append(item)
            continue
        if len(cluster) == 1:
            representatives.append(cluster[0][0])
            continue
        cluster = sorted(cluster, key=itemgetter(0))
        cluster = sorted(cluster, key=lambda m: len(m[0]), reverse=True)
        representatives.append(cluster[0][0])

    deduped = list(dict.fromkeys(representatives))
    if len(deduped) == len(contains_dupes):
        return contains_dupes
    logger.debug("dedupe: %d -> %d item(s)", len(contains_dupes), len(deduped))
    return deduped
