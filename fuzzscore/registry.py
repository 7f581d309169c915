"""
Global scorer registry.

Exposes `SCORER_REGISTRY`: a mapping from a string key to a callable of the
form `(text_a: str, text_b: str) -> int` that returns a similarity score in
the range [0, 100].
"""

from typing import Callable, Dict, Union

from .utils import InvalidArgument

Scorer = Callable[[str, str], int]

SCORER_REGISTRY: Dict[str, Scorer] = {}


def get_scorer(scorer: Union[str, Scorer]) -> Scorer:
    """Resolve a registry key or pass a callable through."""
    if callable(scorer):
        return scorer
    try:
        return SCORER_REGISTRY[scorer]
    except KeyError:
        raise InvalidArgument(
            f"Unknown scorer {scorer!r}. Available: {sorted(SCORER_REGISTRY)}"
        ) from None
