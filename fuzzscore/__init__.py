"""
Fuzzy string similarity scores in [0, 100].

Exposes the scorer functions, `full_process` and `SCORER_REGISTRY`, and
imports the scorer modules for side-effect registration into the registry.
`fuzzscore.frame` (pandas) is not imported here.
"""

from .registry import SCORER_REGISTRY, get_scorer  # noqa: F401
from .utils import InvalidArgument, full_process, round_score  # noqa: F401

# Import modules that register themselves in the registry on import.
from .ratio import partial_ratio, ratio  # noqa: F401
from .tokens import (  # noqa: F401
    partial_token_set_ratio,
    partial_token_sort_ratio,
    token_set_ratio,
    token_sort_ratio,
)
from .weighted import quick_ratio, weighted_ratio  # noqa: F401
from . import process  # noqa: F401

__version__ = "0.1.0"
