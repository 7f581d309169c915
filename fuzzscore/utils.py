"""
String processing and score rounding helpers.

Summary:
- `full_process` normalizes raw text for the token-level scorers: every
  non-alphanumeric character becomes a space, the result is lowercased and
  trimmed.
- `intr` / `round_score` turn fractional scores into integers in [0, 100]
  with half-down tie-breaking. All scorers round through them so that scores
  are comparable across methods.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_DOWN, Decimal
from typing import List, Optional

_NON_ALNUM = re.compile(r"[\W_]", flags=re.UNICODE)
_PRECISION = Decimal("1e-10")


class InvalidArgument(TypeError):
    """Raised when a scorer receives something other than a string."""


def check_string(value, name: str = "value") -> str:
    if value is None or not isinstance(value, str):
        raise InvalidArgument(
            f"{name} must be a str, got {type(value).__name__}"
        )
    return value


def validate_string(s: str) -> bool:
    return len(s) > 0


def asciionly(s: str) -> str:
    return s.encode("ascii", errors="ignore").decode("ascii")


def full_process(s: str, force_ascii: bool = False) -> str:
    """Normalize a string for token comparison.

    Replaces each non-alphanumeric character with a space, lowercases and
    strips leading/trailing whitespace. With `force_ascii`, non-ASCII
    characters are dropped first.
    """
    check_string(s, "s")
    if not s:
        return ""
    if force_ascii:
        s = asciionly(s)
    out = _NON_ALNUM.sub(" ", s)
    out = out.lower()
    return out.strip()


def split(s: str, delimiter: Optional[str] = None) -> List[str]:
    # Whitespace runs count as one delimiter unless one is given explicitly.
    if not s:
        return []
    return s.split(delimiter)


def intr(percent: float) -> int:
    """Round a percentage to an int, half-down at 10 decimal digits.

    The value is first rounded to 10 decimal places so that float noise such
    as 3.5000000000000004 is treated as 3.5, then ties go toward zero.
    """
    value = Decimal(percent).quantize(_PRECISION, rounding=ROUND_HALF_DOWN)
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_DOWN))


def round_score(fraction: float) -> int:
    """Convert a similarity fraction in [0, 1] to an int score in [0, 100]."""
    return intr(fraction * 100)
