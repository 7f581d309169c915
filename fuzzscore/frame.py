"""
Column-wise scoring over pandas DataFrames.

Summary:
- Scores a "source" column against a single reference column and against the
  best of several candidate columns, for any number of registered scorers,
  and reports which side wins per row.
- Missing cells (NaN/None) are compared as empty strings; the scorer decides
  what an empty comparison is worth.

Output columns per scorer key `k` (see `compare_frame`):
- `score_vs_user_k`, `score_vs_best_k`, `best_column_k`, `winner_k`.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Tuple, Union

import pandas as pd

from .registry import Scorer, get_scorer

logger = logging.getLogger(__name__)

WINNER_LABELS = ("user", "best", "tie")


def _cell_text(x) -> str:
    if x is None or (not isinstance(x, str) and pd.isna(x)):
        return ""
    return str(x).strip()


def score_pairs(
    left: pd.Series, right: pd.Series, scorer: Union[str, Scorer] = "token_set_ratio"
) -> pd.Series:
    """Score `left[i]` against `right[i]` for every row."""
    fn = get_scorer(scorer)
    scores = [fn(_cell_text(a), _cell_text(b)) for a, b in zip(left, right)]
    return pd.Series(scores, index=left.index, dtype="Int64")


def best_match(
    df: pd.DataFrame,
    source: str,
    candidates: Sequence[str],
    scorer: Union[str, Scorer] = "token_set_ratio",
) -> pd.DataFrame:
    """Best candidate column per row.

    Returns a DataFrame with `score` (Int64) and `column` (name of the best
    candidate; the first one listed wins ties). Both are NA when there are no
    candidates.
    """
    fn = get_scorer(scorer)
    best_scores: List = []
    best_cols: List = []
    for _, row in df.iterrows():
        src = _cell_text(row[source])
        scored = [(fn(src, _cell_text(row[c])), c) for c in candidates]
        if scored:
            sc, col = max(scored, key=lambda t: t[0])
        else:
            sc, col = pd.NA, pd.NA
        best_scores.append(sc)
        best_cols.append(col)
    return pd.DataFrame(
        {
            "score": pd.Series(best_scores, index=df.index, dtype="Int64"),
            "column": pd.Series(best_cols, index=df.index, dtype="object"),
        }
    )


def winners(
    s_left: pd.Series,
    s_right: pd.Series,
    labels: Tuple[str, str, str] = WINNER_LABELS,
) -> pd.Series:
    """Per-row winner between two score series.

    `labels` is `(left, right, tie)`. Rows where only one side has a score go
    to that side; rows where neither does are NA.
    """
    left_label, right_label, tie_label = labels
    out = []
    for u, i in zip(s_left, s_right):
        u_na = pd.isna(u)
        i_na = pd.isna(i)
        if not u_na and not i_na:
            if i == u:
                out.append(tie_label)
            elif i > u:
                out.append(right_label)
            else:
                out.append(left_label)
        elif not i_na:
            out.append(right_label)
        elif not u_na:
            out.append(left_label)
        else:
            out.append(pd.NA)
    return pd.Series(out, index=s_left.index, dtype="object")


def compare_frame(
    df: pd.DataFrame,
    source: str,
    user: str,
    candidates: Sequence[str],
    scorers: Iterable[str] = ("token_set_ratio",),
    labels: Tuple[str, str, str] = WINNER_LABELS,
) -> pd.DataFrame:
    """Return a copy of `df` with score/winner columns for each scorer key."""
    df_out = df.copy()
    for key in scorers:
        s_user = score_pairs(df_out[source], df_out[user], key)
        df_out[f"score_vs_user_{key}"] = s_user
        if candidates:
            best = best_match(df_out, source, candidates, key)
            df_out[f"score_vs_best_{key}"] = best["score"]
            df_out[f"best_column_{key}"] = best["column"]
            s_best = best["score"]
        else:
            s_best = pd.Series([pd.NA] * len(df_out), index=df_out.index, dtype="Int64")
        df_out[f"winner_{key}"] = winners(s_user, s_best, labels)
        logger.debug("compare_frame: scored %d row(s) with %s", len(df_out), key)
    return df_out


def summarize(
    df_out: pd.DataFrame,
    scorers: Iterable[str],
    labels: Tuple[str, str, str] = WINNER_LABELS,
) -> pd.DataFrame:
    """Count wins and ties per scorer from `compare_frame` output."""
    left_label, right_label, tie_label = labels
    rows: List[Dict[str, Union[str, int]]] = []
    for key in scorers:
        col = f"winner_{key}"
        if col not in df_out.columns:
            continue
        counts = df_out[col].value_counts(dropna=True)
        rows.append(
            {
                "scorer": key,
                left_label: int(counts.get(left_label, 0)),
                right_label: int(counts.get(right_label, 0)),
                tie_label: int(counts.get(tie_label, 0)),
            }
        )
    return pd.DataFrame(rows, columns=["scorer", left_label, right_label, tie_label])
