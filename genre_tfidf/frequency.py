import logging

import pandas as pd

from genre_tfidf.corpus import validate_occurrences

logger = logging.getLogger(__name__)

COUNT_COLUMNS = ["category", "word", "n"]
TOTAL_COLUMNS = ["category", "total"]


def count_words(occurrences: pd.DataFrame,
                category_col: str = "category",
                word_col: str = "word") -> pd.DataFrame:
    """
    Occurrences per (category, word).

    The grouping keys are passed explicitly; output columns are always
    category, word, n regardless of the input column names. Rows with a
    null or blank key raise MalformedOccurrencesError instead of being
    dropped by the groupby.
    """
    if occurrences.empty:
        return pd.DataFrame({
            "category": pd.Series(dtype=object),
            "word": pd.Series(dtype=object),
            "n": pd.Series(dtype="int64"),
        })
    validate_occurrences(occurrences, category_col=category_col, word_col=word_col, id_col=None)

    counts = (
        occurrences
        .groupby([category_col, word_col], sort=True, observed=True)
        .size()
        .reset_index(name="n")
        .rename(columns={category_col: "category", word_col: "word"})
    )
    counts["n"] = counts["n"].astype("int64")
    logger.debug("Counted %d distinct (category, word) pairs", len(counts))
    return counts[COUNT_COLUMNS]


def category_totals(counts: pd.DataFrame) -> pd.DataFrame:
    """Sum of n per category; one row per category present in `counts`."""
    if counts.empty:
        return pd.DataFrame({
            "category": pd.Series(dtype=object),
            "total": pd.Series(dtype="int64"),
        })

    totals = (
        counts
        .groupby("category", sort=True, observed=True)["n"]
        .sum()
        .reset_index(name="total")
    )
    totals["total"] = totals["total"].astype("int64")
    return totals[TOTAL_COLUMNS]
