"""
tf-idf scoring with categories as the "documents".

    tf     = n / total
    idf    = ln(number of categories / number of categories containing word)
    tf_idf = tf * idf

A word present in every category gets idf = 0, so the score only rewards
words that separate one category from the others.
"""

import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

FREQUENCY_COLUMNS = ["category", "word", "n", "total", "tf", "idf", "tf_idf"]
RANK_COLUMNS = ["category", "word", "n", "total", "rank", "term_frequency"]


def _join_totals(counts: pd.DataFrame, totals: pd.DataFrame) -> pd.DataFrame:
    merged = counts.merge(
        totals[["category", "total"]],
        on="category",
        how="left",
        validate="many_to_one",
    )
    unmatched = merged.loc[merged["total"].isna(), "category"].unique()
    if len(unmatched):
        raise ValueError(f"No category total for: {sorted(map(str, unmatched))}")
    return merged


def bind_tf_idf(counts: pd.DataFrame, totals: pd.DataFrame) -> pd.DataFrame:
    """Attach total, tf, idf and tf_idf to every (category, word, n) row."""
    if counts.empty:
        return pd.DataFrame({c: pd.Series(dtype="float64") for c in FREQUENCY_COLUMNS}).astype(
            {"category": object, "word": object, "n": "int64", "total": "int64"}
        )

    freq = _join_totals(counts, totals)
    freq["total"] = freq["total"].astype("int64")

    n_categories = freq["category"].nunique()
    doc_freq = freq.groupby("word")["category"].nunique()

    freq["tf"] = freq["n"].astype("float64") / freq["total"]
    freq["idf"] = np.log(n_categories / freq["word"].map(doc_freq).astype("float64"))
    freq["tf_idf"] = freq["tf"] * freq["idf"]

    logger.debug("Scored %d rows over %d categories", len(freq), n_categories)
    return freq[FREQUENCY_COLUMNS]


def top_terms(frequencies: pd.DataFrame, by: str = "tf_idf", n: int = 15) -> pd.DataFrame:
    """The `n` highest-scoring words per category, ties broken alphabetically."""
    if by not in frequencies.columns:
        raise ValueError(f"Cannot rank by '{by}'; columns are {list(frequencies.columns)}")
    return (
        frequencies
        .sort_values(["category", by, "word"], ascending=[True, False, True])
        .groupby("category", sort=False)
        .head(n)
        .reset_index(drop=True)
    )


def rank_words(counts: pd.DataFrame, totals: pd.DataFrame) -> pd.DataFrame:
    """Per-category frequency rank (1 = most frequent) for a Zipf plot."""
    if counts.empty:
        return pd.DataFrame(columns=RANK_COLUMNS)

    ranked = _join_totals(counts, totals).sort_values(
        ["category", "n", "word"], ascending=[True, False, True]
    )
    ranked["total"] = ranked["total"].astype("int64")
    ranked["rank"] = ranked.groupby("category").cumcount() + 1
    ranked["term_frequency"] = ranked["n"].astype("float64") / ranked["total"]
    return ranked[RANK_COLUMNS].reset_index(drop=True)
