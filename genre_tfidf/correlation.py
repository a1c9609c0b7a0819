import logging
from itertools import combinations
from typing import List, Tuple

import numpy as np
import pandas as pd
from scipy.sparse import csr_matrix

logger = logging.getLogger(__name__)

CORRELATION_COLUMNS = ["category_a", "category_b", "correlation"]
VOCABULARIES = ("union", "intersection")


def category_matrix(frequencies: pd.DataFrame,
                    value_col: str = "tf_idf") -> Tuple[csr_matrix, csr_matrix, List, List]:
    """
    Long (category, word, value) rows as a sparse category x word matrix.

    Returns (values, presence, categories, vocabulary). `presence` marks the
    (category, word) cells that exist in the input, so an explicit 0.0 score
    can be told apart from an absent word.
    """
    if value_col not in frequencies.columns:
        raise ValueError(f"Expected '{value_col}' column in frequencies")

    categories = sorted(frequencies["category"].unique())
    vocabulary = sorted(frequencies["word"].unique())
    rows = pd.Categorical(frequencies["category"], categories=categories).codes
    cols = pd.Categorical(frequencies["word"], categories=vocabulary).codes
    shape = (len(categories), len(vocabulary))

    values = csr_matrix(
        (frequencies[value_col].to_numpy(dtype="float64"), (rows, cols)), shape=shape
    )
    presence = csr_matrix((np.ones(len(frequencies), dtype=bool), (rows, cols)), shape=shape)
    return values, presence, categories, vocabulary


def pearson(x: np.ndarray, y: np.ndarray) -> float:
    """Pearson r, or NaN when either vector is constant or shorter than 2."""
    if len(x) < 2 or np.all(x == x[0]) or np.all(y == y[0]):
        return float("nan")
    dx = x - x.mean()
    dy = y - y.mean()
    r = np.dot(dx, dy) / np.sqrt(np.dot(dx, dx) * np.dot(dy, dy))
    return float(np.clip(r, -1.0, 1.0))


def pairwise_correlation(frequencies: pd.DataFrame,
                         value_col: str = "tf_idf",
                         vocabulary: str = "union") -> pd.DataFrame:
    """
    Correlation between every pair of categories' word vectors.

    With vocabulary="union" each pair is aligned over the words found in
    either category and a word missing from one side counts as 0. With
    "intersection" only words found in both are used. Both (a, b) and
    (b, a) are emitted; undefined correlations are NaN.
    """
    if vocabulary not in VOCABULARIES:
        raise ValueError(f"vocabulary must be one of {VOCABULARIES}, got '{vocabulary}'")

    empty = pd.DataFrame({
        "category_a": pd.Series(dtype=object),
        "category_b": pd.Series(dtype=object),
        "correlation": pd.Series(dtype="float64"),
    })
    if frequencies.empty:
        return empty

    values, presence, categories, _ = category_matrix(frequencies, value_col)
    if len(categories) < 2:
        return empty

    dense = values.toarray()
    present = presence.toarray()

    records = []
    for i, j in combinations(range(len(categories)), 2):
        if vocabulary == "union":
            mask = present[i] | present[j]
        else:
            mask = present[i] & present[j]
        r = pearson(dense[i, mask], dense[j, mask])
        records.append((categories[i], categories[j], r))
        records.append((categories[j], categories[i], r))

    out = pd.DataFrame(records, columns=CORRELATION_COLUMNS)
    n_undefined = int(out["correlation"].isna().sum()) // 2
    if n_undefined:
        logger.info("%d category pair(s) have undefined correlation", n_undefined)
    return out.sort_values(["category_a", "category_b"]).reset_index(drop=True)
