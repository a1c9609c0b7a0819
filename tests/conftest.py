import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest


def make_occurrences(rows):
    return pd.DataFrame(rows, columns=["document_id", "category", "word"])


@pytest.fixture
def example_occurrences() -> pd.DataFrame:
    """Two categories sharing only 'the'."""
    return make_occurrences([
        ("d1", "fiction", "the"),
        ("d1", "fiction", "the"),
        ("d1", "fiction", "ghost"),
        ("d2", "news", "the"),
        ("d2", "news", "economy"),
    ])


@pytest.fixture
def genre_occurrences() -> pd.DataFrame:
    """Three categories over several documents with partly shared words."""
    rows = []
    layout = {
        "fiction": [("f1", "the", 2), ("f2", "the", 1), ("f1", "ghost", 2), ("f2", "night", 1)],
        "news": [("n1", "the", 2), ("n1", "economy", 3), ("n2", "market", 1), ("n2", "night", 1)],
        "romance": [("r1", "the", 1), ("r1", "love", 3), ("r2", "night", 2), ("r2", "ghost", 1)],
    }
    for category, words in layout.items():
        for doc, word, n in words:
            rows.extend([(doc, category, word)] * n)
    return make_occurrences(rows)


@pytest.fixture
def single_category_occurrences() -> pd.DataFrame:
    return make_occurrences([
        ("d1", "fiction", "the"),
        ("d1", "fiction", "ghost"),
        ("d2", "fiction", "the"),
    ])


@pytest.fixture
def empty_occurrences() -> pd.DataFrame:
    return make_occurrences([])
