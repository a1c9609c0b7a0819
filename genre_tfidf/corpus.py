"""
Corpus loading: turns a categorised text collection into the word
occurrence table (one row per token) consumed by the frequency pipeline.

Columns of the occurrence table: document_id, category, word.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

import nltk
import pandas as pd
from sklearn.feature_extraction.text import CountVectorizer

from genre_tfidf.config import TOKEN_PARAMS

logger = logging.getLogger(__name__)

OCCURRENCE_COLUMNS = ["document_id", "category", "word"]


class MalformedOccurrencesError(ValueError):
    """Occurrence table is missing columns or has rows without category/word."""

    def __init__(self, message: str, rows: Optional[List] = None):
        super().__init__(message)
        self.rows = rows or []


def _ensure_nltk(resource: str, package: str) -> None:
    try:
        nltk.data.find(resource)
    except LookupError:
        logger.info("Downloading NLTK package %r", package)
        nltk.download(package, quiet=True)


def validate_occurrences(occurrences: pd.DataFrame,
                         category_col: str = "category",
                         word_col: str = "word",
                         id_col: Optional[str] = "document_id") -> pd.DataFrame:
    """
    Check the occurrence table before any aggregation.

    Raises MalformedOccurrencesError listing the offending row labels when
    a required column is absent or a row has a null/blank category or word.
    Pass id_col=None when the table has no document column to check.
    Returns the input unchanged so it can be chained.
    """
    required = [c for c in (id_col, category_col, word_col) if c is not None]
    missing = [c for c in required if c not in occurrences.columns]
    if missing:
        raise MalformedOccurrencesError(
            f"Expected columns {required}; missing {missing}"
        )

    bad = pd.Series(False, index=occurrences.index)
    for col in (category_col, word_col):
        values = occurrences[col]
        bad |= values.isna() | values.astype(str).str.strip().eq("")

    if bad.any():
        rows = occurrences.index[bad].tolist()
        preview = ", ".join(map(str, rows[:10]))
        if len(rows) > 10:
            preview += f", ... ({len(rows)} rows)"
        raise MalformedOccurrencesError(
            f"Occurrence rows without category or word: {preview}", rows=rows
        )
    return occurrences


def remove_stopwords(occurrences: pd.DataFrame, extra: Iterable[str] = ()) -> pd.DataFrame:
    """Drop NLTK English stopwords (plus `extra`) from the word column."""
    _ensure_nltk("corpora/stopwords", "stopwords")
    from nltk.corpus import stopwords

    stop_words = set(stopwords.words("english"))
    stop_words.update(w.lower() for w in extra)
    keep = ~occurrences["word"].isin(stop_words)
    logger.debug("Stopword filter removed %d of %d rows", (~keep).sum(), len(occurrences))
    return occurrences.loc[keep].reset_index(drop=True)


def load_brown(categories: Optional[Iterable[str]] = None, stopwords: bool = False) -> pd.DataFrame:
    """
    Occurrence table for the NLTK Brown corpus: genres are categories and
    file ids are documents. Tokens are lowercased; non-alphabetic tokens
    (punctuation, numbers) are dropped.
    """
    _ensure_nltk("corpora/brown", "brown")
    from nltk.corpus import brown

    available = brown.categories()
    if categories is None:
        categories = available
    categories = list(categories)
    unknown = sorted(set(categories) - set(available))
    if unknown:
        raise ValueError(f"Unknown Brown categories: {unknown}")

    frames = []
    for category in categories:
        for fileid in brown.fileids(categories=category):
            words = [w.lower() for w in brown.words(fileids=fileid) if w.isalpha()]
            frames.append(pd.DataFrame({
                "document_id": fileid,
                "category": category,
                "word": words,
            }, columns=OCCURRENCE_COLUMNS))

    if frames:
        occurrences = pd.concat(frames, ignore_index=True)
    else:
        occurrences = pd.DataFrame(columns=OCCURRENCE_COLUMNS)
    logger.info("Loaded %d Brown tokens across %d categories", len(occurrences), len(categories))

    if stopwords:
        occurrences = remove_stopwords(occurrences)
    return occurrences


def occurrences_from_documents(documents: pd.DataFrame,
                               text_col: str = "text",
                               category_col: str = "category",
                               id_col: str = "document_id",
                               token_params: Optional[dict] = None) -> pd.DataFrame:
    """Tokenize one-row-per-document text into occurrence rows."""
    for col in (text_col, category_col, id_col):
        if col not in documents.columns:
            raise MalformedOccurrencesError(f"Expected '{col}' column in documents")

    analyzer = CountVectorizer(**(token_params or TOKEN_PARAMS)).build_analyzer()
    tokens = documents[text_col].fillna("").astype(str).map(analyzer)

    occurrences = (
        pd.DataFrame({
            "document_id": documents[id_col],
            "category": documents[category_col],
            "word": tokens,
        })
        .explode("word")
        .dropna(subset=["word"])
        .reset_index(drop=True)
    )
    return occurrences[OCCURRENCE_COLUMNS]


def load_documents_csv(path: Path, **kwargs) -> pd.DataFrame:
    """Read a document CSV and tokenize it; kwargs go to occurrences_from_documents."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Document table not found at {path}")
    documents = pd.read_csv(path)
    return occurrences_from_documents(documents, **kwargs)
