"""Tests for corpus loading and occurrence validation."""

from pathlib import Path

import nltk.corpus
import pandas as pd
import pytest

from genre_tfidf import corpus
from genre_tfidf.corpus import (
    MalformedOccurrencesError,
    load_brown,
    load_documents_csv,
    occurrences_from_documents,
    remove_stopwords,
    validate_occurrences,
)


class FakeBrown:
    FILES = {
        "ca01": ("news", ["The", "Fulton", "County", ",", "jury", "said", "1961", "."]),
        "ca02": ("news", ["The", "jury", "."]),
        "cp01": ("romance", ["She", "loved", "the", "night", "!"]),
    }

    def categories(self):
        return sorted({cat for cat, _ in self.FILES.values()})

    def fileids(self, categories=None):
        return [f for f, (cat, _) in sorted(self.FILES.items()) if cat == categories]

    def words(self, fileids=None):
        return self.FILES[fileids][1]


class FakeStopwords:
    def words(self, language):
        assert language == "english"
        return ["the", "she", "said"]


@pytest.fixture
def fake_nltk(monkeypatch: pytest.MonkeyPatch) -> None:
    """Stand-in corpora so tests never download NLTK data."""
    monkeypatch.setattr(corpus, "_ensure_nltk", lambda resource, package: None)
    monkeypatch.setattr(nltk.corpus, "brown", FakeBrown())
    monkeypatch.setattr(nltk.corpus, "stopwords", FakeStopwords())


def test_validate_accepts_good_table(example_occurrences: pd.DataFrame) -> None:
    assert validate_occurrences(example_occurrences) is example_occurrences


def test_validate_missing_column() -> None:
    df = pd.DataFrame({"document_id": ["d1"], "word": ["the"]})
    with pytest.raises(MalformedOccurrencesError, match="category"):
        validate_occurrences(df)


def test_validate_reports_offending_rows(example_occurrences: pd.DataFrame) -> None:
    df = example_occurrences.copy()
    df.loc[1, "word"] = None
    df.loc[3, "category"] = "  "

    with pytest.raises(MalformedOccurrencesError) as excinfo:
        validate_occurrences(df)

    assert excinfo.value.rows == [1, 3]
    assert "1, 3" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_validate_empty_table_is_fine(empty_occurrences: pd.DataFrame) -> None:
    validate_occurrences(empty_occurrences)


def test_occurrences_from_documents() -> None:
    docs = pd.DataFrame({
        "document_id": ["d1", "d2", "d3"],
        "category": ["fiction", "news", "news"],
        "text": ["The ghost, the GHOST!", "Economy 2024", None],
    })
    occ = occurrences_from_documents(docs)

    assert list(occ.columns) == ["document_id", "category", "word"]
    assert occ["word"].tolist() == ["the", "ghost", "the", "ghost", "economy"]
    assert occ.loc[occ["document_id"] == "d2", "category"].tolist() == ["news"]


def test_occurrences_from_documents_missing_column() -> None:
    with pytest.raises(MalformedOccurrencesError, match="genre"):
        occurrences_from_documents(pd.DataFrame({"text": ["a"]}), category_col="genre")


def test_load_documents_csv(tmp_path: Path) -> None:
    path = tmp_path / "docs.csv"
    pd.DataFrame({
        "id": ["a", "b"],
        "genre": ["x", "y"],
        "body": ["one two two", "three"],
    }).to_csv(path, index=False)

    occ = load_documents_csv(path, text_col="body", category_col="genre", id_col="id")
    assert len(occ) == 4
    assert set(occ["category"]) == {"x", "y"}


def test_load_documents_csv_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_documents_csv(tmp_path / "nope.csv")


def test_load_brown(fake_nltk) -> None:
    occ = load_brown()

    assert list(occ.columns) == ["document_id", "category", "word"]
    assert occ.loc[occ["document_id"] == "ca01", "word"].tolist() == [
        "the", "fulton", "county", "jury", "said",
    ]
    assert set(occ["category"]) == {"news", "romance"}
    assert len(occ) == 5 + 2 + 4


def test_load_brown_subset_and_stopwords(fake_nltk) -> None:
    occ = load_brown(["romance"], stopwords=True)
    assert occ["word"].tolist() == ["loved", "night"]


def test_load_brown_unknown_category(fake_nltk) -> None:
    with pytest.raises(ValueError, match="poetry"):
        load_brown(["news", "poetry"])


def test_remove_stopwords_extra(fake_nltk, example_occurrences: pd.DataFrame) -> None:
    occ = remove_stopwords(example_occurrences, extra=["Ghost"])
    assert occ["word"].tolist() == ["economy"]
    assert list(occ.index) == [0]
