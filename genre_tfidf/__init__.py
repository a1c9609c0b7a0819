from genre_tfidf.corpus import (
    MalformedOccurrencesError,
    load_brown,
    load_documents_csv,
    occurrences_from_documents,
    remove_stopwords,
    validate_occurrences,
)
from genre_tfidf.correlation import category_matrix, pairwise_correlation, pearson
from genre_tfidf.frequency import category_totals, count_words
from genre_tfidf.pipeline import AnalysisResult, analyze, render_plots, summarize, write_tables
from genre_tfidf.tfidf import bind_tf_idf, rank_words, top_terms

__all__ = [
    "AnalysisResult",
    "MalformedOccurrencesError",
    "analyze",
    "bind_tf_idf",
    "category_matrix",
    "category_totals",
    "count_words",
    "load_brown",
    "load_documents_csv",
    "occurrences_from_documents",
    "pairwise_correlation",
    "pearson",
    "rank_words",
    "remove_stopwords",
    "render_plots",
    "summarize",
    "top_terms",
    "validate_occurrences",
    "write_tables",
]
