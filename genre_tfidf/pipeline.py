"""
End-to-end run: occurrences -> counts/totals -> tf-idf -> correlations.

Every stage returns a new frame; nothing upstream is modified.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

import pandas as pd

from genre_tfidf import plots
from genre_tfidf.config import MIN_CORRELATION, TOP_N_TERMS
from genre_tfidf.corpus import validate_occurrences
from genre_tfidf.correlation import pairwise_correlation
from genre_tfidf.frequency import category_totals, count_words
from genre_tfidf.tfidf import bind_tf_idf, rank_words, top_terms

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """
    Tables of one run. Frozen only stops reassigning the fields; the frames
    themselves are ordinary DataFrames, so copy one before editing it.
    """

    counts: pd.DataFrame
    totals: pd.DataFrame
    frequencies: pd.DataFrame
    correlations: pd.DataFrame
    ranks: pd.DataFrame

    @property
    def categories(self) -> List:
        return self.totals["category"].tolist()


def analyze(occurrences: pd.DataFrame, vocabulary: str = "union") -> AnalysisResult:
    validate_occurrences(occurrences)

    counts = count_words(occurrences)
    totals = category_totals(counts)
    frequencies = bind_tf_idf(counts, totals)
    correlations = pairwise_correlation(frequencies, vocabulary=vocabulary)
    ranks = rank_words(counts, totals)

    logger.info(
        "Analyzed %d tokens: %d categories, %d distinct words",
        len(occurrences), len(totals), counts["word"].nunique(),
    )
    return AnalysisResult(counts, totals, frequencies, correlations, ranks)


def write_tables(result: AnalysisResult, out_dir: Path) -> Dict[str, Path]:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = {
        "counts": out_dir / "category_word_counts.csv",
        "totals": out_dir / "category_totals.csv",
        "frequencies": out_dir / "category_word_tf_idf.csv",
        "correlations": out_dir / "category_correlations.csv",
        "ranks": out_dir / "category_word_ranks.csv",
    }
    for name, path in paths.items():
        getattr(result, name).to_csv(path, index=False)
    return paths


def render_plots(result: AnalysisResult, out_dir: Path, top_n: int = TOP_N_TERMS,
                 min_correlation: float = MIN_CORRELATION) -> List[Path]:
    """Write every chart for a run; correlation charts need two categories."""
    out_dir = Path(out_dir)
    if result.frequencies.empty:
        logger.info("Nothing to plot: empty analysis")
        return []

    saved = [
        plots.plot_top_terms(result.frequencies, out_dir / "top_words_raw_counts.png", by="n", n=top_n),
        plots.plot_top_terms(result.frequencies, out_dir / "top_words_tf_idf.png", by="tf_idf", n=top_n),
        plots.plot_tf_histograms(result.frequencies, out_dir / "term_frequency_histograms.png"),
        plots.plot_zipf(result.ranks, out_dir / "zipf.png"),
    ]
    if not result.correlations.empty:
        saved.append(plots.plot_correlation_heatmap(
            result.correlations, out_dir / "category_correlation_heatmap.png"))
        saved.append(plots.plot_correlation_network(
            result.correlations, out_dir / "category_correlation_network.png", min_correlation))
    return saved


def summarize(result: AnalysisResult, top_n: int = 10) -> str:
    """Plain-text report: per-category totals, top words both ways, correlations."""
    lines = [f"Categories: {len(result.totals)}; distinct words: {result.counts['word'].nunique()}"]

    for title, by in (("raw count", "n"), ("tf-idf", "tf_idf")):
        top = top_terms(result.frequencies, by=by, n=top_n)
        lines.append(f"\n=== Top {top_n} words per category by {title} ===")
        for category, group in top.groupby("category", sort=True):
            lines.append(f"\n-- {category} --")
            for row in group.itertuples(index=False):
                value = getattr(row, by)
                shown = f"{value:d}" if by == "n" else f"{value:.5f}"
                lines.append(f"{row.word:25} {shown}")

    lines.append("\n=== Category correlations (tf-idf) ===")
    corr = result.correlations
    pairs = corr[corr["category_a"].astype(str) < corr["category_b"].astype(str)]
    pairs = pairs.sort_values("correlation", ascending=False, na_position="last")
    if pairs.empty:
        lines.append("[fewer than two categories]")
    for row in pairs.itertuples(index=False):
        shown = "n/a" if pd.isna(row.correlation) else f"{row.correlation: .4f}"
        lines.append(f"{str(row.category_a):>20} ~ {str(row.category_b):<20} {shown}")
    return "\n".join(lines)
