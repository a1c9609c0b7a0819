"""Smoke tests for the chart writers and the edge filter."""

from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from genre_tfidf import plots
from genre_tfidf.pipeline import analyze


@pytest.fixture
def result(genre_occurrences: pd.DataFrame):
    return analyze(genre_occurrences)


def test_correlation_edges_threshold_and_dedup() -> None:
    corr = pd.DataFrame({
        "category_a": ["a", "b", "a", "c", "b", "c"],
        "category_b": ["b", "a", "c", "a", "c", "b"],
        "correlation": [0.5, 0.5, 0.01, 0.01, np.nan, np.nan],
    })
    edges = plots.correlation_edges(corr, min_correlation=0.05)

    assert edges[["category_a", "category_b"]].values.tolist() == [["a", "b"]]
    assert edges["correlation"].tolist() == [0.5]


def test_correlation_edges_keeps_input(result) -> None:
    before = result.correlations.copy()
    plots.correlation_edges(result.correlations)
    pd.testing.assert_frame_equal(result.correlations, before)


@pytest.mark.parametrize("by", ["n", "tf_idf"])
def test_plot_top_terms(result, tmp_path: Path, by: str) -> None:
    path = plots.plot_top_terms(result.frequencies, tmp_path / f"top_{by}.png", by=by, n=3)
    assert path.exists()
    assert path.stat().st_size > 0


def test_plot_tf_histograms_and_zipf(result, tmp_path: Path) -> None:
    assert plots.plot_tf_histograms(result.frequencies, tmp_path / "hist.png").exists()
    assert plots.plot_zipf(result.ranks, tmp_path / "zipf.png").exists()


def test_plot_correlation_charts(result, tmp_path: Path) -> None:
    heat = plots.plot_correlation_heatmap(result.correlations, tmp_path / "heat.png")
    net = plots.plot_correlation_network(result.correlations, tmp_path / "sub" / "net.png",
                                         min_correlation=-1.0)
    assert heat.exists()
    assert net.exists()


def test_network_with_no_edges(result, tmp_path: Path) -> None:
    path = plots.plot_correlation_network(result.correlations, tmp_path / "net.png",
                                          min_correlation=1.0)
    assert path.exists()
