import logging
import math
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from genre_tfidf.config import MIN_CORRELATION, TOP_N_TERMS
from genre_tfidf.tfidf import top_terms

logger = logging.getLogger(__name__)


def _facet_axes(n_panels: int, ncols: int = 3, panel_size=(4.5, 3.5)):
    ncols = max(1, min(ncols, n_panels))
    nrows = max(1, math.ceil(n_panels / ncols))
    fig, axes = plt.subplots(
        nrows, ncols,
        figsize=(panel_size[0] * ncols, panel_size[1] * nrows),
        squeeze=False,
    )
    axes = axes.ravel()
    for ax in axes[n_panels:]:
        ax.set_visible(False)
    return fig, axes


def _save(fig, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, dpi=300)
    plt.close(fig)
    logger.debug("Saved plot %s", path)
    return path


def correlation_edges(correlations: pd.DataFrame, min_correlation: float = MIN_CORRELATION) -> pd.DataFrame:
    """One edge per unordered category pair whose correlation exceeds the threshold."""
    edges = correlations.dropna(subset=["correlation"])
    edges = edges[(edges["correlation"] > min_correlation)
                  & (edges["category_a"].astype(str) < edges["category_b"].astype(str))]
    return edges.sort_values("correlation", ascending=False).reset_index(drop=True)


def plot_top_terms(frequencies: pd.DataFrame, path: Path, by: str = "tf_idf",
                   n: int = TOP_N_TERMS) -> Path:
    """One bar panel per category with its top `n` words by `by`."""
    top = top_terms(frequencies, by=by, n=n)
    categories = list(top["category"].unique())
    fig, axes = _facet_axes(len(categories))

    for ax, category in zip(axes, categories):
        sub = top[top["category"] == category]
        sns.barplot(data=sub, x=by, y="word", hue="word", palette="viridis", legend=False, ax=ax)
        ax.set_title(str(category))
        ax.set_xlabel("tf-idf" if by == "tf_idf" else by)
        ax.set_ylabel("")

    label = "tf-idf" if by == "tf_idf" else "raw count"
    fig.suptitle(f"Top {n} words per category by {label}")
    return _save(fig, path)


def plot_tf_histograms(frequencies: pd.DataFrame, path: Path, bins: int = 30) -> Path:
    """Distribution of n/total per category; the long tail is the point."""
    categories = sorted(frequencies["category"].unique())
    fig, axes = _facet_axes(len(categories))

    for ax, category in zip(axes, categories):
        sub = frequencies[frequencies["category"] == category]
        sns.histplot(sub["tf"], bins=bins, ax=ax, color="slateblue")
        ax.set_title(str(category))
        ax.set_xlabel("n / total")

    fig.suptitle("Term frequency distribution")
    return _save(fig, path)


def plot_zipf(ranks: pd.DataFrame, path: Path) -> Path:
    fig, ax = plt.subplots(figsize=(8, 5))
    sns.lineplot(data=ranks, x="rank", y="term_frequency", hue="category", lw=1, ax=ax)
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("rank")
    ax.set_ylabel("term frequency")
    ax.set_title("Zipf's law per category")
    ax.grid(True)
    return _save(fig, path)


def plot_correlation_heatmap(correlations: pd.DataFrame, path: Path) -> Path:
    matrix = correlations.pivot(index="category_a", columns="category_b", values="correlation")
    labels = sorted(set(matrix.index) | set(matrix.columns))
    values = matrix.reindex(index=labels, columns=labels).to_numpy(dtype="float64", copy=True)
    np.fill_diagonal(values, 1.0)
    matrix = pd.DataFrame(values, index=labels, columns=labels)

    fig, ax = plt.subplots(figsize=(10, 8))
    sns.heatmap(matrix, annot=len(labels) <= 12, fmt=".2f", cmap="coolwarm",
                vmin=-1, vmax=1, cbar=True, ax=ax)
    ax.set_title("Category tf-idf correlation")
    ax.set_xlabel("")
    ax.set_ylabel("")
    return _save(fig, path)


def plot_correlation_network(correlations: pd.DataFrame, path: Path,
                             min_correlation: float = MIN_CORRELATION) -> Path:
    """
    Categories as nodes on a circle, joined where correlation exceeds
    `min_correlation`. Edge width and opacity scale with r.
    """
    nodes = sorted(set(correlations["category_a"]) | set(correlations["category_b"]), key=str)
    edges = correlation_edges(correlations, min_correlation)

    angles = np.linspace(0, 2 * np.pi, num=max(len(nodes), 1), endpoint=False)
    pos = {node: (np.cos(a), np.sin(a)) for node, a in zip(nodes, angles)}

    fig, ax = plt.subplots(figsize=(8, 8))
    top = edges["correlation"].abs().max() if len(edges) else 0.0
    for row in edges.itertuples(index=False):
        (x0, y0), (x1, y1) = pos[row.category_a], pos[row.category_b]
        weight = abs(row.correlation) / top if top > 0 else 0.0
        ax.plot([x0, x1], [y0, y1], color="slateblue", lw=0.5 + 4 * weight,
                alpha=0.2 + 0.7 * weight, zorder=1)

    if nodes:
        xs, ys = zip(*(pos[n] for n in nodes))
        ax.scatter(xs, ys, s=300, color="lightblue", edgecolor="navy", zorder=2)
        for node, (x, y) in pos.items():
            ax.annotate(str(node), (x, y), xytext=(0, 14), textcoords="offset points",
                        ha="center", zorder=3)

    ax.set_xlim(-1.4, 1.4)
    ax.set_ylim(-1.4, 1.4)
    ax.set_aspect("equal")
    ax.axis("off")
    ax.set_title(f"Categories with tf-idf correlation > {min_correlation}")
    return _save(fig, path)
