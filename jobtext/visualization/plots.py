"""
Plotting utilities for the job description word analysis.

This module provides helpers to visualize:

- the top-N most frequent (stemmed) words as a bar chart
- total word counts per sentiment category
- the most frequent words of each sentiment category as a faceted grid
  of bar charts, one panel per category with its own scale

Every function returns the matplotlib (fig, ax) pair, can save the
figure to disk and either shows or closes it.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from jobtext.features.frequency import top_n_words
from jobtext.features.sentiment import top_words_by_sentiment


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _finish_figure(fig, out_path: Optional[str], show: bool) -> None:
    fig.tight_layout()

    if out_path is not None:
        fig.savefig(out_path, dpi=300, bbox_inches="tight")

    if show:
        plt.show()
    else:
        plt.close(fig)


def _require_columns(df: pd.DataFrame, columns, what: str) -> None:
    if df is None or df.empty:
        raise ValueError(f"{what} is empty; nothing to plot.")
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(
            f"{what} is missing column(s) {missing}. "
            f"Available columns: {list(df.columns)}"
        )


# ---------------------------------------------------------------------------
# Word frequency bars
# ---------------------------------------------------------------------------


def plot_top_words(
    freq_df: pd.DataFrame,
    top_n: int = 20,
    figsize: Tuple[float, float] = (8.0, 8.0),
    color: str = "steelblue",
    title: Optional[str] = None,
    out_path: Optional[str] = None,
    show: bool = True,
):
    """
    Plot the top_n most frequent words as a horizontal bar chart.

    Parameters
    ----------
    freq_df : pd.DataFrame
        Frequency table with columns ["word", "n"].
    top_n : int
        Number of words to show; the most frequent is drawn at the top.
    figsize : Tuple[float, float]
        Figure size in inches.
    color : str
        Bar color.
    title : Optional[str]
        Plot title. If None, a default is constructed.
    out_path : Optional[str]
        If provided, save the figure to this path (e.g., PNG).
    show : bool
        If True, call plt.show(). If False, close the figure and just
        return it.

    Returns
    -------
    (fig, ax)
        Matplotlib Figure and Axes objects.
    """
    _require_columns(freq_df, ["word", "n"], "freq_df")

    top = top_n_words(freq_df, top_n)
    # barh draws bottom-up; reverse so the largest bar is on top.
    words = top["word"].astype(str).iloc[::-1]
    counts = top["n"].iloc[::-1]

    fig, ax = plt.subplots(figsize=figsize)
    ax.barh(words, counts, color=color)

    ax.set_xlabel("Count")
    ax.set_ylabel("Word")
    ax.set_title(title or f"Top {len(top)} words in job descriptions")

    for i, v in enumerate(counts):
        ax.text(v, i, f" {int(v)}", va="center", fontsize=8)

    _finish_figure(fig, out_path, show)
    return fig, ax


# ---------------------------------------------------------------------------
# Sentiment plots
# ---------------------------------------------------------------------------


def plot_sentiment_totals(
    totals_df: pd.DataFrame,
    lexicon_name: str = "",
    figsize: Tuple[float, float] = (8.0, 5.0),
    rotate_xticks: int = 45,
    title: Optional[str] = None,
    out_path: Optional[str] = None,
    show: bool = True,
):
    """
    Plot total word counts per sentiment category.

    Parameters
    ----------
    totals_df : pd.DataFrame
        Columns ["sentiment", "n"], as from `sentiment_totals`.
    lexicon_name : str
        Lexicon name used in the default title.

    Returns
    -------
    (fig, ax)
        Matplotlib Figure and Axes objects.
    """
    _require_columns(totals_df, ["sentiment", "n"], "totals_df")

    df = totals_df.sort_values("n", ascending=False)
    labels = df["sentiment"].astype(str)
    counts = df["n"]

    cmap = plt.get_cmap("tab10")
    colors = [cmap(i % 10) for i in range(len(df))]

    fig, ax = plt.subplots(figsize=figsize)
    ax.bar(labels, counts, color=colors)

    ax.set_ylabel("Word count")
    ax.set_xlabel("Sentiment")
    if title is None:
        suffix = f" ({lexicon_name})" if lexicon_name else ""
        title = f"Word counts by sentiment{suffix}"
    ax.set_title(title)

    ax.set_xticks(np.arange(len(labels)))
    ax.set_xticklabels(labels, rotation=rotate_xticks, ha="right")

    for i, v in enumerate(counts):
        ax.text(i, v, f"{int(v)}", ha="center", va="bottom", fontsize=9)

    _finish_figure(fig, out_path, show)
    return fig, ax


def plot_sentiment_facets(
    sentiment_df: pd.DataFrame,
    top_n: int = 10,
    ncols: int = 2,
    lexicon_name: str = "",
    panel_size: Tuple[float, float] = (5.0, 4.0),
    title: Optional[str] = None,
    out_path: Optional[str] = None,
    show: bool = True,
):
    """
    Plot the top words of every sentiment category, one panel each.

    Each panel has its own x scale so small categories stay readable.
    Unused cells of the grid are hidden.

    Parameters
    ----------
    sentiment_df : pd.DataFrame
        Joined table with columns ["word", "sentiment", "n"].
    top_n : int
        Words shown per category.
    ncols : int
        Number of panel columns.
    lexicon_name : str
        Lexicon name used in the default title.
    panel_size : Tuple[float, float]
        Size of one panel in inches.

    Returns
    -------
    (fig, axes)
        Figure and 2D array of Axes (nrows x ncols).
    """
    _require_columns(sentiment_df, ["word", "sentiment", "n"], "sentiment_df")
    if ncols is None or int(ncols) <= 0:
        raise ValueError(f"ncols must be a positive integer, got {ncols!r}.")

    top = top_words_by_sentiment(sentiment_df, top_n)
    categories = sorted(top["sentiment"].unique())

    ncols = min(int(ncols), len(categories))
    nrows = math.ceil(len(categories) / ncols)

    fig, axes = plt.subplots(
        nrows,
        ncols,
        figsize=(panel_size[0] * ncols, panel_size[1] * nrows),
        squeeze=False,
    )
    cmap = plt.get_cmap("tab10")

    for idx, category in enumerate(categories):
        ax = axes[idx // ncols][idx % ncols]
        panel = top[top["sentiment"] == category].sort_values("n")
        ax.barh(panel["word"].astype(str), panel["n"], color=cmap(idx % 10))
        ax.set_title(category)
        ax.set_xlabel("Count")

    for idx in range(len(categories), nrows * ncols):
        axes[idx // ncols][idx % ncols].set_visible(False)

    if title is None:
        suffix = f" ({lexicon_name})" if lexicon_name else ""
        title = f"Top words by sentiment{suffix}"
    fig.suptitle(title)

    _finish_figure(fig, out_path, show)
    return fig, axes
