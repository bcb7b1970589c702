"""
Tests for the plotting helpers (Agg backend, nothing is displayed).
"""

from __future__ import annotations

import pandas as pd
import pytest

from jobtext.visualization.plots import (
    plot_sentiment_facets,
    plot_sentiment_totals,
    plot_top_words,
)


@pytest.fixture
def freq() -> pd.DataFrame:
    return pd.DataFrame({"word": ["data", "team", "python", "sql"], "n": [9, 5, 4, 1]})


@pytest.fixture
def sentiment_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "word": ["great", "strong", "risk", "claims", "uncertain"],
            "sentiment": ["positive", "positive", "negative", "litigious", "negative"],
            "n": [4, 2, 3, 2, 1],
        }
    )


def test_plot_top_words_saves_figure(tmp_path, freq):
    out_path = tmp_path / "top.png"

    fig, ax = plot_top_words(freq, top_n=3, out_path=str(out_path), show=False)

    assert out_path.exists()
    assert len(ax.patches) == 3
    # Largest bar drawn last so it sits at the top.
    assert ax.patches[-1].get_width() == 9


def test_plot_top_words_empty():
    with pytest.raises(ValueError, match="empty"):
        plot_top_words(pd.DataFrame(columns=["word", "n"]), show=False)


def test_plot_sentiment_totals(sentiment_df):
    totals = sentiment_df.groupby("sentiment", as_index=False)["n"].sum()

    fig, ax = plot_sentiment_totals(totals, lexicon_name="bing", show=False)

    assert len(ax.patches) == 3
    assert "bing" in ax.get_title()


def test_plot_sentiment_facets_grid(tmp_path, sentiment_df):
    out_path = tmp_path / "facets.png"

    fig, axes = plot_sentiment_facets(
        sentiment_df, top_n=5, ncols=2, out_path=str(out_path), show=False
    )

    assert out_path.exists()
    assert axes.shape == (2, 2)
    titles = [ax.get_title() for ax in axes.flat if ax.get_visible()]
    assert titles == ["litigious", "negative", "positive"]
    assert not axes[1][1].get_visible()


def test_plot_sentiment_facets_bad_columns():
    with pytest.raises(ValueError, match="missing column"):
        plot_sentiment_facets(pd.DataFrame({"word": ["x"], "n": [1]}), show=False)
