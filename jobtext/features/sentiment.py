"""
Lexicon-based sentiment over word frequency tables.

A frequency table (word, n) is inner-joined with a sentiment lexicon
(word, sentiment). A word listed under several categories (common in the
Loughran-McDonald lexicon) contributes its count to each of them.

Helpers then aggregate the joined table per sentiment category and pick
the most frequent words in each category for faceted plots.
"""

from __future__ import annotations

import pandas as pd


SENTIMENT_COLUMNS = ["word", "sentiment", "n"]


def join_sentiment(freq_df: pd.DataFrame, lexicon_df: pd.DataFrame) -> pd.DataFrame:
    """
    Attach sentiment categories to counted words.

    Parameters
    ----------
    freq_df : pd.DataFrame
        Frequency table with columns ["word", "n"].
    lexicon_df : pd.DataFrame
        Lexicon with columns ["word", "sentiment"].

    Returns
    -------
    pd.DataFrame
        Columns ["word", "sentiment", "n"]; words missing from the
        lexicon are dropped. Sorted by n descending.
    """
    for name, df, cols in (
        ("frequency table", freq_df, ["word", "n"]),
        ("lexicon", lexicon_df, ["word", "sentiment"]),
    ):
        missing = [c for c in cols if c not in df.columns]
        if missing:
            raise KeyError(f"Missing column(s) {missing} in {name}.")

    joined = freq_df[["word", "n"]].merge(
        lexicon_df[["word", "sentiment"]].drop_duplicates(),
        on="word",
        how="inner",
    )
    joined = joined[SENTIMENT_COLUMNS].sort_values(
        ["n", "word", "sentiment"], ascending=[False, True, True]
    )
    return joined.reset_index(drop=True)


def sentiment_totals(sentiment_df: pd.DataFrame) -> pd.DataFrame:
    """
    Sum word counts per sentiment category.

    Returns
    -------
    pd.DataFrame
        Columns ["sentiment", "n"], sorted by n descending.
    """
    totals = (
        sentiment_df.groupby("sentiment", as_index=False)["n"]
        .sum()
        .sort_values(["n", "sentiment"], ascending=[False, True])
    )
    return totals.reset_index(drop=True)


def top_words_by_sentiment(sentiment_df: pd.DataFrame, n: int = 10) -> pd.DataFrame:
    """
    Keep the n most frequent words within each sentiment category.
    """
    if n is None or int(n) <= 0:
        raise ValueError(f"n must be a positive integer, got {n!r}.")

    ordered = sentiment_df.sort_values(
        ["sentiment", "n", "word"], ascending=[True, False, True]
    )
    top = ordered.groupby("sentiment", sort=False).head(int(n))
    return top.reset_index(drop=True)


def net_sentiment(sentiment_df: pd.DataFrame) -> int:
    """
    Positive minus negative word count (0 for an absent category).
    """
    totals = sentiment_df.groupby("sentiment")["n"].sum()
    return int(totals.get("positive", 0)) - int(totals.get("negative", 0))
