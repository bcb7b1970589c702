"""
Word frequency tables over the tidy token table.
"""

from __future__ import annotations

import pandas as pd


FREQUENCY_COLUMNS = ["word", "n"]


def count_words(tokens_df: pd.DataFrame, column: str = "stem") -> pd.DataFrame:
    """
    Count occurrences of each token across the whole corpus.

    Parameters
    ----------
    tokens_df : pd.DataFrame
        Tidy token table (see jobtext.features.preprocessing).
    column : str
        Token column to count, "stem" (default) or "word".

    Returns
    -------
    pd.DataFrame
        Columns ["word", "n"], sorted by n descending and then by word so
        ties come out in a stable order.
    """
    if column not in tokens_df.columns:
        raise KeyError(
            f"Column '{column}' not found in token table. "
            f"Available columns: {list(tokens_df.columns)}"
        )

    if tokens_df.empty:
        return pd.DataFrame({"word": pd.Series(dtype=str), "n": pd.Series(dtype="int64")})

    freq = (
        tokens_df[column]
        .value_counts()
        .rename_axis("word")
        .reset_index(name="n")
    )
    freq = freq.sort_values(["n", "word"], ascending=[False, True])
    return freq.reset_index(drop=True)


def top_n_words(freq_df: pd.DataFrame, n: int = 20) -> pd.DataFrame:
    """
    Return the n most frequent words of a frequency table.
    """
    if n is None or int(n) <= 0:
        raise ValueError(f"n must be a positive integer, got {n!r}.")

    ordered = freq_df.sort_values(["n", "word"], ascending=[False, True])
    return ordered.head(int(n)).reset_index(drop=True)


def word_share(freq_df: pd.DataFrame) -> pd.DataFrame:
    """
    Add a "proportion" column: each word's share of all counted tokens.
    """
    total = freq_df["n"].sum()
    out = freq_df.copy()
    out["proportion"] = out["n"] / total if total else 0.0
    return out
