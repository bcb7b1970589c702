"""
Sentiment lexicon loading.

Two lexicons are used to score job descriptions:

- bing: the Hu & Liu opinion lexicon, a binary positive/negative word
  list. Shipped with NLTK as the "opinion_lexicon" corpus; it can also be
  read from a two-column CSV.
- loughran: the Loughran-McDonald finance dictionary, with categories
  such as negative, positive, uncertainty, litigious, constraining and
  superfluous. Read from a CSV in either long format (word, sentiment) or
  the master dictionary's wide format (Word plus one column per
  category, a non-zero year marking membership).

Every loader returns a DataFrame with columns ["word", "sentiment"],
lower-cased and de-duplicated.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

import pandas as pd


LEXICON_COLUMNS = ["word", "sentiment"]

LOUGHRAN_CATEGORIES = (
    "negative",
    "positive",
    "uncertainty",
    "litigious",
    "strong_modal",
    "weak_modal",
    "constraining",
    "superfluous",
    "complexity",
)


def _normalize_lexicon(df: pd.DataFrame) -> pd.DataFrame:
    out = df[LEXICON_COLUMNS].dropna()
    out = out.assign(
        word=out["word"].astype(str).str.strip().str.lower(),
        sentiment=out["sentiment"].astype(str).str.strip().str.lower(),
    )
    out = out[out["word"] != ""]
    out = out.drop_duplicates().sort_values(LEXICON_COLUMNS)
    return out.reset_index(drop=True)


def _read_lexicon_csv(path: str) -> pd.DataFrame:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Lexicon file not found: {path}")

    df = pd.read_csv(path)
    return df.rename(columns={c: str(c).strip().lower() for c in df.columns})


def lexicon_from_long(df: pd.DataFrame, source: str = "lexicon") -> pd.DataFrame:
    """
    Validate and normalize a long lexicon table with lower-cased
    "word" and "sentiment" columns.
    """
    missing = [c for c in LEXICON_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(
            f"Lexicon {source} is missing column(s) {missing}. "
            f"Available columns: {list(df.columns)}"
        )
    return _normalize_lexicon(df)


def lexicon_from_wide(df: pd.DataFrame) -> pd.DataFrame:
    """
    Convert a Loughran-McDonald master dictionary table to long format.

    A word belongs to a category when that category's column holds a
    positive number (the year the word was added). Zero and negative
    values (removed words) are ignored.

    Parameters
    ----------
    df : pd.DataFrame
        Wide table with a "Word" column and one column per category.

    Returns
    -------
    pd.DataFrame
        Long lexicon with columns ["word", "sentiment"].
    """
    renamed = df.rename(columns={c: str(c).strip().lower() for c in df.columns})
    if "word" not in renamed.columns:
        raise ValueError(
            "Wide lexicon table needs a 'Word' column. "
            f"Available columns: {list(df.columns)}"
        )

    categories = [c for c in LOUGHRAN_CATEGORIES if c in renamed.columns]
    if not categories:
        raise ValueError(
            "Wide lexicon table has no known category columns. "
            f"Expected some of: {list(LOUGHRAN_CATEGORIES)}"
        )

    values = renamed[categories].apply(pd.to_numeric, errors="coerce").fillna(0)
    long_df = (
        values.assign(word=renamed["word"])
        .melt(id_vars="word", var_name="sentiment", value_name="flag")
    )
    long_df = long_df[long_df["flag"] > 0]
    return _normalize_lexicon(long_df)


def load_bing_lexicon(path: Optional[str] = None) -> pd.DataFrame:
    """
    Load the bing (Hu & Liu) positive/negative lexicon.

    Parameters
    ----------
    path : Optional[str]
        CSV with "word" and "sentiment" columns. If None, the lexicon is
        read from NLTK's opinion_lexicon corpus, which may need:

            nltk.download("opinion_lexicon")

    Returns
    -------
    pd.DataFrame
        Lexicon with columns ["word", "sentiment"].
    """
    if path:
        return lexicon_from_long(_read_lexicon_csv(path), source=path)

    from nltk.corpus import opinion_lexicon

    frames = [
        pd.DataFrame({"word": list(opinion_lexicon.positive()), "sentiment": "positive"}),
        pd.DataFrame({"word": list(opinion_lexicon.negative()), "sentiment": "negative"}),
    ]
    return _normalize_lexicon(pd.concat(frames, ignore_index=True))


def load_loughran_lexicon(path: str) -> pd.DataFrame:
    """
    Load the Loughran-McDonald lexicon from a long or wide CSV.

    The format is detected from the header: a "sentiment" column means
    long format, otherwise the master dictionary layout is assumed.
    """
    if not path:
        raise ValueError(
            "No path configured for the loughran lexicon "
            "(sentiment.lexicons.loughran.path in config/data.yaml)."
        )
    df = _read_lexicon_csv(path)
    if "sentiment" in df.columns:
        return lexicon_from_long(df, source=path)
    return lexicon_from_wide(df)


def load_lexicon(name: str, sentiment_cfg: Dict[str, Any]) -> pd.DataFrame:
    """
    Load a lexicon by name using the "sentiment" section of the data config.

    Parameters
    ----------
    name : str
        "bing" or "loughran".
    sentiment_cfg : Dict[str, Any]
        The "sentiment" section of config/data.yaml.

    Returns
    -------
    pd.DataFrame
        Lexicon with columns ["word", "sentiment"].
    """
    lexicons_cfg = sentiment_cfg.get("lexicons", {}) or {}
    lex_cfg = lexicons_cfg.get(name, {}) or {}
    path = lex_cfg.get("path")

    key = (name or "").lower()
    if key == "bing":
        return load_bing_lexicon(path)
    if key == "loughran":
        return load_loughran_lexicon(path)

    raise ValueError(f"Unknown sentiment lexicon '{name}'. Expected 'bing' or 'loughran'.")
