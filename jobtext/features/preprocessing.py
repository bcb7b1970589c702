"""
Tokenization, stop-word removal and stemming for job descriptions.

This module turns the row-indexed description table produced by
jobtext.features.cleaning into a tidy token table: one row per
(row_id, token) pair, in the style of tidy text mining.

The pipeline is:

- tokenization into lower-cased words (NLTK RegexpTokenizer, or plain
  whitespace splitting after punctuation removal)
- anti-join against a stop-word set (NLTK or scikit-learn lists)
- removal of a small custom exclusion list
- removal of purely numeric tokens
- stemming (NLTK Snowball or Porter)

Configuration is driven by the "preprocessing" section of
config/data.yaml, so the pipeline can be tweaked without changing this
code.
"""

from __future__ import annotations

import logging
import string
from typing import Any, Dict, Iterable, List, Optional, Set

import pandas as pd
from nltk.corpus import stopwords as nltk_stopwords
from nltk.stem import PorterStemmer, SnowballStemmer
from nltk.tokenize import RegexpTokenizer
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS as SKLEARN_EN_STOPWORDS


logger = logging.getLogger(__name__)

# Words made of letters/digits, keeping in-word apostrophes ("don't").
_WORD_TOKENIZER = RegexpTokenizer(r"[a-z0-9]+(?:'[a-z0-9]+)*")
_PUNCT_TABLE = str.maketrans({ch: " " for ch in string.punctuation})


# ---------------------------------------------------------------------------
# Tokenization
# ---------------------------------------------------------------------------


def tokenize_text(text: str, method: str = "regex") -> List[str]:
    """
    Split a description into lower-cased word tokens.

    Supported methods:
    - "regex": NLTK RegexpTokenizer over word characters (default).
    - "whitespace": replace punctuation with spaces, then .split().

    Parameters
    ----------
    text : str
        Cleaned description text.
    method : str
        Tokenization method.

    Returns
    -------
    List[str]
        Tokens in text order; empty for empty input.
    """
    if not text:
        return []

    text = str(text).lower()
    method = (method or "regex").lower()

    if method == "regex":
        return _WORD_TOKENIZER.tokenize(text)
    if method == "whitespace":
        return text.translate(_PUNCT_TABLE).split()

    raise ValueError(f"Unknown tokenization method '{method}'. Expected 'regex' or 'whitespace'.")


def unnest_tokens(
    table: pd.DataFrame,
    text_column: str = "text",
    id_column: str = "row_id",
    method: str = "regex",
) -> pd.DataFrame:
    """
    Reshape a text table into a tidy token table, one token per row.

    Parameters
    ----------
    table : pd.DataFrame
        Table with an id column and a text column.
    text_column : str
        Column holding the text to tokenize.
    id_column : str
        Column identifying the source record of each token.
    method : str
        Tokenization method (see `tokenize_text`).

    Returns
    -------
    pd.DataFrame
        Columns [id_column, "word"], ordered by source row then token
        position. Rows whose text yields no tokens contribute nothing.
    """
    for col in (id_column, text_column):
        if col not in table.columns:
            raise KeyError(
                f"Column '{col}' not found in table. Available columns: {list(table.columns)}"
            )

    tokens = table[text_column].apply(lambda t: tokenize_text(t, method=method))
    tidy = pd.DataFrame(
        {id_column: table[id_column].to_numpy(), "word": tokens.to_numpy()}
    ).explode("word")

    # Empty token lists explode to NaN.
    tidy = tidy.dropna(subset=["word"])
    tidy["word"] = tidy["word"].astype(str)

    return tidy.reset_index(drop=True)


# ---------------------------------------------------------------------------
# Stop words and exclusions
# ---------------------------------------------------------------------------


def get_stopword_set(
    source: str = "nltk",
    language: str = "english",
    extra: Optional[Iterable[str]] = None,
) -> Set[str]:
    """
    Build the stop-word set.

    Parameters
    ----------
    source : str
        "nltk" for NLTK's stopwords corpus, "sklearn" for
        scikit-learn's ENGLISH_STOP_WORDS. If the NLTK corpus has not
        been downloaded (nltk.download("stopwords")), English falls back
        to the scikit-learn list with a warning.
    language : str
        Language name for the NLTK corpus, e.g. "english".
    extra : Optional[Iterable[str]]
        Additional words to treat as stop words.

    Returns
    -------
    Set[str]
        Lower-cased stop words.
    """
    source = (source or "nltk").lower()
    lang = (language or "english").lower()

    if source == "nltk":
        try:
            words = set(nltk_stopwords.words(lang))
        except LookupError:
            if lang != "english":
                raise
            logger.warning(
                "NLTK stopwords corpus not available; using scikit-learn's "
                "English stop words instead. Run nltk.download('stopwords') "
                "to use the NLTK list."
            )
            words = set(SKLEARN_EN_STOPWORDS)
    elif source == "sklearn":
        if lang != "english":
            raise ValueError("scikit-learn only ships English stop words.")
        words = set(SKLEARN_EN_STOPWORDS)
    else:
        raise ValueError(f"Unknown stop-word source '{source}'. Expected 'nltk' or 'sklearn'.")

    if extra:
        words |= {str(w).lower() for w in extra}

    return {w.lower() for w in words}


def remove_stopwords(tokens_df: pd.DataFrame, stopword_set: Set[str]) -> pd.DataFrame:
    """
    Anti-join the token table against a stop-word set.
    """
    if not stopword_set:
        return tokens_df.copy()
    mask = ~tokens_df["word"].isin(stopword_set)
    return tokens_df[mask].reset_index(drop=True)


def remove_custom_words(tokens_df: pd.DataFrame, words: Iterable[str]) -> pd.DataFrame:
    """
    Drop tokens found in a custom exclusion list (case-insensitive).
    """
    excluded = {str(w).lower() for w in (words or [])}
    if not excluded:
        return tokens_df.copy()
    mask = ~tokens_df["word"].isin(excluded)
    return tokens_df[mask].reset_index(drop=True)


def drop_numeric_tokens(tokens_df: pd.DataFrame) -> pd.DataFrame:
    """
    Drop tokens made only of digits (years, salaries, phone fragments).
    """
    mask = ~tokens_df["word"].str.fullmatch(r"\d+").fillna(False).astype(bool)
    return tokens_df[mask].reset_index(drop=True)


# ---------------------------------------------------------------------------
# Stemming
# ---------------------------------------------------------------------------


def _build_stemmer(algorithm: str = "snowball", language: str = "english"):
    """
    Build a stemmer object with a .stem(token) method.

    Parameters
    ----------
    algorithm : str
        "snowball" or "porter".
    language : str
        Language for the Snowball stemmer.
    """
    algo = (algorithm or "snowball").lower()
    if algo == "snowball":
        return SnowballStemmer(language or "english")
    if algo == "porter":
        return PorterStemmer()
    raise ValueError(f"Unknown stemming algorithm '{algorithm}'. Expected 'snowball' or 'porter'.")


def stem_tokens(
    tokens_df: pd.DataFrame,
    algorithm: str = "snowball",
    language: str = "english",
) -> pd.DataFrame:
    """
    Add a "stem" column holding the stemmed form of each token.

    Each distinct word is stemmed once and mapped back onto the table.
    """
    stemmer = _build_stemmer(algorithm, language)
    out = tokens_df.copy()
    unique_words = out["word"].unique()
    stems = {w: stemmer.stem(w) for w in unique_words}
    out["stem"] = out["word"].map(stems).astype(str) if len(out) else out["word"]
    return out


# ---------------------------------------------------------------------------
# High-level preprocessing
# ---------------------------------------------------------------------------


def preprocess_descriptions(
    description_table: pd.DataFrame,
    preprocessing_cfg: Optional[Dict[str, Any]] = None,
    stopword_set: Optional[Set[str]] = None,
) -> pd.DataFrame:
    """
    Full token pipeline for the description table.

    Steps, controlled by the "preprocessing" section of config/data.yaml:

    - tokenization (tokenize.method)
    - stop-word anti-join (stopwords.enabled / source / language / extra)
    - custom exclusions (custom_exclusions)
    - numeric token removal (drop_numeric)
    - stemming (stemming.enabled / algorithm); when disabled the "stem"
      column repeats the word so downstream counting is unchanged

    Parameters
    ----------
    description_table : pd.DataFrame
        Columns ["row_id", "text"].
    preprocessing_cfg : Optional[Dict[str, Any]]
        Preprocessing configuration.
    stopword_set : Optional[Set[str]]
        Pre-built stop-word set; overrides the configured source.

    Returns
    -------
    pd.DataFrame
        Tidy token table with columns ["row_id", "word", "stem"].
    """
    cfg = preprocessing_cfg or {}

    tokenize_cfg = cfg.get("tokenize", {}) or {}
    tokens = unnest_tokens(
        description_table,
        text_column="text",
        id_column="row_id",
        method=tokenize_cfg.get("method", "regex"),
    )

    sw_cfg = cfg.get("stopwords", {}) or {}
    if stopword_set is not None:
        tokens = remove_stopwords(tokens, stopword_set)
    elif bool(sw_cfg.get("enabled", True)):
        sw_set = get_stopword_set(
            source=sw_cfg.get("source", "nltk"),
            language=sw_cfg.get("language", "english"),
            extra=sw_cfg.get("extra"),
        )
        tokens = remove_stopwords(tokens, sw_set)

    tokens = remove_custom_words(tokens, cfg.get("custom_exclusions") or [])

    if bool(cfg.get("drop_numeric", True)):
        tokens = drop_numeric_tokens(tokens)

    stem_cfg = cfg.get("stemming", {}) or {}
    if bool(stem_cfg.get("enabled", True)):
        tokens = stem_tokens(
            tokens,
            algorithm=stem_cfg.get("algorithm", "snowball"),
            language=stem_cfg.get("language", "english"),
        )
    else:
        tokens = tokens.assign(stem=tokens["word"])

    return tokens


def tokens_per_record(
    tokens_df: pd.DataFrame,
    description_table: pd.DataFrame,
) -> pd.DataFrame:
    """
    Count tokens for every source record.

    Records without any surviving token get a count of 0.

    Returns
    -------
    pd.DataFrame
        Columns ["row_id", "n_tokens"], one row per record of the
        description table.
    """
    counts = tokens_df.groupby("row_id").size()
    row_ids = description_table["row_id"]
    n_tokens = counts.reindex(row_ids, fill_value=0).astype(int)
    return pd.DataFrame({"row_id": row_ids.to_numpy(), "n_tokens": n_tokens.to_numpy()})
