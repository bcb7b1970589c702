"""
Description cleaning: boilerplate removal and encoding cleanup.

Job postings scraped from boards repeat the same legal and marketing
sentences ("... is an equal opportunity employer ...") and carry
encoding artifacts (curly quotes, non-breaking spaces, mojibake). Both
would dominate word counts, so they are stripped before tokenization.

The steps here are:

- transliteration of non-ASCII characters to their closest ASCII form
  (characters with no ASCII decomposition are dropped)
- regex removal of known boilerplate sentences
- whitespace normalization

and a helper that wraps the cleaned descriptions in a row-indexed table
(row_id 1..N) for the tidy tokenization step.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any, Dict, Iterable, List, Optional, Pattern

import pandas as pd


# Sentence-level patterns; each consumes the whole sentence around the
# matched phrase, up to (and including) the closing full stop.
DEFAULT_BOILERPLATE_PATTERNS: List[str] = [
    r"[^.!?]*\bequal (?:employment )?opportunity employer\b[^.!?]*[.!?]?",
    r"[^.!?]*\ball qualified applicants will receive consideration\b[^.!?]*[.!?]?",
    r"[^.!?]*\bwithout regard to race\b[^.!?]*[.!?]?",
    r"[^.!?]*\breasonable accommodations?\b[^.!?]*[.!?]?",
    r"[^.!?]*\bclick (?:here|apply)\b[^.!?]*[.!?]?",
]


def compile_patterns(patterns: Iterable[str]) -> List[Pattern[str]]:
    """
    Compile boilerplate regexes case-insensitively.

    Raises
    ------
    ValueError
        If a pattern is not a valid regular expression.
    """
    compiled = []
    for p in patterns:
        try:
            compiled.append(re.compile(p, flags=re.IGNORECASE))
        except re.error as exc:
            raise ValueError(f"Invalid boilerplate pattern {p!r}: {exc}") from exc
    return compiled


def _collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def transliterate_to_ascii(text: str) -> str:
    """
    Transliterate text to ASCII.

    Accented letters decompose to their base letter (NFKD), compatibility
    characters such as non-breaking spaces become their plain forms, and
    anything left outside ASCII is dropped.
    """
    normalized = unicodedata.normalize("NFKD", text)
    return normalized.encode("ascii", "ignore").decode("ascii")


def remove_boilerplate(text: str, patterns: Iterable[Pattern[str]]) -> str:
    """
    Replace every match of each boilerplate pattern with a space and
    normalize whitespace.

    Whitespace is collapsed before matching so a phrase broken across
    lines still matches. Passes repeat until no pattern matches; each
    pass that removes something shortens the text, so this terminates.

    Parameters
    ----------
    text : str
        Description text.
    patterns : Iterable[Pattern[str]]
        Compiled patterns (see `compile_patterns`).

    Returns
    -------
    str
        Text with the boilerplate sentences removed.
    """
    patterns = list(patterns)
    text = _collapse_whitespace(text)

    while True:
        cleaned = text
        for pattern in patterns:
            cleaned = pattern.sub(" ", cleaned)
        cleaned = _collapse_whitespace(cleaned)
        if cleaned == text:
            return cleaned
        text = cleaned


def clean_description(
    text: Any,
    patterns: Optional[Iterable[Pattern[str]]] = None,
    transliterate: bool = True,
) -> str:
    """
    Clean a single job description.

    Missing values (None/NaN) become the empty string and other
    non-strings are coerced with str().
    """
    if text is None or (pd.api.types.is_scalar(text) and pd.isna(text)):
        return ""
    if not isinstance(text, str):
        text = str(text)

    if transliterate:
        text = transliterate_to_ascii(text)

    if patterns is None:
        patterns = compile_patterns(DEFAULT_BOILERPLATE_PATTERNS)

    return remove_boilerplate(text, patterns)


def _patterns_from_cfg(cleaning_cfg: Dict[str, Any]) -> List[Pattern[str]]:
    patterns = cleaning_cfg.get("boilerplate_patterns")
    if patterns is None:
        patterns = DEFAULT_BOILERPLATE_PATTERNS
    return compile_patterns(patterns)


def clean_description_series(
    series: pd.Series,
    cleaning_cfg: Optional[Dict[str, Any]] = None,
) -> pd.Series:
    """
    Apply `clean_description` to every value of a Series.

    Parameters
    ----------
    series : pd.Series
        Raw descriptions.
    cleaning_cfg : Optional[Dict[str, Any]]
        The "cleaning" section of config/data.yaml. Recognized keys:
        "boilerplate_patterns" (list of regexes) and "transliterate"
        (bool, default True).

    Returns
    -------
    pd.Series
        Cleaned descriptions, same index as the input.
    """
    cfg = cleaning_cfg or {}
    patterns = _patterns_from_cfg(cfg)
    transliterate = bool(cfg.get("transliterate", True))

    return series.apply(
        lambda x: clean_description(x, patterns=patterns, transliterate=transliterate)
    )


def build_description_table(
    df: pd.DataFrame,
    text_column: str = "description",
    cleaning_cfg: Optional[Dict[str, Any]] = None,
) -> pd.DataFrame:
    """
    Clean the description column and wrap it in a row-indexed table.

    Returns
    -------
    pd.DataFrame
        Columns ["row_id", "text"], where row_id runs 1..N in the order of
        the input rows.
    """
    if text_column not in df.columns:
        raise ValueError(
            f"Missing description column '{text_column}'. "
            f"Available columns: {list(df.columns)}"
        )

    cleaned = clean_description_series(df[text_column], cleaning_cfg)

    return pd.DataFrame(
        {
            "row_id": range(1, len(df) + 1),
            "text": cleaned.to_numpy(),
        }
    )
