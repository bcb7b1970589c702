"""
Tests for word frequency tables and sentiment lexicon joins.
"""

from __future__ import annotations

import pandas as pd
import pytest

from jobtext.features.frequency import count_words, top_n_words, word_share
from jobtext.features.sentiment import (
    join_sentiment,
    net_sentiment,
    sentiment_totals,
    top_words_by_sentiment,
)


@pytest.fixture
def tokens() -> pd.DataFrame:
    stems = ["data", "team", "data", "risk", "data", "team", "great"]
    return pd.DataFrame(
        {"row_id": [1, 1, 1, 2, 2, 3, 3], "word": stems, "stem": stems}
    )


@pytest.fixture
def freq() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "word": ["python", "good", "risk", "bad", "claims"],
            "n": [10, 5, 3, 2, 4],
        }
    )


# ---------------------------------------------------------------------------
# Frequency
# ---------------------------------------------------------------------------


def test_count_words_sorted_descending(tokens):
    freq = count_words(tokens)

    assert list(freq.columns) == ["word", "n"]
    assert list(zip(freq["word"], freq["n"])) == [
        ("data", 3),
        ("team", 2),
        ("great", 1),
        ("risk", 1),
    ]
    assert freq["n"].is_monotonic_decreasing
    assert freq["n"].sum() == len(tokens)


def test_count_words_empty_and_bad_column(tokens):
    empty = count_words(tokens.iloc[0:0])
    assert empty.empty
    assert list(empty.columns) == ["word", "n"]

    with pytest.raises(KeyError):
        count_words(tokens, column="lemma")


def test_top_n_words(tokens):
    freq = count_words(tokens)

    assert top_n_words(freq, 2)["word"].tolist() == ["data", "team"]
    assert len(top_n_words(freq, 100)) == len(freq)
    with pytest.raises(ValueError):
        top_n_words(freq, 0)


def test_word_share_sums_to_one(tokens):
    shares = word_share(count_words(tokens))

    assert shares["proportion"].sum() == pytest.approx(1.0)


# ---------------------------------------------------------------------------
# Sentiment
# ---------------------------------------------------------------------------


def test_join_sentiment_keeps_only_lexicon_words(freq):
    lexicon = pd.DataFrame(
        {"word": ["good", "bad", "great"], "sentiment": ["positive", "negative", "positive"]}
    )

    joined = join_sentiment(freq, lexicon)

    assert list(joined.columns) == ["word", "sentiment", "n"]
    assert list(zip(joined["word"], joined["sentiment"], joined["n"])) == [
        ("good", "positive", 5),
        ("bad", "negative", 2),
    ]
    assert net_sentiment(joined) == 3


def test_join_sentiment_multi_category_words(freq):
    lexicon = pd.DataFrame(
        {
            "word": ["claims", "claims", "risk"],
            "sentiment": ["litigious", "negative", "uncertainty"],
        }
    )

    joined = join_sentiment(freq, lexicon)
    totals = sentiment_totals(joined)

    assert dict(zip(totals["sentiment"], totals["n"])) == {
        "litigious": 4,
        "negative": 4,
        "uncertainty": 3,
    }
    assert totals["n"].sum() == joined["n"].sum()
    assert totals["n"].is_monotonic_decreasing


def test_join_sentiment_missing_columns(freq):
    with pytest.raises(KeyError):
        join_sentiment(freq, pd.DataFrame({"word": ["good"]}))


def test_top_words_by_sentiment():
    joined = pd.DataFrame(
        {
            "word": ["a", "b", "c", "d", "e"],
            "sentiment": ["positive", "positive", "positive", "negative", "negative"],
            "n": [5, 9, 1, 2, 7],
        }
    )

    top = top_words_by_sentiment(joined, 2)

    assert set(zip(top["sentiment"], top["word"])) == {
        ("positive", "b"),
        ("positive", "a"),
        ("negative", "e"),
        ("negative", "d"),
    }
    with pytest.raises(ValueError):
        top_words_by_sentiment(joined, -1)


def test_net_sentiment_without_categories():
    joined = pd.DataFrame({"word": ["risk"], "sentiment": ["uncertainty"], "n": [3]})

    assert net_sentiment(joined) == 0
