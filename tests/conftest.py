"""
Shared fixtures for the test suite.

Plots are rendered with the non-interactive Agg backend, and no fixture
needs NLTK corpora or network access: stop words come from
scikit-learn and lexicons are small in-memory tables.
"""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest


@pytest.fixture
def jobs_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "title": ["Data Analyst", "Backend Engineer", "Recruiter", "Intern"],
            "description": [
                "We are looking for a data analyst with strong SQL skills. "
                "Acme is an equal opportunity employer.",
                "Build reliable APIs in Python. Great benefits and a friendly team! "
                "All qualified applicants will receive consideration for employment.",
                "Café chain hiring recruiters — uncertain hours, risk of litigation claims.",
                "",
            ],
        }
    )


@pytest.fixture
def data_cfg() -> dict:
    return {
        "dataset": {"text_column": "description"},
        "cleaning": {"transliterate": True},
        "preprocessing": {
            "tokenize": {"method": "regex"},
            "stopwords": {"enabled": True, "source": "sklearn", "language": "english"},
            "custom_exclusions": ["acme"],
            "drop_numeric": True,
            "stemming": {"enabled": True, "algorithm": "snowball"},
        },
        "frequency": {"column": "stem"},
        "sentiment": {"match_on": "word"},
    }


@pytest.fixture
def bing_lexicon() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "word": ["great", "friendly", "strong", "reliable", "risk", "uncertain"],
            "sentiment": ["positive", "positive", "positive", "positive", "negative", "negative"],
        }
    )


@pytest.fixture
def loughran_lexicon() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "word": ["uncertain", "risk", "litigation", "claims", "claims", "great", "strong"],
            "sentiment": [
                "uncertainty",
                "uncertainty",
                "litigious",
                "litigious",
                "negative",
                "positive",
                "positive",
            ],
        }
    )
