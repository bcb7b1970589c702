"""
Tests for boilerplate removal and encoding cleanup.
"""

from __future__ import annotations

import pandas as pd
import pytest

from jobtext.features.cleaning import (
    DEFAULT_BOILERPLATE_PATTERNS,
    build_description_table,
    clean_description,
    clean_description_series,
    compile_patterns,
    remove_boilerplate,
    transliterate_to_ascii,
)


def test_remove_boilerplate_drops_whole_sentence():
    patterns = compile_patterns(DEFAULT_BOILERPLATE_PATTERNS)
    text = "Acme is an Equal Opportunity Employer. We build rockets."

    assert remove_boilerplate(text, patterns) == "We build rockets."


@pytest.mark.parametrize("gap", ["\n", "\t", "  ", "\r\n"])
def test_boilerplate_split_across_lines_is_removed(gap):
    patterns = compile_patterns(DEFAULT_BOILERPLATE_PATTERNS)
    text = f"Great team. Acme is an equal opportunity{gap}employer. Apply today."

    cleaned = clean_description(text, patterns=patterns)

    assert cleaned == "Great team. Apply today."
    assert not any(p.search(cleaned) for p in patterns)


def test_boilerplate_exposed_by_removal_is_removed():
    patterns = compile_patterns([r"\bclick here\b"])

    # Removing the inner phrase joins "click" and "here" into a new match.
    cleaned = remove_boilerplate("please click click here here now", patterns)

    assert cleaned == "please now"


def test_boilerplate_absent_after_cleaning(jobs_df):
    cleaned = clean_description_series(jobs_df["description"])

    for text in cleaned:
        lowered = text.lower()
        assert "equal opportunity employer" not in lowered
        assert "will receive consideration" not in lowered


def test_custom_patterns_from_config():
    cfg = {"boilerplate_patterns": [r"apply now[.!]?"]}
    cleaned = clean_description_series(pd.Series(["Great team. Apply NOW!"]), cfg)

    assert cleaned.tolist() == ["Great team."]


def test_invalid_pattern_raises():
    with pytest.raises(ValueError, match="Invalid boilerplate pattern"):
        compile_patterns(["(unclosed"])


def test_transliterate_to_ascii():
    text = "Café naïve – “quoted” text"

    result = transliterate_to_ascii(text)

    assert result.isascii()
    assert "Cafe" in result
    assert "naive" in result
    assert "quoted" in result


def test_clean_description_handles_missing_and_non_strings():
    assert clean_description(None) == ""
    assert clean_description(float("nan")) == ""
    assert clean_description(42) == "42"


def test_clean_description_can_keep_unicode():
    text = clean_description("Café", patterns=[], transliterate=False)

    assert text == "Café"


def test_build_description_table_row_ids(jobs_df):
    table = build_description_table(jobs_df, text_column="description")

    assert list(table.columns) == ["row_id", "text"]
    assert table["row_id"].tolist() == [1, 2, 3, 4]
    assert all(t.isascii() for t in table["text"])
    assert table.loc[3, "text"] == ""


def test_build_description_table_missing_column(jobs_df):
    with pytest.raises(ValueError, match="Missing description column"):
        build_description_table(jobs_df, text_column="body")
