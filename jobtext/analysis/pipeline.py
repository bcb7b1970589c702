"""
End-to-end word and sentiment analysis of job descriptions.

This module runs the full exploratory pipeline:

- loading the job postings dataset
- stripping boilerplate sentences and non-ASCII artifacts
- wrapping descriptions in a row-indexed table
- tokenizing into a tidy (row_id, word) table
- removing stop words and custom exclusions, then stemming
- counting word frequencies across the corpus
- joining counts with the bing and loughran sentiment lexicons
- saving result tables under results_dir and charts under figures_dir

This module is designed to be callable both as a library function and
as a standalone script (via `python -m jobtext.analysis.pipeline`).
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional, Set

import pandas as pd

from jobtext.data.datasets import (
    DEFAULT_DATA_CONFIG_PATH,
    load_data_config,
    load_jobs_dataset,
)
from jobtext.data.lexicons import load_lexicon
from jobtext.features.cleaning import build_description_table
from jobtext.features.frequency import count_words
from jobtext.features.preprocessing import preprocess_descriptions, tokens_per_record
from jobtext.features.sentiment import join_sentiment, net_sentiment, sentiment_totals
from jobtext.utils.run_utils import (
    DEFAULT_RUN_CONFIG_PATH,
    configure_logging,
    ensure_dir_exists,
    load_run_config,
)
from jobtext.visualization.plots import (
    plot_sentiment_facets,
    plot_sentiment_totals,
    plot_top_words,
)


SUPPORTED_LEXICONS = ("bing", "loughran")


# ---------------------------------------------------------------------------
# Core helpers
# ---------------------------------------------------------------------------


def enabled_lexicons(sentiment_cfg: Dict[str, Any]) -> list:
    """
    Names of the lexicons switched on in the "sentiment" config section,
    in the order bing, loughran.
    """
    lexicons_cfg = sentiment_cfg.get("lexicons", {}) or {}
    names = []
    for name in SUPPORTED_LEXICONS:
        lex_cfg = lexicons_cfg.get(name, {}) or {}
        if bool(lex_cfg.get("enabled", True)):
            names.append(name)
    return names


def analyze_dataframe(
    df: pd.DataFrame,
    data_cfg: Dict[str, Any],
    lexicons: Optional[Mapping[str, pd.DataFrame]] = None,
    stopword_set: Optional[Set[str]] = None,
) -> Dict[str, pd.DataFrame]:
    """
    Run cleaning, tokenization, counting and sentiment joins in memory.

    Parameters
    ----------
    df : pd.DataFrame
        Job postings with a description column.
    data_cfg : Dict[str, Any]
        Full data configuration (see config/data.yaml).
    lexicons : Optional[Mapping[str, pd.DataFrame]]
        Sentiment lexicons keyed by name, each with columns
        ["word", "sentiment"].
    stopword_set : Optional[Set[str]]
        Pre-built stop-word set overriding the configured source.

    Returns
    -------
    Dict[str, pd.DataFrame]
        Tables keyed by name: "descriptions", "tokens",
        "tokens_per_record", "word_frequencies", and for each lexicon
        "sentiment_<name>" and "sentiment_<name>_totals".
    """
    dataset_cfg = data_cfg.get("dataset", {}) or {}
    text_column = dataset_cfg.get("text_column", "description")

    descriptions = build_description_table(
        df,
        text_column=text_column,
        cleaning_cfg=data_cfg.get("cleaning", {}) or {},
    )

    tokens = preprocess_descriptions(
        descriptions,
        preprocessing_cfg=data_cfg.get("preprocessing", {}) or {},
        stopword_set=stopword_set,
    )

    frequency_cfg = data_cfg.get("frequency", {}) or {}
    count_column = frequency_cfg.get("column", "stem")
    freq = count_words(tokens, column=count_column)

    results: Dict[str, pd.DataFrame] = {
        "descriptions": descriptions,
        "tokens": tokens,
        "tokens_per_record": tokens_per_record(tokens, descriptions),
        "word_frequencies": freq,
    }

    sentiment_cfg = data_cfg.get("sentiment", {}) or {}
    match_on = sentiment_cfg.get("match_on", count_column)
    match_freq = freq if match_on == count_column else count_words(tokens, column=match_on)

    for name, lexicon_df in (lexicons or {}).items():
        joined = join_sentiment(match_freq, lexicon_df)
        results[f"sentiment_{name}"] = joined
        results[f"sentiment_{name}_totals"] = sentiment_totals(joined)

    return results


def _save_tables(
    results: Dict[str, pd.DataFrame],
    results_dir: str,
    run_logger: logging.Logger,
) -> None:
    ensure_dir_exists(results_dir)
    for name, table in results.items():
        if name in ("descriptions", "tokens"):
            continue
        csv_path = os.path.join(results_dir, f"{name}.csv")
        table.to_csv(csv_path, index=False)
        run_logger.info("Saved %s (%d rows) to %s", name, len(table), csv_path)


def _save_plots(
    results: Dict[str, pd.DataFrame],
    lexicon_names,
    figures_dir: str,
    plots_cfg: Dict[str, Any],
    run_logger: logging.Logger,
) -> None:
    ensure_dir_exists(figures_dir)
    show = bool(plots_cfg.get("show", False))
    top_n = int(plots_cfg.get("top_n_words", 20))
    per_sentiment = int(plots_cfg.get("top_n_per_sentiment", 10))
    ncols = int(plots_cfg.get("facet_ncols", 2))

    freq = results["word_frequencies"]
    if freq.empty:
        run_logger.warning("No tokens left after preprocessing; skipping plots.")
        return

    out_path = os.path.join(figures_dir, "top_words.png")
    plot_top_words(freq, top_n=top_n, out_path=out_path, show=show)
    run_logger.info("Saved top-%d word chart to %s", top_n, out_path)

    for name in lexicon_names:
        joined = results[f"sentiment_{name}"]
        if joined.empty:
            run_logger.warning("No words matched the %s lexicon; skipping its plots.", name)
            continue

        totals_path = os.path.join(figures_dir, f"sentiment_{name}_totals.png")
        plot_sentiment_totals(
            results[f"sentiment_{name}_totals"],
            lexicon_name=name,
            out_path=totals_path,
            show=show,
        )

        facets_path = os.path.join(figures_dir, f"sentiment_{name}_facets.png")
        plot_sentiment_facets(
            joined,
            top_n=per_sentiment,
            ncols=ncols,
            lexicon_name=name,
            out_path=facets_path,
            show=show,
        )
        run_logger.info("Saved %s sentiment charts to %s", name, figures_dir)


# ---------------------------------------------------------------------------
# End-to-end run
# ---------------------------------------------------------------------------


def run_job_text_analysis(
    data_config_path: str = DEFAULT_DATA_CONFIG_PATH,
    run_config_path: str = DEFAULT_RUN_CONFIG_PATH,
    make_plots: Optional[bool] = None,
) -> Dict[str, pd.DataFrame]:
    """
    End-to-end pipeline: load, clean, tokenize, count, score, save.

    Parameters
    ----------
    data_config_path : str
        Path to config/data.yaml.
    run_config_path : str
        Path to config/run.yaml.
    make_plots : Optional[bool]
        Overrides plots.enabled from the run config when not None.

    Returns
    -------
    Dict[str, pd.DataFrame]
        The tables produced by `analyze_dataframe`.
    """
    data_cfg = load_data_config(data_config_path)
    run_cfg = load_run_config(run_config_path)

    run_logger = configure_logging(run_cfg, log_file_suffix="eda")

    jobs_df = load_jobs_dataset(config_path=data_config_path)
    run_logger.info("Loaded %d job postings from %s.", len(jobs_df), data_cfg["dataset"].get("path"))

    sentiment_cfg = data_cfg.get("sentiment", {}) or {}
    lexicon_names = enabled_lexicons(sentiment_cfg)
    lexicons = {}
    for name in lexicon_names:
        lexicons[name] = load_lexicon(name, sentiment_cfg)
        run_logger.info("Loaded %s lexicon with %d entries.", name, len(lexicons[name]))

    results = analyze_dataframe(jobs_df, data_cfg, lexicons=lexicons)

    tokens = results["tokens"]
    freq = results["word_frequencies"]
    run_logger.info(
        "Tokenized %d descriptions into %d tokens (%d distinct).",
        len(results["descriptions"]),
        len(tokens),
        len(freq),
    )
    if not freq.empty:
        run_logger.info("Top words:\n%s", freq.head(10).to_string(index=False))

    for name in lexicon_names:
        joined = results[f"sentiment_{name}"]
        run_logger.info(
            "%s: %d matched words, net sentiment %d",
            name,
            len(joined),
            net_sentiment(joined),
        )

    paths_cfg = run_cfg.get("paths", {}) or {}
    save_cfg = run_cfg.get("save", {}) or {}
    plots_cfg = run_cfg.get("plots", {}) or {}

    if bool(save_cfg.get("tables", True)):
        _save_tables(results, paths_cfg.get("results_dir", "outputs/results"), run_logger)

    if make_plots is None:
        make_plots = bool(plots_cfg.get("enabled", True))
    if make_plots:
        _save_plots(
            results,
            lexicon_names,
            paths_cfg.get("figures_dir", "outputs/figures"),
            plots_cfg,
            run_logger,
        )

    run_logger.info("Job description analysis completed.")
    return results


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """
    Main entry point when running this module as a script.
    """
    _ = run_job_text_analysis()


if __name__ == "__main__":
    main()
