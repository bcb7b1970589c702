"""
Run the job description word and sentiment analysis.

This script is a convenience wrapper around
`jobtext.analysis.pipeline.run_job_text_analysis`, which:

- loads the configured job postings dataset
- strips boilerplate sentences and encoding artifacts
- tokenizes, removes stop words and stems the descriptions
- counts word frequencies and joins them with the bing and loughran
  sentiment lexicons
- writes result tables under outputs/results/
- saves charts under outputs/figures/

Usage (from project root):

    python -m scripts.run_eda
    # or
    python scripts/run_eda.py --no-plots
"""

from __future__ import annotations

import argparse

from jobtext.analysis.pipeline import run_job_text_analysis
from jobtext.utils.run_utils import configure_logging, load_run_config


def parse_args() -> argparse.Namespace:
    """
    Parse command-line arguments.
    """
    parser = argparse.ArgumentParser(
        description="Word frequency and sentiment analysis of job descriptions."
    )
    parser.add_argument(
        "--data-config",
        type=str,
        default="config/data.yaml",
        help="Path to data config YAML (default: config/data.yaml).",
    )
    parser.add_argument(
        "--run-config",
        type=str,
        default="config/run.yaml",
        help="Path to run config YAML (default: config/run.yaml).",
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip chart generation, only write result tables.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    run_cfg = load_run_config(args.run_config)
    logger = configure_logging(run_cfg, log_file_suffix="eda")

    logger.info("=" * 80)
    logger.info("Starting job description analysis.")
    logger.info("Configs: data=%s, run=%s", args.data_config, args.run_config)

    results = run_job_text_analysis(
        data_config_path=args.data_config,
        run_config_path=args.run_config,
        make_plots=False if args.no_plots else None,
    )

    freq = results["word_frequencies"]
    if freq.empty:
        logger.warning("Analysis finished, but no words survived preprocessing.")
    else:
        logger.info("Distinct stems counted: %d", len(freq))


if __name__ == "__main__":
    main()
