"""
Dataset loading utilities for the job postings corpus.

This module is responsible for:
- reading the dataset configuration from config/data.yaml
- loading the serialized job postings table (CSV, TSV, JSON, JSON lines
  or pickle) into a pandas DataFrame
- validating that the description column exists
- applying basic cleaning (drop NA descriptions, drop duplicates) as
  configured

The resulting DataFrame feeds the boilerplate cleaning and tokenization
stages in jobtext.features.
"""

from __future__ import annotations

import os
from typing import Any, Dict

import pandas as pd

from jobtext.utils.run_utils import load_yaml_config


DEFAULT_DATA_CONFIG_PATH = "config/data.yaml"

REQUIRED_SECTIONS = ("dataset", "cleaning", "preprocessing", "sentiment")


def load_data_config(config_path: str = DEFAULT_DATA_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load and return the full data configuration dictionary.

    Parameters
    ----------
    config_path : str, optional
        Path to the data YAML configuration file.

    Returns
    -------
    Dict[str, Any]
        Dictionary containing the "dataset", "cleaning", "preprocessing"
        and "sentiment" sections.
    """
    return load_yaml_config(config_path, REQUIRED_SECTIONS, kind="Data config")


def read_table(path: str) -> pd.DataFrame:
    """
    Read a serialized table of job postings, choosing the reader from the
    file extension.

    Supported extensions: .csv, .tsv, .json, .jsonl, .pkl, .pickle.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the extension is not supported or a pickle does not hold a
        DataFrame.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Dataset file not found at: {path}")

    ext = os.path.splitext(path)[1].lower()

    if ext == ".csv":
        return pd.read_csv(path)
    if ext == ".tsv":
        return pd.read_csv(path, sep="\t")
    if ext == ".json":
        return pd.read_json(path)
    if ext == ".jsonl":
        return pd.read_json(path, lines=True)
    if ext in (".pkl", ".pickle"):
        df = pd.read_pickle(path)
        if not isinstance(df, pd.DataFrame):
            raise ValueError(
                f"Pickle at {path} holds {type(df).__name__}, expected a DataFrame."
            )
        return df

    raise ValueError(
        f"Unsupported dataset format '{ext}' for {path}. "
        "Expected one of: .csv, .tsv, .json, .jsonl, .pkl, .pickle"
    )


def prepare_jobs_dataframe(
    df: pd.DataFrame,
    text_column: str = "description",
    drop_na_text: bool = True,
    drop_duplicates: bool = False,
) -> pd.DataFrame:
    """
    Validate and tidy a raw job postings DataFrame.

    Parameters
    ----------
    df : pd.DataFrame
        Raw postings table.
    text_column : str
        Name of the free-text description column.
    drop_na_text : bool
        Drop rows whose description is missing.
    drop_duplicates : bool
        Drop rows repeating an earlier description verbatim.

    Returns
    -------
    pd.DataFrame
        Copy of the input with a string description column and a fresh
        0..N-1 index.

    Raises
    ------
    ValueError
        If the description column is missing.
    """
    if text_column not in df.columns:
        raise ValueError(
            f"Missing description column '{text_column}' in dataset. "
            f"Available columns: {list(df.columns)}"
        )

    out = df.copy()

    if drop_na_text:
        out = out.dropna(subset=[text_column])

    if drop_duplicates:
        out = out.drop_duplicates(subset=[text_column], keep="first")

    out[text_column] = out[text_column].fillna("").astype(str)

    return out.reset_index(drop=True)


def load_jobs_dataset(
    config_path: str = DEFAULT_DATA_CONFIG_PATH,
) -> pd.DataFrame:
    """
    Load the job postings dataset according to the configuration.

    This function:
    - reads the file specified under dataset.path in config/data.yaml
    - ensures the description column exists
    - optionally drops NA descriptions and duplicate descriptions
    - casts the description column to str and resets the index

    Parameters
    ----------
    config_path : str, optional
        Path to the data YAML configuration file.

    Returns
    -------
    pd.DataFrame
        Job postings, one row per record, in file order.
    """
    cfg = load_data_config(config_path)
    dataset_cfg = cfg["dataset"] or {}

    path = dataset_cfg.get("path", "data/raw/job_postings.csv")
    text_column = dataset_cfg.get("text_column", "description")

    df = read_table(path)

    return prepare_jobs_dataframe(
        df,
        text_column=text_column,
        drop_na_text=bool(dataset_cfg.get("drop_na_text", True)),
        drop_duplicates=bool(dataset_cfg.get("drop_duplicates", False)),
    )
