"""
Run-level helpers: YAML config loading, output directories and logging.

Both config files go through `load_yaml_config`, which checks the
sections a caller depends on. Logging is configured once per run on the
"jobtext" package logger, so messages from every module logger under
the package (jobtext.features.preprocessing, jobtext.analysis.pipeline,
...) reach the same console and log file.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Iterable, Optional

import yaml


DEFAULT_RUN_CONFIG_PATH = "config/run.yaml"

RUN_CONFIG_SECTIONS = ("paths", "plots")

PACKAGE_LOGGER = "jobtext"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------


def load_yaml_config(
    path: str,
    required_sections: Iterable[str] = (),
    kind: str = "Config",
) -> Dict[str, Any]:
    """
    Parse a YAML mapping and check that it has the required top-level
    sections.

    Parameters
    ----------
    path : str
        YAML file path.
    required_sections : Iterable[str]
        Top-level keys that must be present.
    kind : str
        Label used in error messages ("Data config", "Run config").

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file is empty or does not hold a mapping.
    KeyError
        If a required section is missing.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"{kind} file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    if not isinstance(cfg, dict):
        raise ValueError(f"{kind} file is empty or not a mapping: {path}")

    missing = [s for s in required_sections if s not in cfg]
    if missing:
        raise KeyError(f"Missing {missing} section(s) in {kind.lower()}: {path}")

    return cfg


def load_run_config(config_path: str = DEFAULT_RUN_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load config/run.yaml: output paths, plotting, logging and saving.

    "paths" and "plots" must be present; "logging" and "save" are
    optional and fall back to the defaults used by `configure_logging`
    and the pipeline.
    """
    return load_yaml_config(config_path, RUN_CONFIG_SECTIONS, kind="Run config")


# ---------------------------------------------------------------------------
# Filesystem utilities
# ---------------------------------------------------------------------------


def ensure_dir_exists(path: str) -> None:
    """Create `path` (and parents) unless it is empty or already there."""
    if path:
        os.makedirs(path, exist_ok=True)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def _parse_log_level(level: Any) -> int:
    """Map "debug"/"INFO"/... or a numeric level to a logging constant."""
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level or "INFO").upper(), None)
    return value if isinstance(value, int) else logging.INFO


def log_file_path(config: Dict[str, Any], log_file_suffix: Optional[str] = None) -> str:
    """
    Path of the run log: <logs_dir>/<file_prefix>[_<suffix>].log.
    """
    logging_cfg = config.get("logging", {}) or {}
    paths_cfg = config.get("paths", {}) or {}

    logs_dir = paths_cfg.get("logs_dir", "outputs/logs")
    prefix = logging_cfg.get("file_prefix", "jobtext")
    name = f"{prefix}_{log_file_suffix}" if log_file_suffix else prefix
    return os.path.join(logs_dir, f"{name}.log")


def configure_logging(
    config: Dict[str, Any],
    log_file_suffix: Optional[str] = None,
) -> logging.Logger:
    """
    Attach console and (optionally) file handlers to the package logger.

    Handlers from an earlier call are closed and replaced, so each run
    logs to the file named by its own config.

    Parameters
    ----------
    config : Dict[str, Any]
        Run configuration; reads logging.level, logging.to_file,
        logging.file_prefix and paths.logs_dir.
    log_file_suffix : Optional[str]
        Appended to the log file name, e.g. "eda".

    Returns
    -------
    logging.Logger
        The "jobtext" package logger.
    """
    logging_cfg = config.get("logging", {}) or {}
    level = _parse_log_level(logging_cfg.get("level", "INFO"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers = [logging.StreamHandler()]

    if bool(logging_cfg.get("to_file", True)):
        path = log_file_path(config, log_file_suffix)
        ensure_dir_exists(os.path.dirname(path))
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
