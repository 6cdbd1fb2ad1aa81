"""wastecal.core.config_loader

Lightweight config loader for wastecal.

- Reads YAML (PyYAML) from an explicit path, the WASTECAL_CONFIG environment
  variable, or ./wastecal.yaml in the working directory.
- Exposes a typed dataclass `Config` and a `load_config()` helper that accepts
  an optional path override.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "wastecal.yaml"
CONFIG_ENV_VAR = "WASTECAL_CONFIG"
DEFAULT_OUTPUT_PATH = "output.ics"
DEFAULT_PRODID = "-//wastecal//Waste Collection Calendar//PL"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class Config:
    """Typed configuration for wastecal.

    Fields:
        delimiter: CSV delimiter of the input sheet (single character)
        encoding: text encoding of the input sheet
        default_output_path: where the calendar goes when the CLI gets no path
        prodid: PRODID written into the calendar document
        calendar_name: optional X-WR-CALNAME for the calendar document
        log_level: logging level name
    """

    delimiter: str = ","
    encoding: str = "utf-8"
    default_output_path: str = DEFAULT_OUTPUT_PATH
    prodid: str = DEFAULT_PRODID
    calendar_name: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Config:
        """Create Config from a plain mapping, applying defaults and validation.

        Values that cannot be used are replaced by their defaults with a warning
        rather than failing the run.
        """
        if data is None:
            data = {}

        delimiter = str(data.get("delimiter", ","))
        if len(delimiter) != 1:
            logger.warning("Config delimiter=%r is not a single character; using ','", delimiter)
            delimiter = ","

        encoding = str(data.get("encoding") or "utf-8")

        output_path = data.get("default_output_path") or DEFAULT_OUTPUT_PATH
        prodid = data.get("prodid") or DEFAULT_PRODID

        calendar_name = data.get("calendar_name")
        if calendar_name is not None:
            calendar_name = str(calendar_name)

        log_level = str(data.get("log_level") or "INFO").upper()
        if log_level not in _VALID_LOG_LEVELS:
            logger.warning("Config log_level=%r is not recognised; using INFO", log_level)
            log_level = "INFO"

        return cls(
            delimiter=delimiter,
            encoding=encoding,
            default_output_path=str(output_path),
            prodid=str(prodid),
            calendar_name=calendar_name,
            log_level=log_level,
        )


def _resolve_config_path(path: str | None) -> Path:
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def load_config(path: str | None = None) -> Config:
    """Load configuration from a YAML file and return a Config instance.

    Args:
        path: Optional path to the config file. Falls back to the WASTECAL_CONFIG
              environment variable, then ./wastecal.yaml.

    Returns:
        Config dataclass instance with values from file (or defaults).

    Raises:
        ConfigError: If the file is not valid YAML or its top level is not a mapping.
    """
    p = _resolve_config_path(path)
    logger.debug("Attempting to load config from %s", p)
    if not p.exists():
        logger.debug("Config file %s not found; using defaults", p)
        return Config()

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file {p} is not valid YAML: {exc}") from exc

    # safe_load returns None for empty files
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        logger.warning("Config file %s parsed but top-level is not a mapping: %r", p, raw)
        raise ConfigError("Config file must contain a mapping at top level")

    cfg = Config.from_dict(raw)
    logger.info("Loaded configuration from %s", p)
    logger.debug("Configuration values: %s", cfg)
    return cfg
