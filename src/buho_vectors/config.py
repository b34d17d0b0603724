from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv

load_dotenv(override=True)

CONFIG_FILE_PATH = Path(__file__).parent / "config.yaml"

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def load_config(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a given YAML file path.

    Args:
        config_path: Explicit path to the configuration file.

    Returns:
        Parsed configuration dictionary.

    Raises:
        FileNotFoundError: If the configuration file is not found.
        ValueError: If there is an error parsing the YAML file.
    """
    path = Path(config_path)

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FileNotFoundError(f"Configuration file not found: {path}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML file '{path}': {e}") from e

    return data or {}


@dataclass(frozen=True)
class Settings:
    http_timeout: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL


def build_settings(cfg: Dict[str, Any] | None = None) -> Settings:
    """Merge a parsed config dict with environment overrides.

    Env overrides:
      - BUHO_HTTP_TIMEOUT (seconds)
      - LOG_LEVEL
    """
    cfg = cfg or {}
    http_cfg = cfg.get("http") or {}
    log_cfg = cfg.get("logging") or {}

    timeout = os.environ.get("BUHO_HTTP_TIMEOUT") or http_cfg.get(
        "timeout_seconds", DEFAULT_TIMEOUT_SECONDS
    )
    try:
        http_timeout = float(timeout)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid HTTP timeout: {timeout!r}") from e

    log_level = os.environ.get("LOG_LEVEL") or log_cfg.get("level", DEFAULT_LOG_LEVEL)
    return Settings(http_timeout=http_timeout, log_level=str(log_level).upper())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    try:
        cfg = load_config(CONFIG_FILE_PATH)
    except FileNotFoundError:
        logger.warning("No config file at %s; using defaults", CONFIG_FILE_PATH)
        cfg = {}
    return build_settings(cfg)
