"""CLI configuration: config file loading, logging setup and overrides.

Config files are YAML (``.yml``/``.yaml``) or JSON (``.json``). Recognized
keys::

    logging:
      level: DEBUG
    scan:
      extensions: [".ts", ".tsx"]

CLI flags take precedence over config values.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional, Tuple

import yaml

from common.logging_utils import configure_logging
from constants import Constants

logger = logging.getLogger(__name__)


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load a configuration mapping from ``config_path``.

    Returns an empty dict when no path is given or the file does not exist
    (with a warning). A file that cannot be parsed, or whose top level is
    not a mapping, raises ``ValueError``.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            if config_path.lower().endswith(".json"):
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ValueError(f"Failed to parse config {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {config_path} must contain a mapping at the top level")
    return data


def setup_logging(args: Any, config: Optional[Dict[str, Any]] = None) -> None:
    """Configure logging from CLI arguments, falling back to the config file."""
    level = getattr(args, "LOG_LEVEL", None)
    if not level:
        level = ((config or {}).get("logging") or {}).get("level")
    if level:
        os.environ[Constants.ENV_LOG_LEVEL] = str(level).upper()

    configure_logging()

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )
        file_handler.setFormatter(formatter)
        logging.getLogger().addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)


def scan_extensions(args: Any, config: Optional[Dict[str, Any]] = None) -> Tuple[str, ...]:
    """Resolve the file extensions the scan command should keep."""
    cli_exts = getattr(args, "EXTENSIONS", None)
    if cli_exts:
        return tuple(cli_exts)
    cfg_exts = ((config or {}).get("scan") or {}).get("extensions")
    if cfg_exts:
        if not isinstance(cfg_exts, list) or not all(isinstance(e, str) for e in cfg_exts):
            raise ValueError("scan.extensions must be a list of strings")
        return tuple(cfg_exts)
    return Constants.DEFAULT_SCAN_EXTENSIONS
