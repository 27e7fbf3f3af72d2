from __future__ import annotations

"""
Configuration Domain Management.

Provides the default run configuration and loading of optional JSON
configuration files supplied by the user.
"""

import json
import logging
import os
from typing import Any, Dict

from rift.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_DIRECTIVE_REGEX = r'#include "([\w./%]*)"'
DEFAULT_MAX_DEPTH = 5
DEFAULT_LOG_LEVEL = "INFO"

CONFIG_KEYS = (
    "input_path",
    "output_path",
    "regex",
    "max_depth",
    "extensions",
    "dry_run",
    "log_level",
    "log_file",
)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default run configuration.

    The scan root defaults to the current working directory. The output
    root has no default and must be provided for a run.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": os.getcwd(),
        "output_path": "",

        # Inclusion
        "regex": DEFAULT_DIRECTIVE_REGEX,
        "max_depth": DEFAULT_MAX_DEPTH,

        # Filtering (empty = every file)
        "extensions": [],

        # Execution
        "dry_run": False,

        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config_file(path: str) -> Dict[str, Any]:
    """
    Load a configuration object from a JSON file.

    Unknown keys are ignored with a warning. Values are not validated here;
    that is the job of the validator stage.

    Args:
        path: Path to the JSON file.

    Returns:
        Dict[str, Any]: The known keys found in the file.

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a JSON object.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Corrupted configuration file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file '{path}' must contain a JSON object, "
            f"found {type(data).__name__}."
        )

    known: Dict[str, Any] = {}
    for key, value in data.items():
        if key in CONFIG_KEYS:
            known[key] = value
        else:
            logger.warning(f"Ignoring unknown configuration key '{key}' in {path}")

    logger.debug(f"Loaded {len(known)} configuration keys from {path}")
    return known
