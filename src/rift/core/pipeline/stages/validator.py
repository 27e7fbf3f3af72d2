from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper of the pipeline: merges the raw configuration with
the domain defaults, coerces untrusted values (CLI strings, JSON files) into
typed parameters and performs the fatal pre-flight checks that must pass
before any file is processed.
"""

import logging
from typing import Any, Dict, List, Tuple

from rift.core.services.scanner import normalize_extensions
from rift.domain.config import get_default_config
from rift.domain.errors import ConfigurationError
from rift.domain.models import DirectivePattern, compile_directive_pattern

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(config: Any) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).

    Returns:
        Tuple[Dict[str, Any], List[str]]: A tuple containing the normalized
                                          configuration and a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        warnings.append(
            f"Invalid config type: expected dict, received {type(config).__name__}. Using defaults."
        )
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if v is not None})

    # 2. Field Processing & Normalization
    for field in ("input_path", "output_path", "log_level", "log_file"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings)

    # The regex is kept verbatim: surrounding whitespace may be significant
    merged["regex"] = _as_regex(merged.get("regex"), defaults["regex"], warnings)
    merged["max_depth"] = _as_depth(merged.get("max_depth"), defaults["max_depth"], warnings)
    merged["dry_run"] = _as_bool(merged.get("dry_run"), defaults["dry_run"], "dry_run", warnings)

    # 3. Domain-Specific Normalization (Extensions)
    raw_exts = _as_list_str(merged.get("extensions"), "extensions", warnings)
    merged["extensions"] = normalize_extensions(raw_exts)

    return merged, warnings


def check_run_requirements(config: Dict[str, Any]) -> DirectivePattern:
    """
    Perform the fatal checks that must pass before a run starts.

    The capture-group count of the pattern is only reported here; matches
    found later with a wrong group count still abort their own pass.

    Args:
        config: A configuration already normalized by ``validate_config``.

    Returns:
        DirectivePattern: The compiled directive pattern.

    Raises:
        ConfigurationError: If the output path is missing, or the regex is empty
            or does not compile.
    """
    if not config.get("output_path"):
        raise ConfigurationError("Output directory is required (-o/--out_path).")
    if not config.get("regex"):
        raise ConfigurationError("Directive regex must not be empty (-r/--regex).")

    pattern = compile_directive_pattern(config["regex"])
    if not pattern.has_single_capture_group:
        logger.warning(
            f"Directive pattern {pattern.source!r} has {pattern.capture_groups} capture groups; "
            f"exactly one is required. Every file containing a match will be left unchanged."
        )
    return pattern


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str]) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    warnings.append(
        f"Invalid field '{field}': expected str, received {type(value).__name__}. Using fallback."
    )
    return fallback


def _as_regex(value: Any, fallback: str, warnings: List[str]) -> str:
    # An empty string is kept so that the pre-flight check can reject it
    if isinstance(value, str):
        return value

    warnings.append(
        f"Invalid field 'regex': expected str, received {type(value).__name__}. Using default pattern."
    )
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str]) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if isinstance(value, (int, float)) and value in (0, 1):
        warnings.append(f"Field '{field}' converted from number {value} to bool.")
        return bool(value)
    if isinstance(value, str):
        s = value.strip().lower()
        if s in ("true", "1", "yes", "y"):
            warnings.append(f"Field '{field}' converted from '{value}' to True.")
            return True
        if s in ("false", "0", "no", "n"):
            warnings.append(f"Field '{field}' converted from '{value}' to False.")
            return False

    warnings.append(
        f"Invalid field '{field}': expected bool, received {type(value).__name__}. Using fallback."
    )
    return fallback


def _as_depth(value: Any, fallback: int, warnings: List[str]) -> int:
    """Coerce the maximum inclusion depth into a non-negative integer."""
    if value is None:
        return fallback

    depth = None
    if isinstance(value, int) and not isinstance(value, bool):
        depth = value
    elif isinstance(value, str):
        try:
            depth = int(value.strip())
            warnings.append(f"Field 'max_depth' converted from '{value}' to {depth}.")
        except ValueError:
            depth = None

    if depth is not None and depth >= 0:
        return depth

    warnings.append(
        f"Invalid field 'max_depth': expected a non-negative int, received {value!r}. "
        f"Using {fallback}."
    )
    return fallback


def _as_list_str(value: Any, field: str, warnings: List[str]) -> List[str]:
    """Ensure input is a list of strings, supporting CSV parsing."""
    if value is None:
        return []

    # CSV strings come from the CLI (-e md,txt) and hand-written JSON files
    if isinstance(value, str):
        return [x.strip() for x in value.split(",") if x.strip()]

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                out.append(item)
            else:
                warnings.append(f"Invalid item in '{field}[{i}]': expected str. Item discarded.")
        return out

    warnings.append(
        f"Invalid field '{field}': expected list[str], received {type(value).__name__}. "
        f"Using no filter."
    )
    return []
