from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the rift CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="rift",
        description="Recursively Include Text Files: expand include directives "
                    "across a directory tree into an output tree.",
    )

    # --- Path Management ---
    p.add_argument(
        "-o", "--out_path", "--out-path",
        dest="output_path",
        default=None,
        help="Output directory for the expanded tree (required).",
    )
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Directory to scan (default: current working directory).",
    )

    # --- Inclusion Rules ---
    p.add_argument(
        "-r", "--regex",
        dest="regex",
        default=None,
        help='Directive regex with exactly one capture group for the included path '
             '(default: #include "([\\w./%%]*)").',
    )
    p.add_argument(
        "-d", "--max_depth", "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help="Maximum inclusion depth (default: 5).",
    )
    p.add_argument(
        "-e", "--ext",
        dest="extensions",
        default=None,
        help="Comma-separated extensions to process, without dot (default: all files).",
    )

    # --- Configuration and Execution ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with configuration values; command-line flags take precedence.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve inclusions without writing any file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )

    # --- Diagnostics and Format ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Values left unset on the command line are mapped to None so that the
    merge keeps the lower-precedence source.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "output_path": args.output_path,
        "regex": args.regex,
        "max_depth": args.max_depth,
        "extensions": _split_csv(args.extensions),
        "log_file": args.log_file,
    }

    if args.dry_run:
        overrides["dry_run"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of stripped items.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
