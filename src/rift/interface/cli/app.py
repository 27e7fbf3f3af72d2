from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration hierarchy resolution
(defaults, optional JSON file, command-line overrides), logging bootstrap,
pipeline execution and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from rift.core.pipeline.engine import run_pipeline
from rift.core.pipeline.stages.validator import validate_config
from rift.domain.config import CONFIG_KEYS, load_config_file
from rift.domain.errors import ConfigurationError
from rift.domain.pipeline_models import RunResult
from rift.infra.logging import LoggingConfig, configure_logging, get_logger
from rift.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_FATAL = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 run with errors, 2 fatal error,
             130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)
    overrides = cli_args.args_to_overrides(args)

    # 2. Logging bootstrap from command-line flags only
    bootstrap_logging = LoggingConfig(
        level="DEBUG" if args.debug else "INFO",
        console=True,
        log_file=args.log_file or None,
    )
    configure_logging(bootstrap_logging)

    # 3. Resolve the configuration hierarchy
    base_conf: Dict[str, Any] = {}
    if args.config_file:
        try:
            base_conf = load_config_file(args.config_file)
        except ConfigurationError as e:
            logger.error(str(e))
            print(f"ERROR: {e}", file=sys.stderr)
            return EXIT_FATAL

    raw_conf = _merge_config(base_conf, overrides)
    clean_conf, warnings = validate_config(raw_conf)

    # 4. Re-apply logging when the merged configuration changed it
    run_logging = LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"] or None,
    )
    if run_logging != bootstrap_logging:
        configure_logging(run_logging, force=True)

    if args.dump_config:
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 5. Pipeline execution phase
    try:
        result = run_pipeline(raw_conf)
    except KeyboardInterrupt:
        logger.warning("Run interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    if not result.ok:
        return EXIT_FATAL
    return EXIT_FAILURE if result.has_file_errors else EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge command-line overrides into the file-based configuration.

    Only known keys are merged and None values never replace a lower
    precedence value.

    Args:
        base: Configuration loaded from file (may be empty).
        overrides: Values coming from the command line.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: RunResult) -> None:
    """
    Print the run result to the standard output.

    Args:
        result: The run result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    summary = result.summary

    if result.dry_run:
        print("DRY RUN COMPLETE (no files written)")
    else:
        print("INCLUSION COMPLETE")
        print(f"Output directory: {result.output_path}")

    labels = {
        "scanned": "Files scanned",
        "written": "Files written",
        "depth_exhausted": "Max depth reached",
        "read_errors": "Read errors",
        "write_errors": "Write errors",
    }
    for key, label in labels.items():
        if key in summary:
            print(f"{label}: {summary[key]}")

    for path in result.depth_exhausted:
        print(f"  - max depth: {path}")
    for err in list(result.read_errors) + list(result.write_errors):
        print(f"  - {err.rel_path}: {err.error}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
