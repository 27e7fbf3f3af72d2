from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates a complete inclusion run:
1. Validates configuration and performs the fatal pre-flight checks.
2. Verifies the scan root.
3. Builds the content store from the scan root.
4. Resolves the inclusions of every file.
5. Writes the expanded tree to the output root (skipped on dry runs).
"""

import logging
import os
from typing import Any, Dict, List, Optional

from rift.core.pipeline.components.writer import write_output_set
from rift.core.pipeline.stages.validator import check_run_requirements, validate_config
from rift.core.resolution.orchestrator import resolve_all
from rift.core.services.scanner import build_content_store
from rift.domain.errors import ConfigurationError
from rift.domain.models import FileError
from rift.domain.pipeline_models import RunResult, create_error_result, create_success_result
from rift.infra.fs import is_subpath, normalize_path

logger = logging.getLogger(__name__)


def run_pipeline(config: Optional[Dict[str, Any]]) -> RunResult:
    """
    Execute a full inclusion run.

    Fatal conditions (invalid configuration, missing scan root) stop the run
    before any file is processed and produce a failed result. Per-file read
    and write failures are reported in the result without failing the run.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        RunResult: Object containing status, counters and per-file diagnostics.
    """
    logger.info("Inclusion run started.")

    # -------------------------------------------------------------------------
    # 1) Config validation & fatal checks
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    try:
        pattern = check_run_requirements(cfg)
    except ConfigurationError as e:
        logger.error(str(e))
        return create_error_result(str(e), cfg)

    input_path = normalize_path(cfg["input_path"], os.getcwd())
    output_path = normalize_path(cfg["output_path"], input_path)

    # -------------------------------------------------------------------------
    # 2) Scan root verification
    # -------------------------------------------------------------------------
    if not os.path.isdir(input_path):
        msg = f"Input path does not exist or is not a directory: {input_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, input_path, output_path)

    exclude_dirs: List[str] = []
    if is_subpath(output_path, input_path):
        if os.path.normcase(output_path) == os.path.normcase(input_path):
            msg = "Output directory must differ from the input directory."
            logger.error(msg)
            return create_error_result(msg, cfg, input_path, output_path)
        exclude_dirs.append(output_path)

    # -------------------------------------------------------------------------
    # 3) Enumeration
    # -------------------------------------------------------------------------
    logger.info(f"Scanning {input_path}")
    store, read_errors = build_content_store(input_path, cfg["extensions"], exclude_dirs)
    logger.info(f"Found {len(store)} files to process.")

    # -------------------------------------------------------------------------
    # 4) Resolution
    # -------------------------------------------------------------------------
    output_set = resolve_all(store, cfg["max_depth"], pattern)
    depth_exhausted = [p for p, r in output_set.items() if r.depth_exhausted]

    # -------------------------------------------------------------------------
    # 5) Persistence
    # -------------------------------------------------------------------------
    written: List[str] = []
    write_errors: List[FileError] = []
    if cfg["dry_run"]:
        logger.info("Dry run: nothing written.")
    else:
        written, write_errors = write_output_set(output_path, output_set)
        logger.info(f"Wrote {len(written)} files to {output_path}")

    result = create_success_result(
        cfg,
        input_path=input_path,
        output_path=output_path,
        scanned=len(store),
        written_files=written,
        depth_exhausted=depth_exhausted,
        read_errors=read_errors,
        write_errors=write_errors,
    )
    logger.info(
        f"Inclusion run finished. Files: {len(store)}. "
        f"Errors: {len(read_errors) + len(write_errors)}"
    )
    return result
