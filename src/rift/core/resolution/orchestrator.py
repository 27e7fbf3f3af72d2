from __future__ import annotations

"""
Run Orchestrator.

Applies the depth-bounded resolver to every entry of the content store and
gathers the results into the output set handed to the writer.
"""

import logging

from rift.core.resolution.resolver import resolve_file
from rift.domain.models import ContentStore, DirectivePattern, OutputSet

logger = logging.getLogger(__name__)


def resolve_all(
        store: ContentStore,
        max_depth: int,
        pattern: DirectivePattern,
) -> OutputSet:
    """
    Resolve the inclusions of every file in the store.

    Entries keep the store's order and none is skipped. Files are resolved
    one after the other; each resolution only reads the immutable store.

    Args:
        store: Snapshot of the input files.
        max_depth: Maximum number of substitution passes per file.
        pattern: Compiled directive pattern.

    Returns:
        OutputSet: One ExpansionResult per store entry.
    """
    logger.debug(f"Resolving inclusions for {len(store)} files (max depth {max_depth})")

    output: OutputSet = {}
    for rel_path in store:
        output[rel_path] = resolve_file(rel_path, store, max_depth, pattern)

    exhausted = sum(1 for r in output.values() if r.depth_exhausted)
    logger.debug(f"Resolution finished. Depth-exhausted files: {exhausted}")
    return output
