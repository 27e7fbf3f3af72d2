from __future__ import annotations

"""
Depth-Bounded Inclusion Resolver.

Repeats substitution passes over a single file until a pass performs no
substitution or the configured number of passes has been spent. Runaway
self or mutual inclusion is bounded by the pass count instead of cycle
detection: such files end up partially expanded with a warning.
"""

import logging
from collections.abc import Mapping

from rift.core.resolution.substitution import include_pass
from rift.domain.models import DirectivePattern, ExpansionResult

logger = logging.getLogger(__name__)


def resolve_file(
        rel_path: str,
        store: Mapping,
        max_depth: int,
        pattern: DirectivePattern,
) -> ExpansionResult:
    """
    Expand the inclusions of one file.

    Every pass substitutes referenced files with their original content from
    the store, so the outcome never depends on other files being expanded in
    the same run.

    Args:
        rel_path: Path of the file to expand. Must be a key of ``store``.
        store: Read-only mapping of relative path to original content.
        max_depth: Maximum number of passes (non-negative).
        pattern: Compiled directive pattern.

    Returns:
        ExpansionResult: Final content and depth diagnostics.

    Raises:
        KeyError: If ``rel_path`` is not in the store.
    """
    content = store[rel_path]

    for passes in range(max_depth):
        result = include_pass(content, store, pattern)
        if not result.did_substitute:
            # Spans of missing references are already dropped from new_content
            return ExpansionResult(rel_path, result.new_content, passes=passes)
        content = result.new_content

    logger.warning(f"max inclusion depth reached for {rel_path}")
    return ExpansionResult(rel_path, content, passes=max_depth, depth_exhausted=True)
