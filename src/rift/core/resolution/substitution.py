from __future__ import annotations

"""
Directive Substitution Pass.

Performs a single left-to-right scan of a file's content and replaces every
include directive whose referenced path exists in the content store with
that file's original text. This level is not recursive; the resolver
repeats passes up to the configured depth.
"""

import logging
from collections.abc import Mapping
from typing import List

from rift.domain.models import DirectivePattern, SubstitutionResult

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def include_pass(
        content: str,
        store: Mapping,
        pattern: DirectivePattern,
) -> SubstitutionResult:
    """
    Replace all directive occurrences in ``content`` with their referenced files.

    Matches are visited in document order. For every match the text preceding
    it is kept, then:

    - a pattern without exactly one capture group aborts the whole pass and
      the original content is returned untouched;
    - a reference missing from the store is reported and the matched span is
      dropped;
    - otherwise the referenced file's original content replaces the match.

    Args:
        content: Current text of the file being expanded.
        store: Read-only mapping of relative path to original content.
        pattern: Compiled directive pattern.

    Returns:
        SubstitutionResult: The new content and whether any substitution happened.
    """
    pieces: List[str] = []
    did_substitute = False
    cursor = 0

    for match in pattern.regex.finditer(content):
        pieces.append(content[cursor:match.start()])
        cursor = match.end()

        if pattern.regex.groups != 1:
            logger.error(
                f"Directive pattern {pattern.source!r} has no single capture group "
                f"(expected exactly one, found {pattern.regex.groups}); pass aborted"
            )
            return SubstitutionResult(content, False)

        include_path = match.group(1) or ""
        if include_path not in store:
            logger.warning(f'included file "{include_path}" doesn\'t exist -> ignoring')
            continue

        pieces.append(store[include_path])
        did_substitute = True

    if cursor == 0 and not pieces:
        return SubstitutionResult(content, False)

    pieces.append(content[cursor:])
    return SubstitutionResult("".join(pieces), did_substitute)
