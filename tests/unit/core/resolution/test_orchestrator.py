from __future__ import annotations

"""
Unit tests for the Run Orchestrator.

Verifies that every store entry gets exactly one result, in store order,
that resolution does not depend on iteration order and that a pass abort
in one file leaves the other files unaffected.
"""

import logging

from rift.core.resolution.orchestrator import resolve_all
from rift.domain.models import ContentStore, SourceFile, compile_directive_pattern

FILES = {
    "z/last.md": '#include "shared.md"!',
    "a.md": '#include "b.md"',
    "b.md": '#include "shared.md"',
    "shared.md": "S",
    "loop.md": '#include "loop.md"',
}


def test_one_result_per_entry_in_store_order(make_store, default_pattern) -> None:
    store = make_store(FILES)

    output = resolve_all(store, 5, default_pattern)

    assert list(output) == list(store)
    assert all(output[path].rel_path == path for path in output)
    assert output["a.md"].content == "S"
    assert output["z/last.md"].content == "S!"
    assert output["loop.md"].depth_exhausted is True


def test_output_independent_of_source_order(default_pattern) -> None:
    forward = ContentStore(SourceFile(p, c) for p, c in FILES.items())
    backward = ContentStore(SourceFile(p, c) for p, c in reversed(list(FILES.items())))

    first = resolve_all(forward, 4, default_pattern)
    second = resolve_all(backward, 4, default_pattern)

    assert first == second


def test_capture_group_less_pattern_isolated_per_file(make_store, caplog) -> None:
    pattern = compile_directive_pattern(r'#include "[\w./%]*"')
    store = make_store({
        "one.md": 'x #include "plain.md" y',
        "two.md": '#include "plain.md"',
        "plain.md": "no directive here",
    })

    with caplog.at_level(logging.ERROR):
        output = resolve_all(store, 5, pattern)

    assert output["one.md"].content == 'x #include "plain.md" y'
    assert output["two.md"].content == '#include "plain.md"'
    assert output["plain.md"].content == "no directive here"
    assert all(not r.depth_exhausted for r in output.values())

    errors = [r for r in caplog.records if "has no single capture group" in r.getMessage()]
    assert len(errors) == 2
