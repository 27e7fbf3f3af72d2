from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. CSV extension parsing.
3. Underscore and dashed aliases of the long options.
"""

from rift.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_short_options_mapping():
    args = parse_args(["-o", "out", "-i", "src", "-r", r"@inc\((.*)\)", "-d", "3", "-e", "md,txt"])

    overrides = args_to_overrides(args)

    assert overrides["output_path"] == "out"
    assert overrides["input_path"] == "src"
    assert overrides["regex"] == r"@inc\((.*)\)"
    assert overrides["max_depth"] == 3
    assert overrides["extensions"] == ["md", "txt"]


def test_long_option_aliases():
    for out_flag, depth_flag in (("--out_path", "--max_depth"), ("--out-path", "--max-depth")):
        overrides = args_to_overrides(parse_args([out_flag, "dist", depth_flag, "7"]))
        assert overrides["output_path"] == "dist"
        assert overrides["max_depth"] == 7


def test_csv_parsing_drops_empty_items():
    overrides = args_to_overrides(parse_args(["-e", " md, ,html ,"]))

    assert overrides["extensions"] == ["md", "html"]


def test_flags_mapping():
    overrides = args_to_overrides(parse_args(["--dry-run", "--debug", "--log-file", "rift.log"]))

    assert overrides["dry_run"] is True
    assert overrides["log_level"] == "DEBUG"
    assert overrides["log_file"] == "rift.log"


def test_unset_values_are_none():
    args = parse_args([])
    overrides = args_to_overrides(args)

    assert overrides["output_path"] is None
    assert overrides["regex"] is None
    assert overrides["max_depth"] is None
    assert overrides["extensions"] is None
    assert "dry_run" not in overrides
    assert args.json_output is False
