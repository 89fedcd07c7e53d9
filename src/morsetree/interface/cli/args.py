from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from morsetree.infra.logging import LEVEL_NAMES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the morsetree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="morsetree",
        description="Encode and decode Morse code with a binary lookup tree.",
        epilog=(
            "Codes starting with a dash must be attached to the option, "
            "e.g. --decode='-- --- .-. ... .'"
        ),
    )

    # --- Operation ---
    op = p.add_mutually_exclusive_group()
    op.add_argument(
        "-e", "--encode",
        dest="encode_text",
        metavar="TEXT",
        default=None,
        help="Encode TEXT into Morse letter-codes.",
    )
    op.add_argument(
        "-d", "--decode",
        dest="decode_text",
        metavar="CODE",
        default=None,
        help="Decode CODE (letters split by one space, words by two).",
    )

    # --- Tree Inspection ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Draw the lookup tree before the result.",
    )
    p.add_argument(
        "--table",
        dest="show_table",
        action="store_true",
        help="List every symbol with its code before the result.",
    )

    # --- Output Format ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LEVEL_NAMES,
        default=None,
        help="Minimum severity written to the logs.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )
    p.add_argument(
        "--save-log",
        action="store_true",
        help="Also write logs to the default file in the user data directory.",
    )

    # --- Configuration ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the stored configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Store the current inspection and logging options as defaults.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    # Operation overrides
    if args.encode_text is not None:
        overrides["mode"] = "encode"
        overrides["text"] = args.encode_text
    elif args.decode_text is not None:
        overrides["mode"] = "decode"
        overrides["text"] = args.decode_text

    # Inspection overrides
    if args.print_tree:
        overrides["print_tree"] = True
    if args.show_table:
        overrides["show_table"] = True
    if args.json_output:
        overrides["json_output"] = True

    # Diagnostics overrides
    if args.debug:
        overrides["log_level"] = "DEBUG"
    elif args.log_level:
        overrides["log_level"] = args.log_level
    if args.save_log:
        overrides["save_log"] = True
    if args.log_file:
        overrides["log_file"] = args.log_file

    return overrides
