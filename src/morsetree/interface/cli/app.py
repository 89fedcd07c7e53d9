from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: loading and merging configuration sources
(defaults, persistent storage and CLI overrides), logging bootstrap, codec
execution and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from morsetree.core.pipeline.engine import run_codec
from morsetree.core.pipeline.validator import validate_config
from morsetree.domain.alphabet import build_international_tree
from morsetree.domain.codec_models import CodecResult
from morsetree.domain.config import get_default_config, load_config, save_config
from morsetree.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from morsetree.interface.cli import args as cli_args

logger = get_logger(__name__)

# Keys persisted by --save-config; the operation itself is never stored
_PERSISTED_KEYS = ("print_tree", "show_table", "json_output", "log_level", "save_log", "log_file")

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 decode failure, 130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 3. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 4. Logging bootstrap (console on stderr, optional rotating file;
    #    an explicit log_file wins over the save_log default path)
    log_file = clean_conf["log_file"]
    if not log_file and clean_conf["save_log"]:
        log_file = get_default_log_path()
    configure_logging(
        LoggingConfig(level=clean_conf["log_level"], console=True, log_file=log_file)
    )

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        stored = load_config()
        stored.update({k: clean_conf[k] for k in _PERSISTED_KEYS})
        save_config(stored)
        logger.info("Configuration stored.")

    # 5. Codec execution phase
    try:
        result = run_codec(clean_conf, build_international_tree())
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

    # 6. Output rendering phase
    if clean_conf["json_output"]:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject; None values are skipped.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: CodecResult) -> None:
    """
    Print the codec result to standard output.

    The demo mode reproduces the reference program output
    (``encoded: ...`` / ``decoded: ...``); encode and decode print the bare
    result so it can be piped.
    """
    for line in result.tree_lines:
        print(line)

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.mode == "demo":
        print(f"encoded: {result.summary.get('encoded', '')}")
        print(f"decoded: {result.output_text}")
        return

    print(result.output_text)
