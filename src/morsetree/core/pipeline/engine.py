from __future__ import annotations

"""
Codec Execution Engine.

Runs one validated configuration against a lookup tree and packages the
outcome as a CodecResult for the interface layer. A fatal decode error is
reported through the result; the codec itself never recovers from it.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from morsetree.core.analysis.tree_renderer import render_code_table, render_tree
from morsetree.core.codec import decode, encode
from morsetree.domain.alphabet import build_international_tree
from morsetree.domain.codec_models import (
    CodecResult,
    create_error_result,
    create_success_result,
)
from morsetree.domain.errors import MorseError
from morsetree.domain.tree_models import CodeTree

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_demo(text: str, tree: CodeTree) -> Tuple[str, str]:
    """
    Encode ``text`` and decode the result again.

    Returns:
        Tuple[str, str]: The encoded and the decoded strings.

    Raises:
        InvalidSignalError: Propagated from the decoder.
    """
    encoded = encode(text, tree)
    decoded = decode(encoded, tree)
    return encoded, decoded


def run_codec(cfg: Dict[str, Any], tree: Optional[CodeTree] = None) -> CodecResult:
    """
    Execute the operation described by a validated configuration.

    Args:
        cfg: Configuration as returned by ``validate_config``.
        tree: Lookup tree; the international alphabet is built when omitted.

    Returns:
        CodecResult: Success result, or error result on a fatal decode error.
    """
    if tree is None:
        tree = build_international_tree()

    mode = cfg.get("mode", "demo")
    text = cfg.get("text", "")
    tree_lines = _inspection_lines(cfg, tree)

    stats = {"tree_nodes": len(tree), "tree_depth": tree.depth()}

    logger.debug(f"Running '{mode}' on {len(text)} characters, tree of {stats['tree_nodes']} nodes.")

    try:
        if mode == "encode":
            return create_success_result(mode, text, encode(text, tree), tree_lines, stats)

        if mode == "decode":
            return create_success_result(mode, text, decode(text, tree), tree_lines, stats)

        encoded, decoded = run_demo(text, tree)
        return create_success_result(
            mode, text, decoded, tree_lines, summary_extra={**stats, "encoded": encoded}
        )

    except MorseError as e:
        logger.error(f"Decoding aborted: {e}")
        return create_error_result(
            str(e),
            mode,
            text,
            summary_extra={"char": getattr(e, "char", ""), "code": getattr(e, "code", "")},
        )


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _inspection_lines(cfg: Dict[str, Any], tree: CodeTree) -> List[str]:
    lines: List[str] = []
    if cfg.get("print_tree"):
        lines.extend(render_tree(tree))
    if cfg.get("show_table"):
        lines.extend(render_code_table(tree))
    return lines
