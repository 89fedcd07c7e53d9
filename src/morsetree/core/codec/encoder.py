from __future__ import annotations

"""
Morse Encoder.

Translates plain text into dot/dash letter-codes by searching the lookup
tree for each character. Every input character, including spaces, emits its
code followed by one separator space; the input's own spaces therefore turn
into the double space that marks a word boundary for the decoder.
"""

import logging
from typing import List, Optional

from morsetree.domain.constants import DASH, DOT, LETTER_SEPARATOR
from morsetree.domain.tree_models import CodeTree

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def encode(text: str, tree: CodeTree) -> str:
    """
    Encode ``text`` into Morse letter-codes.

    The text is lowercased before any lookup. Characters missing from the
    tree contribute an empty code, so they leave only their separator space
    in the output. No error is raised.

    Args:
        text: Plain text to encode.
        tree: Lookup tree, usually from ``build_international_tree``.

    Returns:
        str: Letter-codes, each followed by a single space.
    """
    parts: List[str] = []
    unmapped = 0

    for char in text.lower():
        path = find_code_path(tree, char)
        if path is None:
            unmapped += 1
            logger.debug(f"No code for {char!r}; emitting bare separator.")
            path = ""
        parts.append(path + LETTER_SEPARATOR)

    if unmapped:
        logger.debug(f"Encoded {len(text)} characters, {unmapped} without a code.")

    return "".join(parts)


def find_code_path(node: Optional[CodeTree], char: str) -> Optional[str]:
    """
    Depth-first search for ``char`` below ``node``.

    The node itself is tested first, then the dot subtree, then the dash
    subtree. The first match wins, so a symbol stored more than once (the
    ``?`` placeholder) resolves to its dot-most occurrence.

    Args:
        node: Subtree to search; None is an empty subtree.
        char: Symbol to look for.

    Returns:
        Optional[str]: Path from ``node`` to the match (empty when ``node``
                       itself matches), or None when ``char`` is absent.
    """
    if node is None:
        return None

    if node.symbol == char:
        return ""

    path = find_code_path(node.dot, char)
    if path is not None:
        return DOT + path

    path = find_code_path(node.dash, char)
    if path is not None:
        return DASH + path

    return None
