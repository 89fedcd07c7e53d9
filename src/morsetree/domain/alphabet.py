from __future__ import annotations

"""
Alphabet Factories.

Builds the lookup trees consumed by the codec. Nothing here is cached: every
call returns a fresh tree, which the caller builds once at startup and then
passes explicitly to encode/decode.
"""

import logging
from typing import Mapping

from morsetree.domain.constants import DOT, PLACEHOLDER_SYMBOL, ROOT_SYMBOL, SIGNALS
from morsetree.domain.errors import InvalidSignalError
from morsetree.domain.tree_models import CodeTree

logger = logging.getLogger(__name__)

_node = CodeTree.create

# -----------------------------------------------------------------------------
# REFERENCE ALPHABET
# -----------------------------------------------------------------------------

def build_international_tree() -> CodeTree:
    """
    Build the international Morse tree: letters a-z, digits 0-9, ``+ = /``.

    Paths without a canonical letter on the way to a digit or sign hold the
    ``?`` placeholder.

    Returns:
        CodeTree: Root node holding the word separator.
    """
    return _node(ROOT_SYMBOL).attach_dot(
        _node("e").attach_dot(
            _node("i").attach_dot(
                _node("s").attach_dot(
                    _node("h").attach_dot(_node("5")).attach_dash(_node("4"))
                ).attach_dash(
                    _node("v").attach_dash(_node("3"))
                )
            ).attach_dash(
                _node("u").attach_dot(
                    _node("f")
                ).attach_dash(
                    _node(PLACEHOLDER_SYMBOL).attach_dash(_node("2"))
                )
            )
        ).attach_dash(
            _node("a").attach_dot(
                _node("r").attach_dot(
                    _node("l")
                ).attach_dash(
                    _node(PLACEHOLDER_SYMBOL).attach_dot(_node("+"))
                )
            ).attach_dash(
                _node("w").attach_dot(
                    _node("p")
                ).attach_dash(
                    _node("j").attach_dash(_node("1"))
                )
            )
        )
    ).attach_dash(
        _node("t").attach_dot(
            _node("n").attach_dot(
                _node("d").attach_dot(
                    _node("b").attach_dot(_node("6")).attach_dash(_node("="))
                ).attach_dash(
                    _node("x").attach_dot(_node("/"))
                )
            ).attach_dash(
                _node("k").attach_dot(_node("c")).attach_dash(_node("y"))
            )
        ).attach_dash(
            _node("m").attach_dot(
                _node("g").attach_dot(
                    _node("z").attach_dot(_node("7"))
                ).attach_dash(
                    _node("q")
                )
            ).attach_dash(
                _node("o").attach_dot(
                    _node(PLACEHOLDER_SYMBOL).attach_dot(_node("8"))
                ).attach_dash(
                    _node(PLACEHOLDER_SYMBOL).attach_dot(_node("9")).attach_dash(_node("0"))
                )
            )
        )
    )


# -----------------------------------------------------------------------------
# TABLE-DRIVEN CONSTRUCTION
# -----------------------------------------------------------------------------

def build_tree_from_codes(
        codes: Mapping[str, str],
        root_symbol: str = ROOT_SYMBOL,
        filler: str = PLACEHOLDER_SYMBOL,
) -> CodeTree:
    """
    Build a tree from a ``{code: symbol}`` definition.

    Codes are inserted shortest first, so a symbol defined for an
    intermediate path is in place before any longer code walks through it.
    The empty code is ignored because the root symbol is given explicitly.

    Args:
        codes: Letter-code to symbol mapping.
        root_symbol: Symbol stored on the root node.
        filler: Symbol for intermediate nodes missing from ``codes``.

    Returns:
        CodeTree: The constructed tree.

    Raises:
        InvalidSignalError: If a code contains anything but dots and dashes.
    """
    root = CodeTree.create(root_symbol)

    for code, symbol in sorted(codes.items(), key=lambda item: (len(item[0]), item[0])):
        if not code:
            logger.debug(f"Ignoring empty code mapped to {symbol!r}.")
            continue

        bad = next((s for s in code if s not in SIGNALS), None)
        if bad is not None:
            raise InvalidSignalError(bad, code)

        node = root
        for signal in code[:-1]:
            nxt = node.child(signal)
            if nxt is None:
                nxt = CodeTree.create(filler)
                _attach(node, signal, nxt)
            node = nxt

        _attach(node, code[-1], CodeTree.create(symbol))

    return root


def _attach(node: CodeTree, signal: str, subtree: CodeTree) -> None:
    if signal == DOT:
        node.attach_dot(subtree)
    else:
        node.attach_dash(subtree)
