from __future__ import annotations

"""
Tree Renderer.

Converts a CodeTree into text views for inspection: an ASCII drawing of the
dot/dash branches and a flat symbol-to-code table.
"""

from typing import List

from morsetree.domain.constants import DASH, DOT
from morsetree.domain.tree_models import CodeTree, iter_codes

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(tree: CodeTree) -> List[str]:
    """
    Render the tree with standard ASCII connectors (├──, └──).

    The first line is the quoted root symbol; every other entry reads
    ``<signal> <symbol>``, dot branch listed before the dash branch.

    Args:
        tree: Root node to render.

    Returns:
        List[str]: One line per node.
    """
    lines: List[str] = [repr(tree.symbol)]
    render_tree_structure(tree, lines)
    return lines


def render_tree_structure(node: CodeTree, lines: List[str], prefix: str = "") -> None:
    """
    Recursively append the children of ``node`` to ``lines``.

    Args:
        node: Current node whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    entries = [
        (signal, child)
        for signal, child in ((DOT, node.dot), (DASH, node.dash))
        if child is not None
    ]
    total = len(entries)

    for i, (signal, child) in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{signal} {child.symbol}")

        if not child.is_leaf:
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(child, lines, prefix=new_prefix)


def render_code_table(tree: CodeTree) -> List[str]:
    """
    List every non-root node as ``<symbol>  <code>`` in dot-first pre-order.

    Args:
        tree: Root node of the table.

    Returns:
        List[str]: Table lines.
    """
    return [
        f"{symbol}  {code}"
        for code, symbol in iter_codes(tree)
        if code
    ]
