from __future__ import annotations

"""
Morse Code Tree Data Models.

Provides the recursive node type backing the codec. Each node carries one
symbol; following the dot edge or the dash edge from the root spells out the
Morse code of the symbol stored at the destination node.

The tree is only mutated while it is being built. Once a factory returns it,
it is treated as read-only and can be shared between threads without locking.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from morsetree.domain.constants import DASH, DOT
from morsetree.domain.errors import InvalidSignalError

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class CodeTree:
    """
    A node of the Morse lookup tree.

    Attributes:
        symbol: Character decoded when a letter-code ends on this node.
        dot: Subtree reached through a dot edge.
        dash: Subtree reached through a dash edge.
    """
    symbol: str
    dot: Optional[CodeTree] = None
    dash: Optional[CodeTree] = None

    @classmethod
    def create(cls, symbol: str) -> CodeTree:
        """Create a leaf node holding ``symbol``."""
        return cls(symbol)

    def attach_dot(self, subtree: CodeTree) -> CodeTree:
        """
        Install ``subtree`` behind the dot edge, replacing any previous child.

        Returns:
            CodeTree: This same node, so construction calls can be chained.
        """
        self.dot = subtree
        return self

    def attach_dash(self, subtree: CodeTree) -> CodeTree:
        """
        Install ``subtree`` behind the dash edge, replacing any previous child.

        Returns:
            CodeTree: This same node, so construction calls can be chained.
        """
        self.dash = subtree
        return self

    def child(self, signal: str) -> Optional[CodeTree]:
        """
        Follow the edge named by ``signal``.

        Raises:
            InvalidSignalError: If ``signal`` is neither a dot nor a dash.
        """
        if signal == DOT:
            return self.dot
        if signal == DASH:
            return self.dash
        raise InvalidSignalError(signal)

    @property
    def is_leaf(self) -> bool:
        return self.dot is None and self.dash is None

    def depth(self) -> int:
        """Length of the longest code reachable from this node."""
        return max(
            (1 + c.depth() for c in (self.dot, self.dash) if c is not None),
            default=0,
        )

    def __len__(self) -> int:
        return 1 + sum(len(c) for c in (self.dot, self.dash) if c is not None)


# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def iter_codes(tree: Optional[CodeTree], prefix: str = "") -> Iterator[Tuple[str, str]]:
    """
    Yield every ``(code, symbol)`` pair of the tree in dot-first pre-order.

    The root is yielded first with the empty code.
    """
    if tree is None:
        return
    yield prefix, tree.symbol
    yield from iter_codes(tree.dot, prefix + DOT)
    yield from iter_codes(tree.dash, prefix + DASH)
