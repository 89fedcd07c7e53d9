from __future__ import annotations

"""
Morse Decoder.

Walks the lookup tree along each letter-code. Two failure modes exist:

- a code that runs off the tree is dropped and decoding continues;
- a character other than a dot or a dash raises InvalidSignalError and
  aborts the whole call, returning nothing.
"""

import logging
from typing import List, Optional

from morsetree.domain.constants import LETTER_SEPARATOR, WORD_SEPARATOR
from morsetree.domain.errors import InvalidSignalError
from morsetree.domain.tree_models import CodeTree

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def decode(code: str, tree: CodeTree) -> str:
    """
    Decode Morse letter-codes back into text.

    Words are split on two spaces and letters on one. Each word, the last
    one included, is followed by a single space in the output.

    Args:
        code: Letter-codes separated by single spaces, words by double spaces.
        tree: Lookup tree used to encode the message.

    Returns:
        str: Decoded text.

    Raises:
        InvalidSignalError: If a letter-code contains an illegal character.
    """
    output: List[str] = []
    dropped = 0

    for word in code.split(WORD_SEPARATOR):
        for letter_code in word.split(LETTER_SEPARATOR):
            if not letter_code:
                continue
            symbol = lookup_letter(letter_code, tree)
            if symbol is None:
                dropped += 1
                logger.debug(f"Letter-code {letter_code!r} leaves the tree; dropped.")
                continue
            output.append(symbol)
        output.append(LETTER_SEPARATOR)

    if dropped:
        logger.debug(f"Dropped {dropped} undecodable letter-codes.")

    return "".join(output)


def lookup_letter(letter_code: str, tree: Optional[CodeTree]) -> Optional[str]:
    """
    Follow ``letter_code`` from the root and return the symbol it ends on.

    Signals are consumed left to right. Once the walk has left the tree the
    rest of the code is not inspected.

    Args:
        letter_code: Run of dots and dashes.
        tree: Root of the lookup tree.

    Returns:
        Optional[str]: The symbol, or None if the path does not exist.

    Raises:
        InvalidSignalError: On a character other than '.' or '-' reached
                            while still inside the tree.
    """
    node = tree
    for signal in letter_code:
        if node is None:
            return None
        try:
            node = node.child(signal)
        except InvalidSignalError:
            raise InvalidSignalError(signal, letter_code) from None

    if node is None:
        return None
    return node.symbol
