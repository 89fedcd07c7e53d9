from __future__ import annotations

from morsetree.core.codec import decode, encode
from morsetree.domain.alphabet import build_international_tree, build_tree_from_codes
from morsetree.domain.errors import InvalidSignalError, MorseError
from morsetree.domain.tree_models import CodeTree

__version__ = "0.1.0"

__all__ = [
    "CodeTree",
    "InvalidSignalError",
    "MorseError",
    "build_international_tree",
    "build_tree_from_codes",
    "decode",
    "encode",
]
