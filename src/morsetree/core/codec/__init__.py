from __future__ import annotations

from .decoder import decode, lookup_letter
from .encoder import encode, find_code_path

__all__ = [
    "encode",
    "decode",
    "find_code_path",
    "lookup_letter",
]
