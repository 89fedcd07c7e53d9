from __future__ import annotations

"""
Domain Constants.

Centralizes the signal alphabet and the in-memory string convention shared
by the encoder and the decoder: codes are runs of dots and dashes, letters
are separated by one space and words by two.
"""

DOT = "."
DASH = "-"
SIGNALS = (DOT, DASH)

LETTER_SEPARATOR = " "
WORD_SEPARATOR = LETTER_SEPARATOR * 2

# Symbol held by the root node; it doubles as the word separator on encode
ROOT_SYMBOL = " "

# Value of nodes that sit on a valid path but map to no canonical letter
PLACEHOLDER_SYMBOL = "?"

DEMO_TEXT = "hello world"
