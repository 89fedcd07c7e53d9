from __future__ import annotations

"""
Codec Error Types.

Only malformed input is surfaced as an exception. Unknown characters on
encode and exhausted tree paths on decode are absorbed by the codec and
never reach this module.
"""


class MorseError(ValueError):
    """Base class for every error raised by the Morse codec."""


class InvalidSignalError(MorseError):
    """
    A letter-code contained a character other than a dot or a dash.

    Attributes:
        char: The offending character.
        code: The letter-code being processed when it was found.
    """

    def __init__(self, char: str, code: str = "") -> None:
        self.char = char
        self.code = code
        super().__init__(f"Unexpected character {char!r}, expected '.' or '-'")
