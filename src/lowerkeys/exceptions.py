"""src/lowerkeys/exceptions.py

Lowerkeys Exceptions hierarchy.
"""


class LowerKeysError(Exception):
    """Base exception for all lowerkeys errors."""


class HeaderCollisionError(LowerKeysError, ValueError):
    """
    Two distinct header names share the same lower-case representation.

    Raised while building a Header from a mapping that was already
    inconsistent. This signals a programming error in the caller and is
    never raised by the per-key operations.
    """

    def __init__(self, lowered: str, first: str, second: str):
        self.lowered = lowered
        self.first = first
        self.second = second
        super().__init__(
            "encountered two keys with identical lower-case representation: "
            f'"{first}" and "{second}"'
        )
