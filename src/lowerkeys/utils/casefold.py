"""utils/casefold.py

Case folding utilities for header names.
"""

import string
from typing import Dict, Iterable, Optional, Tuple

# Only A-Z are folded; HTTP header names are ASCII tokens.
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def lower_ascii(name: str) -> str:
    """Lower-case the ASCII letters of *name*, leaving everything else as is."""
    return name.translate(_ASCII_LOWER)


def find_collision(keys: Iterable[str]) -> Optional[Tuple[str, str, str]]:
    """
    Find the first two keys that fold to the same lower-case name.

    Args:
        keys: Header names in their original spelling.

    Returns:
        ``(lowered, first, second)`` for the first collision found, where
        *first* is the key seen earlier, or None if every key is unique
        after folding.
    """
    seen: Dict[str, str] = {}
    for key in keys:
        lowered = lower_ascii(key)
        if lowered in seen:
            return lowered, seen[lowered], key
        seen[lowered] = key
    return None
