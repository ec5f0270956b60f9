"""src/lowerkeys/utils/__init__.py"""

from .casefold import find_collision, lower_ascii

__all__ = ["lower_ascii", "find_collision"]
