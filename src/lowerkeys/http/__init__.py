"""src/lowerkeys/http/__init__.py"""

from .headers import Header, from_headers, new, using

__all__ = ["Header", "new", "from_headers", "using"]
