"""src/lowerkeys/__init__.py

Lowerkeys - HTTP header maps with lower-case names.

Lowerkeys provides ``Header``, a multi-value header dictionary that stores
every header name in lower case, as HTTP/2 requires, while keeping the
familiar one-name-many-values behavior of HTTP/1.1 header maps. It has no
external dependencies.

Key Features:
    - Case-insensitive add, delete, get, set and get_all
    - Copying and in-place construction from plain header dictionaries
    - Collision detection for names that differ only in case
    - Interchangeable with ``Dict[str, List[str]]``

Example:
    Copying an existing header dictionary::

        from lowerkeys import Header

        header = Header({"Content-Type": ["text/html"]})
        header.add("Accept", "text/html")
        header.add("ACCEPT", "application/json")
        print(header.get("content-type"))   # text/html
        print(header.get_all("accept"))     # ['text/html', 'application/json']

    Normalizing a dictionary in place::

        import lowerkeys

        raw = {"X-Request-Id": ["42"]}
        header = lowerkeys.using(raw)
        raw["x-trace"] = ["on"]
        print(header.get("X-Trace"))        # on
"""

from lowerkeys.exceptions import HeaderCollisionError, LowerKeysError
from lowerkeys.http.headers import Header, from_headers, new, using
from lowerkeys.version import __version__

__all__ = [
    "Header",
    "new",
    "from_headers",
    "using",
    "LowerKeysError",
    "HeaderCollisionError",
    "__version__",
]
