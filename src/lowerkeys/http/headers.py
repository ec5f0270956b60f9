"""src/lowerkeys/http/headers.py

Lower-case HTTP header map for lowerkeys.
"""

import logging
from typing import (
    Dict,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Type,
    TypeVar,
)

from lowerkeys.exceptions import HeaderCollisionError
from lowerkeys.utils.casefold import find_collision, lower_ascii

__all__ = ["Header", "new", "from_headers", "using"]

logger = logging.getLogger("lowerkeys.headers")

HeaderDict = Dict[str, Optional[List[str]]]

_H = TypeVar("_H", bound="Header")


def _check_collisions(keys: List[str]) -> None:
    collision = find_collision(keys)
    if collision is not None:
        raise HeaderCollisionError(*collision)


def _make_lowercase(storage: HeaderDict) -> HeaderDict:
    """Rename every mixed-case key of *storage* in place, keeping value objects."""
    _check_collisions(list(storage))

    renamed = 0
    for old_key in list(storage):
        new_key = lower_ascii(old_key)
        if new_key == old_key:
            continue
        storage[new_key] = storage.pop(old_key)
        renamed += 1

    if renamed:
        logger.debug("Lower-cased %d header name(s)", renamed)
    return storage


class Header(MutableMapping[str, Optional[List[str]]]):
    """
    Multi-value HTTP header map whose names are always stored in lower case.

    The named operations (``add``, ``delete``, ``get``, ``set``, ``get_all``)
    lower-case the name they are given, so callers may use any spelling.
    The plain mapping protocol (``h[name]``, ``name in h``, iteration)
    addresses the stored keys exactly, which keeps a Header interchangeable
    with an ordinary ``Dict[str, List[str]]`` header dictionary.

    A name may map to ``None`` instead of a list. Construction keeps that
    marker; the value accessors treat it like an empty list.

    Not thread-safe.
    """

    __slots__ = ("_headers",)

    def __init__(self, headers: Optional[Mapping[str, Optional[List[str]]]] = None):
        """
        Build a Header from a copy of *headers*.

        Args:
            headers: Header names (any case) mapped to value lists.
                Each list is copied; the mapping is never aliased.

        Raises:
            HeaderCollisionError: If two names share a lower-case form.
        """
        copied: HeaderDict = {}
        if headers:
            for key, values in headers.items():
                copied[key] = None if values is None else list(values)
        self._headers: HeaderDict = _make_lowercase(copied)

    @classmethod
    def from_headers(
        cls: Type[_H], headers: Optional[Mapping[str, Optional[List[str]]]]
    ) -> _H:
        """Return a new Header holding lower-cased copies of *headers*."""
        return cls(headers)

    @classmethod
    def using(cls: Type[_H], headers: Optional[HeaderDict]) -> _H:
        """
        Lower-case the names of *headers* in place and wrap it.

        The returned Header shares its storage with *headers*: changes made
        through either reference are visible through the other. Value lists
        are kept as the very same objects.

        Args:
            headers: Dictionary to normalize. None yields an empty Header.

        Raises:
            HeaderCollisionError: If two names share a lower-case form.
                *headers* is left untouched in that case.
        """
        header = cls.__new__(cls)
        header._headers = _make_lowercase(headers if headers is not None else {})
        return header

    def __getitem__(self, key: str) -> Optional[List[str]]:
        return self._headers[key]

    def __setitem__(self, key: str, values: Optional[List[str]]) -> None:
        self._headers[key] = values

    def __delitem__(self, key: str) -> None:
        del self._headers[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"Header({self._headers!r})"

    def add(self, key: str, value: str) -> None:
        """
        Append *value* to the values of a header.

        Args:
            key: Header name (case-insensitive).
            value: Value appended after any existing ones.
        """
        key = lower_ascii(key)
        values = self._headers.get(key)
        if values is None:
            self._headers[key] = [value]
        else:
            values.append(value)

    def delete(self, key: str) -> None:
        """Remove a header and all its values. Missing names are ignored."""
        self._headers.pop(lower_ascii(key), None)

    def get(self, key: str) -> str:  # type: ignore[override]
        """
        Get the first value of a header.

        Args:
            key: Header name (case-insensitive).

        Returns:
            The first value, or an empty string if the header is missing
            or has no values.
        """
        values = self._headers.get(lower_ascii(key))
        if values:
            return values[0]
        return ""

    def set(self, key: str, value: str) -> None:
        """Replace all values of a header with the single *value*."""
        self._headers[lower_ascii(key)] = [value]

    def get_all(self, key: str) -> List[str]:
        """
        Get all values of a header.

        The returned list is the stored one, not a copy.

        Args:
            key: Header name (case-insensitive).

        Returns:
            List of all values for the header, empty list if not found.
        """
        values = self._headers.get(lower_ascii(key))
        if values is None:
            return []
        return values

    def clone(self: _H) -> _H:
        """
        Return an independent deep copy of this Header.

        Stored names are copied as they are, without lower-casing them again.
        """
        header = type(self).__new__(type(self))
        header._headers = {
            key: None if values is None else list(values)
            for key, values in self._headers.items()
        }
        return header


def new() -> Header:
    """Return a new, empty Header."""
    return Header()


def from_headers(headers: Optional[Mapping[str, Optional[List[str]]]]) -> Header:
    """Return a new Header with lower-cased copies of *headers*."""
    return Header.from_headers(headers)


def using(headers: Optional[HeaderDict]) -> Header:
    """Lower-case the names of *headers* in place and return a Header over it."""
    return Header.using(headers)
