"""The path and query component of a URI."""

from __future__ import annotations

from typing import Optional, Union

from .errors import ErrorKind, InvalidUri

__all__ = ["PathAndQuery"]

_QUESTION = ord("?")
_HASH = ord("#")

# Bytes allowed unencoded in the path. '"', '{' and '}' should really be
# percent-encoded, but real clients send them (e.g. JSON in the path), so they
# are accepted. Bytes from 0x7F up may be UTF-8 and are checked on decoding.
_PATH_BYTES = frozenset(
    [0x21, *range(0x24, 0x3C), 0x3D, *range(0x40, 0x60), *range(0x61, 0x7B), 0x7C, 0x7E]
    + [ord('"'), ord("{"), ord("}")]
    + list(range(0x7F, 0x100))
)

# Bytes allowed in the query: 0x21 / 0x24-0x3B / 0x3D / 0x3F-0x7E, plus
# possible UTF-8 from 0x7F up.
_QUERY_BYTES = frozenset(
    [0x21, *range(0x24, 0x3C), 0x3D, *range(0x3F, 0x7F)] + list(range(0x7F, 0x100))
)


def _to_bytes(src: Union[str, bytes, bytearray, memoryview]) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    if isinstance(src, (bytes, bytearray, memoryview)):
        return bytes(src)
    raise TypeError(f"expected str or bytes, got {type(src).__name__}")


class PathAndQuery:
    """The path of a URI and its optional query, without any fragment."""

    __slots__ = ("_data", "_query_at")

    _data: str
    _query_at: Optional[int]

    @classmethod
    def _make(cls, data: str, query_at: Optional[int]) -> "PathAndQuery":
        instance = object.__new__(cls)
        instance._data = data
        instance._query_at = query_at
        return instance

    @classmethod
    def parse(cls, src: Union[str, bytes, bytearray, memoryview]) -> "PathAndQuery":
        """Parse a path with an optional ``?query``; a ``#fragment`` is dropped."""
        data = _to_bytes(src)
        end = len(data)
        has_query = False

        positions = iter(enumerate(data))
        for i, byte in positions:
            if byte == _QUESTION:
                has_query = True
                break
            if byte == _HASH:
                end = i
                break
            if byte not in _PATH_BYTES:
                raise InvalidUri(ErrorKind.INVALID_URI_CHAR)

        if has_query:
            for i, byte in positions:
                if byte == _HASH:
                    end = i
                    break
                if byte not in _QUERY_BYTES:
                    raise InvalidUri(ErrorKind.INVALID_URI_CHAR)

        try:
            text = data[:end].decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR) from None

        # A '?' byte never occurs inside a multi-byte UTF-8 sequence, so the
        # first '?' in the text is where the query starts.
        query_at = text.index("?") if has_query else None
        return cls._make(text, query_at)

    @classmethod
    def from_static(cls, src: str) -> "PathAndQuery":
        """Parse a path and query that is known to be valid."""
        return cls.parse(src)

    @classmethod
    def empty(cls) -> "PathAndQuery":
        """Return an empty path and query."""
        return cls._make("", None)

    @classmethod
    def slash(cls) -> "PathAndQuery":
        """Return the path ``/``."""
        return cls._make("/", None)

    @classmethod
    def star(cls) -> "PathAndQuery":
        """Return the path ``*``."""
        return cls._make("*", None)

    def path(self) -> str:
        """Return the path; an empty path is reported as ``/``."""
        if self._query_at is None:
            path = self._data
        else:
            path = self._data[: self._query_at]
        return path or "/"

    def query(self) -> Optional[str]:
        """Return the text after ``?``, or None when there is no query."""
        if self._query_at is None:
            return None
        return self._data[self._query_at + 1 :]

    def as_str(self) -> str:
        """Return the path and query as text; empty data is reported as ``/``."""
        return self._data or "/"

    def is_empty(self) -> bool:
        """Return True when nothing at all was stored."""
        return not self._data

    def _key(self, other: object) -> Optional[str]:
        if isinstance(other, PathAndQuery):
            return other.as_str()
        if isinstance(other, str):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathAndQuery):
            return self._data == other._data
        if isinstance(other, str):
            return self.as_str() == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self.as_str() < key

    def __le__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self.as_str() <= key

    def __gt__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self.as_str() > key

    def __ge__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self.as_str() >= key

    def __hash__(self) -> int:
        return hash(self._data)

    def __str__(self) -> str:
        if not self._data:
            return "/"
        if self._data[0] in "/*":
            return self._data
        return "/" + self._data

    def __repr__(self) -> str:
        return f"PathAndQuery({str(self)!r})"