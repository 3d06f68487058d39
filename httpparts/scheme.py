"""The scheme component of a URI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from .errors import ErrorKind, InvalidUri

__all__ = ["MAX_SCHEME_LEN", "Scheme", "SchemePrefix", "parse_scheme_prefix"]

# Kept short so that scheme handling can stay cheap.
MAX_SCHEME_LEN = 64

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." ), plus '~' and ':'.
# Every member is ASCII, so a run of them is always valid text.
_SCHEME_CHARS = frozenset(
    b"+-.0123456789:"
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"abcdefghijklmnopqrstuvwxyz~"
)
_COLON = ord(":")


def _to_bytes(src: Union[str, bytes, bytearray, memoryview]) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    if isinstance(src, (bytes, bytearray, memoryview)):
        return bytes(src)
    raise TypeError(f"expected str or bytes, got {type(src).__name__}")


class Scheme:
    """A URI scheme such as ``http``, compared case-insensitively.

    The well-known ``http`` and ``https`` schemes are kept apart from other
    schemes: a scheme only equals ``Scheme.HTTP`` if it was recognised as
    the standard ``http`` scheme.
    """

    __slots__ = ("_name", "_standard")

    HTTP: ClassVar["Scheme"]
    HTTPS: ClassVar["Scheme"]

    _name: str
    _standard: bool

    @classmethod
    def _make(cls, name: str, standard: bool) -> "Scheme":
        instance = object.__new__(cls)
        instance._name = name
        instance._standard = standard
        return instance

    @classmethod
    def parse(cls, src: Union[str, bytes, bytearray, memoryview]) -> "Scheme":
        """Parse a scheme given on its own, without the ``://``."""
        data = _to_bytes(src)
        if data == b"http":
            return cls.HTTP
        if data == b"https":
            return cls.HTTPS
        if len(data) > MAX_SCHEME_LEN:
            raise InvalidUri(ErrorKind.SCHEME_TOO_LONG)
        if any(byte == _COLON or byte not in _SCHEME_CHARS for byte in data):
            raise InvalidUri(ErrorKind.INVALID_SCHEME)
        return cls._make(data.decode("ascii"), standard=False)

    def as_str(self) -> str:
        """Return the scheme as text."""
        return self._name

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Scheme):
            if self._standard or other._standard:
                return self._standard == other._standard and self._name == other._name
            return self._name.lower() == other._name.lower()
        if isinstance(other, str):
            return self._name.encode("utf-8").lower() == other.encode("utf-8").lower()
        return NotImplemented

    def __hash__(self) -> int:
        if self._standard:
            return hash(("standard", self._name))
        return hash(("other", self._name.lower()))

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Scheme({self._name!r})"


Scheme.HTTP = Scheme._make("http", standard=True)
Scheme.HTTPS = Scheme._make("https", standard=True)


@dataclass(frozen=True)
class SchemePrefix:
    """A scheme found at the start of a URI, followed by ``://``."""

    scheme: Scheme
    length: int

    @property
    def consumed(self) -> int:
        """Number of bytes taken by the scheme and the ``://`` after it."""
        return self.length + 3


def parse_scheme_prefix(data: bytes) -> Optional[SchemePrefix]:
    """Find a ``scheme://`` prefix at the start of ``data``.

    Returns None when the data does not start with a scheme.
    """
    if len(data) >= 7 and data[:7].lower() == b"http://":
        return SchemePrefix(Scheme.HTTP, 4)
    if len(data) >= 8 and data[:8].lower() == b"https://":
        return SchemePrefix(Scheme.HTTPS, 5)

    if len(data) > 3:
        for i, byte in enumerate(data):
            if byte == _COLON:
                if len(data) < i + 3 or data[i + 1 : i + 3] != b"//":
                    break
                if i > MAX_SCHEME_LEN:
                    raise InvalidUri(ErrorKind.SCHEME_TOO_LONG)
                return SchemePrefix(Scheme._make(data[:i].decode("ascii"), False), i)
            if byte not in _SCHEME_CHARS:
                break
    return None