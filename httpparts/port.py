"""The port component of a URI authority."""

from __future__ import annotations

from .errors import ErrorKind, InvalidUri

__all__ = ["Port"]

_MAX_PORT = 0xFFFF
_DIGITS = frozenset("0123456789")


class Port:
    """A port number together with the text it was parsed from."""

    __slots__ = ("_port", "_repr")

    def __init__(self, port: int, text: str) -> None:
        self._port = port
        self._repr = text

    @classmethod
    def parse(cls, text: str) -> "Port":
        """Parse text as an unsigned 16-bit port number."""
        digits = text[1:] if text.startswith("+") else text
        if not digits or not set(digits) <= _DIGITS:
            raise InvalidUri(ErrorKind.INVALID_PORT)
        value = int(digits)
        if value > _MAX_PORT:
            raise InvalidUri(ErrorKind.INVALID_PORT)
        return cls(value, text)

    def as_u16(self) -> int:
        """Return the port number."""
        return self._port

    def as_str(self) -> str:
        """Return the port as it was written."""
        return self._repr

    def __int__(self) -> int:
        return self._port

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Port):
            return self._port == other._port
        if isinstance(other, int):
            return self._port == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._port)

    def __str__(self) -> str:
        return str(self._port)

    def __repr__(self) -> str:
        return f"Port({self._port})"