"""Strict parsers for URI components: schemes, ports, paths and queries."""

__version__ = "1.3.1"
__all__ = ["errors", "path", "port", "scheme"]