"""CLI command modules."""

from . import field, remote

__all__ = [
    "field",
    "remote",
]
