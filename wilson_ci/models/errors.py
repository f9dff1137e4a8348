"""Error types raised by interval computations."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when interval inputs violate their preconditions."""
