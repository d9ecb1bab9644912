from __future__ import annotations


class InvalidDimension(ValueError):
    """Cost matrix is not a square 2-D matrix."""


class IoFailure(OSError):
    """The trace sink refused a write."""
