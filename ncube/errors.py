"""Exception types raised by the N-cube kernel."""

from __future__ import annotations


class NcubeError(Exception):
    """Base class for all errors raised by :mod:`ncube`."""


class InvalidWidthError(NcubeError, ValueError):
    """Raised when a region's width is not finite and strictly positive.

    Widths that overflow the region's dtype to infinity are rejected too.

    Attributes:
        width: The rejected width value.
    """

    def __init__(self, width: float) -> None:
        self.width = width
        super().__init__(
            f"N-cube width must be finite and strictly positive, got {width!r}"
        )


class InvalidCenterError(NcubeError, ValueError):
    """Raised when a region's centre has NaN or infinite coordinates."""


class DimensionError(NcubeError, ValueError):
    """Raised when a point or tensor has the wrong dimensionality."""
