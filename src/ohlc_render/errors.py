"""Exception types raised by the renderer.

All failures are terminal for the render call that raised them; the
renderer never retries internally and never returns partial output.
Callers are expected to surface ``str(exc)`` verbatim or translate it.
"""

from __future__ import annotations

from typing import Optional


class ChartError(Exception):
    """Base class for all renderer errors."""


class DataValidationError(ChartError, ValueError):
    """The bar series is empty or a bar violates the OHLC ordering.

    Attributes:
        index: Position of the offending bar, or ``None`` for an empty
            series.
        relation: Short name of the violated relation (``"open>high"``,
            ``"close>high"``, ``"low>high"``, ``"open<low"``,
            ``"close<low"``) or ``"empty"``.
    """

    def __init__(self, message: str, index: Optional[int] = None, relation: str = "empty") -> None:
        super().__init__(message)
        self.index = index
        self.relation = relation


class ResourceError(ChartError):
    """A transient staging location could not be allocated."""


class CodecError(ChartError):
    """The image encoder or file writer failed."""


__all__ = ["ChartError", "DataValidationError", "ResourceError", "CodecError"]
