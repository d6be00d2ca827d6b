"""Error kinds raised by the decoder, the reconstructor and the loader.

Every error carries a ``context`` dict with the offending values so callers
can report exactly which share was malformed.
"""

from __future__ import annotations

from typing import Any, Dict


class ShareError(Exception):
    """Base class for all share decoding / reconstruction failures."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        # Big ints go out as strings so JSON consumers keep full precision.
        return {
            "error": self.kind,
            "message": self.message,
            "context": {k: str(v) if isinstance(v, int) else v for k, v in self.context.items()},
        }


# ---- decoding-time ----

class InvalidBase(ShareError):
    """Base is not an integer in [MIN_BASE, MAX_BASE]."""


class InvalidDigit(ShareError):
    """Digit payload contains a character that is not a digit of the base."""


class InvalidIdentifier(ShareError):
    """Share identifier is not a well-formed base-10 integer."""


class InvalidValue(ShareError):
    """Share y-value is not an exact integer."""


# ---- reconstruction-time ----

class InsufficientShares(ShareError):
    """Not enough shares to interpolate."""


class DuplicateXCoordinate(ShareError):
    """Two points share an x-coordinate; interpolation is undefined."""


class InconsistentShares(ShareError):
    """Points do not lie on a common integer polynomial of degree < k."""


# ---- loader ----

class ShareSetError(ShareError):
    """Input document is structurally malformed."""
