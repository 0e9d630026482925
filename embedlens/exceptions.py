"""
Exceptions
==========

Errors raised by ``embedlens`` entry points when their inputs are malformed.
All of them derive from :class:`ValueError`, so callers that already catch
``ValueError`` keep working.

Classes
-------
EmbedLensError
    Base class.
ShapeMismatchError
    Point counts disagree between inputs.
InvalidParameterError
    A parameter or option is outside its valid range.
"""


class EmbedLensError(ValueError):
    """Base class for all embedlens errors."""


class ShapeMismatchError(EmbedLensError):
    """Raised when coordinates, labels, adjacency or data disagree on n."""


class InvalidParameterError(EmbedLensError):
    """Raised for out-of-range parameters (k, widths, alpha, adjacency)."""
