"""Exceptions raised by the gridkit domain types."""


class GridkitError(Exception):
    """Base class for every error raised by this library."""


class GridConstructionError(GridkitError, ValueError):
    """A grid could not be built because its rows are not all the same length."""


class LocationParseError(GridkitError, ValueError):
    """Text could not be parsed into a Location."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"failed to parse Location from {text!r}: {reason}")


class DirectionParseError(GridkitError, ValueError):
    """Text could not be parsed into a direction enum."""

    def __init__(self, text: str, kind: str = "Direction"):
        self.text = text
        self.kind = kind
        super().__init__(f"failed to parse {kind}: {text!r}")


class CacheBoundsError(GridkitError, IndexError):
    """A cost cache was asked about a node it has no storage for."""
