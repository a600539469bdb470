class StatsError(Exception):
    """Base exception for the POS statistics engine."""


class InvalidRangeError(StatsError):
    """Raised when a date range is inverted or cannot be parsed."""


class DataSourceError(StatsError):
    """Raised when an order source cannot deliver records."""
