"""Structured key-value data for log records: keys, values, visitors and sources."""

__version__ = "0.4.27"
__all__ = ["error", "key", "value", "visitor", "source"]