"""Loading timestamp series from files."""

from .timestamps import TimestampParseError, parse_timestamp, read_timestamps

__all__ = ["TimestampParseError", "parse_timestamp", "read_timestamps"]
