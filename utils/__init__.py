"""Utility modules for datetasks.

This package provides date string parsing and time span formatting.

Modules:
    date_parser: RFC 2822 and ISO 8601 parsing into millisecond timestamps
    time_utils: Timestamp conversion and time span formatting utilities
"""
from utils.date_parser import parse_rfc2822, parse_iso8601
from utils.time_utils import (
    INVALID_TIMESTAMP,
    format_time_span,
    is_invalid_timestamp,
    to_local_datetime,
    to_timestamp,
    to_utc_datetime,
)

__all__ = [
    "INVALID_TIMESTAMP",
    "format_time_span",
    "is_invalid_timestamp",
    "parse_iso8601",
    "parse_rfc2822",
    "to_local_datetime",
    "to_timestamp",
    "to_utc_datetime",
]
