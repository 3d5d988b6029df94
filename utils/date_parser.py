"""Parsing of RFC 2822 and ISO 8601 date strings into timestamps."""
import logging
import re
from email.utils import parsedate_to_datetime

from dateutil import parser, tz
from dateutil.parser import isoparse, isoparser

from utils.time_utils import INVALID_TIMESTAMP, Timestamp, to_timestamp

logger = logging.getLogger(__name__)

_iso_parser = isoparser()

# Trailing "GMT+01", "UTC-0530" or "GMT+0100 (CET)" as written by Date.toString()
_GMT_OFFSET = re.compile(
    r"\s(?:GMT|UTC)\s*([+-])(\d{1,2}):?(\d{2})?(?:\s*\([^)]*\))?\s*$",
    re.IGNORECASE,
)
# RFC 2822 "-0000" is UTC, which the email parser returns as a naive datetime
_NEGATIVE_ZERO = re.compile(r"\s-00:?00(?:\s*\([^)]*\))?\s*$")


def _normalize_zone(value: str) -> str:
    """
    Rewrite zone suffixes the parsers misread into a numeric offset.

    "GMT+01" means one hour ahead of GMT. The email parser drops such a zone
    and dateutil reads it with the sign inverted, so it is turned into
    "+0100" before either parser sees it.

    Args:
        value: Date string to normalize

    Returns:
        Date string ending in a plain numeric offset where one was found
    """
    match = _GMT_OFFSET.search(value)
    if match:
        sign, hours, minutes = match.groups()
        return f"{value[:match.start()]} {sign}{int(hours):02d}{minutes or '00'}"
    return _NEGATIVE_ZERO.sub(" +0000", value)


def parse_rfc2822(value: str) -> Timestamp:
    """
    Parse an RFC 2822 date string into a timestamp.

    Strict RFC 2822 input ("Tue, 26 Jan 2016 13:48:02 GMT") goes through the
    email package's parser. Anything it rejects is handed to dateutil, which
    accepts the usual human-readable forms ("December 17, 1995 03:24:00").
    Zones written as "GMT+01" are fixed offsets ahead of GMT and "-0000" is
    UTC. Dates without zone information are read in config.local_tz.

    Args:
        value: Date string to parse

    Returns:
        Milliseconds since the epoch, or INVALID_TIMESTAMP if parse fails
    """
    if not isinstance(value, str):
        logger.debug("Refusing to parse non-string date %r", value)
        return INVALID_TIMESTAMP

    value = _normalize_zone(value)
    try:
        moment = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        try:
            moment = parser.parse(value)
        except (ValueError, OverflowError) as e:
            logger.debug("Could not parse %r as a date: %s", value, e)
            return INVALID_TIMESTAMP

    return to_timestamp(moment)


def _is_date_only(value: str) -> bool:
    try:
        _iso_parser.parse_isodate(value)
    except ValueError:
        return False
    return True


def parse_iso8601(value: str) -> Timestamp:
    """
    Parse an ISO 8601 date string into a timestamp.

    Offsets and the "Z" suffix are honored. A date-time without an offset is
    local time (config.local_tz), while a bare date such as "2016-01-19" is
    midnight UTC.

    Args:
        value: ISO 8601 string to parse

    Returns:
        Milliseconds since the epoch, or INVALID_TIMESTAMP if parse fails
    """
    if not isinstance(value, str):
        logger.debug("Refusing to parse non-string date %r", value)
        return INVALID_TIMESTAMP

    try:
        moment = isoparse(value)
    except (ValueError, OverflowError) as e:
        logger.debug("Could not parse %r as ISO 8601: %s", value, e)
        return INVALID_TIMESTAMP

    if moment.tzinfo is None and _is_date_only(value):
        moment = moment.replace(tzinfo=tz.UTC)

    return to_timestamp(moment)
