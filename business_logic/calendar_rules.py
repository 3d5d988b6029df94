"""Gregorian calendar rules."""
from utils.time_utils import DateLike, to_local_datetime


def is_leap_year(value: DateLike) -> bool:
    """
    Check whether the calendar year of a date is a leap year.

    A year is a leap year if it is divisible by 4 but not by 100,
    or if it is divisible by 400.

    Args:
        value: datetime, date or millisecond timestamp

    Returns:
        True for a leap year, False otherwise (including an invalid date)
    """
    moment = to_local_datetime(value)
    if moment is None:
        return False

    year = moment.year
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
