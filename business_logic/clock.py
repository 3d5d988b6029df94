"""Analog clock geometry."""
import math
from typing import Optional

from config import config
from utils.time_utils import DateLike, to_utc_datetime

CLOCK_ANGLE_MODES = ("literal", "shortest")


def clock_hand_angle(value: DateLike, mode: Optional[str] = None) -> float:
    """
    Compute the angle in radians between the hands of an analog clock.

    The hour hand moves 30 degrees per hour plus 0.5 degrees per minute, the
    minute hand 6 degrees per minute. Seconds are ignored.

    Two reductions of the raw angle are available:
    - literal: a raw angle above pi has pi subtracted from it
    - shortest: the smaller of the raw angle and its reflex complement

    Args:
        value: UTC datetime, date or millisecond timestamp
        mode: "literal" or "shortest" (uses config.clock_angle_mode if None)

    Returns:
        Angle in [0, pi], or nan for an invalid date
    """
    if mode is None:
        mode = config.clock_angle_mode
    if mode not in CLOCK_ANGLE_MODES:
        raise ValueError(f"unknown clock angle mode: {mode!r}")

    moment = to_utc_datetime(value)
    if moment is None:
        return math.nan

    hours = moment.hour % 12
    minutes = moment.minute

    hour_angle = 30 * hours + 0.5 * minutes
    minute_angle = 6 * minutes
    degrees = abs(hour_angle - minute_angle)

    if mode == "shortest":
        return math.radians(min(degrees, 360 - degrees))

    radians = degrees * math.pi / 180
    if radians > math.pi:
        return radians - math.pi
    return radians
