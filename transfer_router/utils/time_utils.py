"""Time arithmetic and wording utilities"""

import math
from datetime import datetime, timedelta
from typing import Tuple

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600


def delay_seconds(arrival: datetime, now: datetime) -> float:
    """Seconds from now until arrival (negative if arrival is in the past)"""
    return (arrival - now).total_seconds()


def whole_hours(delta: timedelta) -> int:
    """Floor of a duration in hours"""
    return math.floor(delta.total_seconds() / SECONDS_PER_HOUR)


def split_hours_minutes(delta: timedelta) -> Tuple[int, int]:
    """
    Split a duration into whole hours and the whole minutes left over.

    The minute remainder keeps the sign of the duration, so -90 minutes
    splits into (-2, -30).
    """
    seconds = delta.total_seconds()
    hours = math.floor(seconds / SECONDS_PER_HOUR)
    minutes = math.floor(math.fmod(seconds, SECONDS_PER_HOUR) / SECONDS_PER_MINUTE)
    return hours, minutes


def pluralize(count: int, word: str) -> str:
    """'1 step', '2 steps'"""
    return f"{count} {word}" if count == 1 else f"{count} {word}s"
