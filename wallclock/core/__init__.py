"""Core temporal types.

This module provides the fundamental temporal types:
    - Time: Time of day with nanosecond precision and a signed hour
    - DateTime: A Date paired with a Time
    - Date: Calendar date in the proleptic Gregorian calendar
    - Duration: Signed time span with nanosecond precision
"""

from __future__ import annotations

from wallclock.core.date import Date
from wallclock.core.datetime import DateTime
from wallclock.core.duration import Duration
from wallclock.core.time import Time

__all__: list[str] = [
    "Date",
    "DateTime",
    "Duration",
    "Time",
]
