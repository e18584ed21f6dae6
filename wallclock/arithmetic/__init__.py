"""Temporal arithmetic operations.

The functions in this module are the canonical implementations of adding
a Duration to a time point. They complement the operator-based APIs on
the core classes, which delegate here.

Arithmetic Operations (from wallclock.arithmetic.ops):
    - add_time_and_duration, add_duration_and_time
    - add_datetime_and_duration, add_duration_and_datetime
    - add_date_and_duration
"""

from __future__ import annotations

from wallclock.arithmetic.ops import (
    add_date_and_duration,
    add_datetime_and_duration,
    add_duration_and_datetime,
    add_duration_and_time,
    add_time_and_duration,
)

__all__: list[str] = [
    "add_time_and_duration",
    "add_duration_and_time",
    "add_datetime_and_duration",
    "add_duration_and_datetime",
    "add_date_and_duration",
]
