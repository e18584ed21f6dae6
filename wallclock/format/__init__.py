"""Temporal formatting and parsing.

Functions:
    parse_iso8601: Parse ISO 8601 date/time/datetime string.
    format_iso8601: Format temporal object as ISO 8601 string.
"""

from __future__ import annotations

from wallclock.format.iso8601 import format_iso8601, parse_iso8601

__all__: list[str] = [
    "parse_iso8601",
    "format_iso8601",
]
