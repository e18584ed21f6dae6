"""Internal utilities for Wallclock.

This module contains private implementation details:
    - Constants and magic numbers
    - Calendar arithmetic (MJD, ordinal and ISO week dates)
    - Byte-string helpers for the ISO 8601 codecs

Note: This module is not part of the public API.
"""

from __future__ import annotations

__all__: list[str] = []
