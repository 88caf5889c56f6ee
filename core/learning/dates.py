"""
Date helpers shared by the learning engine.
"""

from __future__ import annotations

import datetime as dt


def today() -> dt.date:
    """Current UTC calendar day."""
    return dt.datetime.now(dt.timezone.utc).date()


def days_between(start: dt.date, end: dt.date) -> int:
    """
    Whole days from start to end (negative if end is before start).
    """
    return (end - start).days
