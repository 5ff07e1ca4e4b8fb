# src/task_tracker/cli/parsing.py

"""
Input parsing for the console menu.

Parse failures never propagate: each helper returns a default (no date, MEDIUM, None)
and optionally reports a diagnostic through `emit`.
"""

from __future__ import annotations

import calendar
import logging
import re
from datetime import date

from ..core.ports import Emit
from ..tasks.task_models import Priority

logger = logging.getLogger(__name__)

DATE_REGEX = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)

INVALID_DATE_MESSAGE = "Invalid date format. Use yyyy-MM-dd (e.g., 2025-10-15). Date ignored."
UNKNOWN_PRIORITY_MESSAGE = "Unknown priority; defaulting to MEDIUM."

_PRIORITY_CODES = {1: Priority.LOW, 2: Priority.MEDIUM, 3: Priority.HIGH}


def parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def parse_date(raw: str | None, emit: Emit | None = None) -> date | None:
    """
    Parse a `yyyy-MM-dd` date.

    Blank input means "no date" and is not an error. Digits must be ASCII, the
    month 01-12 and the day 01-31; a day past the end of the month resolves to
    the month's last day (2025-02-30 -> 2025-02-28). Anything else yields None
    plus a diagnostic.
    """
    if raw is None or not raw.strip():
        return None

    m = DATE_REGEX.match(raw.strip())
    if m:
        year, month, day = (int(g) for g in m.groups())
        if year >= 1 and 1 <= month <= 12 and 1 <= day <= 31:
            return date(year, month, min(day, calendar.monthrange(year, month)[1]))

    logger.debug("Rejected date input %r", raw)
    if emit is not None:
        emit(INVALID_DATE_MESSAGE)
    return None


def priority_from_code(code: int | None, emit: Emit | None = None) -> Priority:
    """Map menu codes 1/2/3 to LOW/MEDIUM/HIGH; anything else falls back to MEDIUM."""
    priority = _PRIORITY_CODES.get(code) if code is not None else None
    if priority is not None:
        return priority

    logger.debug("Unknown priority code %r", code)
    if emit is not None:
        emit(UNKNOWN_PRIORITY_MESSAGE)
    return Priority.MEDIUM
