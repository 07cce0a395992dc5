# ovfdash/durations.py

from __future__ import annotations

import math
import re
from datetime import MINYEAR, date, datetime, timedelta
from typing import Any, List, Optional

# Any value below this is read as a day count, not a year or a date.
MAX_DAY_COUNT = 1000

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_MONTH_DAY_RE = re.compile(r"^(\d{1,2})\D(\d{1,2})$")

_DATE_FORMATS: List[str] = [
    "%Y/%m/%d",
    "%Y-%m-%d",
    "%Y.%m.%d",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y年%m月%d日",
    "%m/%d/%Y",
    "%Y%m%d",
]

# strptime fills in 1900 for these; the caller's reference year replaces it.
_YEARLESS_FORMATS: List[str] = [
    "%m月%d日",
    "%b %d",
    "%B %d",
    "%d %b",
]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_full_date(s: str) -> Optional[datetime]:
    """
    Parse a date that carries its own year.
    Tries the fixed format list first, then ISO 8601 (as produced by
    JSON-serialised spreadsheet dates, e.g. 2025-03-03T15:00:00.000Z).
    Timezone info is dropped: only calendar days matter here.
    """
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue

    iso = s[:-1] + "+00:00" if s.endswith("Z") else s
    try:
        return datetime.fromisoformat(iso).replace(tzinfo=None)
    except ValueError:
        return None


def reference_year(timestamp: Any) -> int:
    """
    Calendar year of a submission timestamp.
    Falls back to the current year when the timestamp is unparseable.
    """
    dt = parse_full_date(_text(timestamp))
    if dt is None:
        return date.today().year
    return dt.year


def parse_date(marker: Any, year: int) -> Optional[datetime]:
    """
    Resolve a date marker to a datetime, or None.

    A bare month/day pair ("01-03", "1/3", "12.28") is placed in `year`.
    Anything else goes through the general parser; formats without a
    year get `year` instead of strptime's 1900.
    """
    s = _text(marker)
    if not s:
        return None

    m = _MONTH_DAY_RE.match(s)
    if m:
        try:
            return datetime(year, int(m.group(1)), int(m.group(2)))
        except ValueError:
            return None

    dt = parse_full_date(s)
    if dt is not None:
        return dt

    for fmt in _YEARLESS_FORMATS:
        try:
            dt = datetime.strptime(s, fmt)
        except ValueError:
            continue
        try:
            return dt.replace(year=year)
        except ValueError:
            # Feb 29 in a non-leap reference year
            return None

    return None


def day_count(value: Any) -> Optional[int]:
    """
    Return the value as a whole day count if it is a plain number in
    [0, MAX_DAY_COUNT), else None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        num = float(value)
    else:
        s = _text(value)
        if not _NUMBER_RE.match(s):
            return None
        num = float(s)

    if not math.isfinite(num) or num < 0 or num >= MAX_DAY_COUNT:
        return None
    return math.floor(num)


def _previous_year(dt: datetime) -> Optional[datetime]:
    if dt.year <= MINYEAR:
        return None
    try:
        return dt.replace(year=dt.year - 1)
    except ValueError:
        return dt.replace(year=dt.year - 1, day=28)


def _ceil_days(delta: timedelta) -> int:
    return math.ceil(delta.total_seconds() / 86400)


def _date_difference(start: str, end: str, year: int) -> Optional[int]:
    start_dt = parse_date(start, year)
    end_dt = parse_date(end, year)
    if start_dt is None or end_dt is None:
        return None

    # Admission in December, discharge in January.
    if start_dt > end_dt:
        start_dt = _previous_year(start_dt)
        if start_dt is None:
            return None

    days = _ceil_days(end_dt - start_dt)
    return days if days >= 0 else None


def _digits_fallback(s: str) -> Optional[int]:
    """
    "14 days", "14日", "約14" -> 14. Anything that leaves 1000 or more
    (e.g. a full date that failed to parse) is rejected.
    """
    digits = re.sub(r"\D", "", s).lstrip("0")
    if not digits:
        # "" (no digits at all) vs "0" / "00"
        return 0 if re.search(r"\d", s) else None
    if len(digits) > 3:
        return None
    n = int(digits)
    return n if n < MAX_DAY_COUNT else None


def normalize_duration(start: Any, end: Any, reference_timestamp: Any = "") -> Optional[int]:
    """
    Number of days between two spreadsheet markers, or None (indeterminate).

    `end` may hold a day count (14, "14", "14 days") or a date; the
    decision is made per value. Rules, first match wins:

      1. empty end                      -> None
      2. plain number in [0, 1000)      -> floor(number)
      3. end equals start (trimmed)     -> 0
      4. both resolve to dates          -> ceil(end - start) in days, if >= 0;
         a start later than the end is moved back one year first
      5. digits left in end             -> that number, if < 1000

    Never raises and never returns a negative number.
    """
    end_s = _text(end)
    if not end_s:
        return None

    n = day_count(end)
    if n is not None:
        return n

    if end_s == _text(start):
        return 0

    days = _date_difference(_text(start), end_s, reference_year(reference_timestamp))
    if days is not None:
        return days

    return _digits_fallback(end_s)
