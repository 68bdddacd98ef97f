from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value) -> date:
    """Parse a YYYY-MM-DD string (or a full ISO timestamp) into a calendar date.

    Dates and datetimes are accepted as-is; time-of-day is dropped. The whole
    string must parse, trailing text is rejected.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    v = value.strip() if isinstance(value, str) else ""
    if not v:
        raise ValidationError("Date is required")
    try:
        return date.fromisoformat(v)
    except ValueError:
        pass
    try:
        # JS-style timestamps end in "Z", which older fromisoformat rejects
        stamp = v[:-1] + "+00:00" if v.endswith("Z") else v
        return datetime.fromisoformat(stamp).date()
    except ValueError:
        raise ValidationError(f"Invalid date '{v}' (expected YYYY-MM-DD)")


def as_calendar_day(value: date | datetime) -> date:
    """Normalize a date or datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()
