from datetime import date, datetime, time, timezone
import calendar
from utils.constants import (
    DATE_FORMAT, MONTH_FORMAT, DISPLAY_DATE_FORMAT, DISPLAY_DATETIME_FORMAT,
)


_DAY_START = time(0, 0, 0)
_DAY_END = time(23, 59, 59)


def today() -> date:
    return date.today()


def current_month_str() -> str:
    return date.today().strftime(MONTH_FORMAT)


def parse_date(date_str: str) -> date | None:
    """Parse a date string in YYYY-MM-DD format, returning None on failure."""
    if not date_str:
        return None
    for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d"):
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    return None


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def parse_month(month_str: str) -> date | None:
    """Return the first day of the given YYYY-MM month string."""
    if not month_str:
        return None
    try:
        return datetime.strptime(month_str, MONTH_FORMAT).date()
    except ValueError:
        return None


def month_bounds(month_str: str) -> tuple[date, date]:
    """Return (first_day, last_day) for a YYYY-MM month."""
    d = parse_month(month_str)
    if d is None:
        raise ValueError(f"Invalid month: {month_str}")
    last_day = calendar.monthrange(d.year, d.month)[1]
    return d, d.replace(day=last_day)


def prev_month(month_str: str) -> str:
    d = parse_month(month_str)
    if d is None:
        raise ValueError(f"Invalid month: {month_str}")
    if d.month == 1:
        return d.replace(year=d.year - 1, month=12).strftime(MONTH_FORMAT)
    return d.replace(month=d.month - 1).strftime(MONTH_FORMAT)


def next_month(month_str: str) -> str:
    d = parse_month(month_str)
    if d is None:
        raise ValueError(f"Invalid month: {month_str}")
    if d.month == 12:
        return d.replace(year=d.year + 1, month=1).strftime(MONTH_FORMAT)
    return d.replace(month=d.month + 1).strftime(MONTH_FORMAT)


def friendly_month(month_str: str) -> str:
    """Convert YYYY-MM to e.g. 'February 2026'."""
    d = parse_month(month_str)
    if d is None:
        return month_str
    return d.strftime("%B %Y")


def format_display_date(date_str: str) -> str:
    """Convert a YYYY-MM-DD string to DD/MM/YYYY for display."""
    if not date_str:
        return date_str
    d = parse_date(date_str)
    if d is None:
        return date_str
    return d.strftime(DISPLAY_DATE_FORMAT)


def parse_display_date(display_str: str) -> date | None:
    """Parse a DD/MM/YYYY date. Returns None on failure.

    Falls back to ISO 8601 parse if the display format doesn't match.
    """
    if not display_str:
        return None
    try:
        return datetime.strptime(display_str.strip(), DISPLAY_DATE_FORMAT).date()
    except ValueError:
        return parse_date(display_str)


# ── Stored timestamps (UTC, naive) ────────────────────────────────────────────

def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_utc_naive(dt: datetime) -> datetime:
    """Aware datetimes are converted to UTC; naive ones are assumed UTC already."""
    if dt.tzinfo is not None:
        return dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def format_storage_datetime(dt: datetime) -> str:
    """'YYYY-MM-DD HH:MM:SS' with '.ffffff' only when there are microseconds.

    The fixed-width prefix keeps text comparison in SQL chronological.
    """
    return to_utc_naive(dt).isoformat(sep=" ")


def parse_storage_datetime(value: str) -> datetime:
    return datetime.fromisoformat(value)


def _as_date(value: date) -> date:
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def day_span(start: date, end: date) -> tuple[datetime, datetime]:
    """Closed range covering whole days: start 00:00:00 .. end 23:59:59."""
    return (
        datetime.combine(_as_date(start), _DAY_START),
        datetime.combine(_as_date(end), _DAY_END),
    )


def local_date_to_utc(d: date, at: time | None = None) -> datetime:
    """Combine a local calendar date with a local time of day, return UTC naive."""
    if at is None:
        at = datetime.now().time().replace(microsecond=0)
    local = datetime.combine(d, at).astimezone()
    return to_utc_naive(local)


def format_local_datetime(dt: datetime) -> str:
    """Render a stored UTC-naive timestamp in local time, e.g. '15-01-2024 13:00'."""
    local = dt.replace(tzinfo=timezone.utc).astimezone()
    return local.strftime(DISPLAY_DATETIME_FORMAT)


def day_heading(d: date) -> str:
    """e.g. '15 January'."""
    return f"{d.day} {calendar.month_name[d.month]}"
