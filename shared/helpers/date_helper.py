import logging
from datetime import date, datetime, timezone
from typing import Any, Optional, Tuple

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_aware(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC so they compare with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def safe_parse_datetime(value: Any) -> Optional[datetime]:
    """Convert date strings to aware datetimes, return None if invalid."""
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        return as_aware(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if isinstance(value, str):
        try:
            return as_aware(date_parser.isoparse(value))
        except ValueError:
            pass
        try:
            return as_aware(date_parser.parse(value))
        except (ValueError, OverflowError):
            return None

    return None


def parse_datetime_or_now(value: Any, now: Optional[datetime] = None, context: str = "") -> Tuple[datetime, bool]:
    """
    Parse a record date, substituting the current time when it cannot be read.
    Returns (datetime, recovered) where recovered is True if the fallback was used.
    """
    parsed = safe_parse_datetime(value)
    if parsed is not None:
        return parsed, False

    fallback = as_aware(now) if now else utc_now()
    logger.warning(
        "Unparseable date %r%s, using %s", value,
        f" on {context}" if context else "", fallback.isoformat())
    return fallback, True
