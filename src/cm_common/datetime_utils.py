"""UTC datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def month_start(moment: datetime) -> datetime:
    """First instant of moment's calendar month, in UTC."""
    moment = moment.astimezone(timezone.utc)
    return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def month_key(moment: datetime) -> str:
    """'2026-10': the month_year column of discount_usage."""
    return month_start(moment).strftime("%Y-%m")
