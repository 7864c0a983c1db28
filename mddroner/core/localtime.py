from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from ..config import get_settings
from .constants import LOCAL_DATETIME_FORMAT


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_local(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they are stored as UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(ZoneInfo(get_settings().timezone))


def format_local(value: datetime) -> str:
    return to_local(value).strftime(LOCAL_DATETIME_FORMAT)


def current_month() -> str:
    return to_local(utc_now()).strftime("%Y-%m")
