from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from shipregistry.core.config import settings

# Naive UTC, the same convention the database columns use
EPOCH = datetime(1970, 1, 1)


def from_epoch_millis(millis: int) -> datetime:
    """Epoch milliseconds (may be negative) -> naive UTC datetime."""
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError:
        # Past datetime.max / min; a ValueError so pydantic reports it as a bad field
        raise ValueError(f"epoch milliseconds out of range: {millis}") from None


def to_epoch_millis(value: datetime) -> int:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return (value - EPOCH) // timedelta(milliseconds=1)


def production_year(value: datetime) -> int:
    """Calendar year of a naive UTC datetime, read in SHIP_TIMEZONE."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(ZoneInfo(settings.SHIP_TIMEZONE)).year
