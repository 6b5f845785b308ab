# catalog/utils/clock.py
import threading
from datetime import datetime, timedelta, UTC

_lock = threading.Lock()
_last_issued: datetime | None = None

def utcnow() -> datetime:
    """Current naive UTC time, strictly later than any value previously returned.

    Two calls landing on the same clock tick would give an update the same
    last_modified_date as the insert before it, so ties are pushed forward by
    one microsecond.
    """
    global _last_issued
    with _lock:
        now = datetime.now(UTC).replace(tzinfo=None)
        if _last_issued is not None and now <= _last_issued:
            now = _last_issued + timedelta(microseconds=1)
        _last_issued = now
        return now

def as_naive_utc(value: datetime) -> datetime:
    """Express an aware datetime as naive UTC. Naive values are taken as UTC already."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)
