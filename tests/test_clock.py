# tests/test_clock.py
from datetime import datetime, timedelta, UTC
from catalog.utils.clock import utcnow

def test_utcnow_is_naive_utc():
    now = utcnow()

    assert now.tzinfo is None
    assert abs(now - datetime.now(UTC).replace(tzinfo=None)) < timedelta(seconds=5)

def test_utcnow_strictly_increases():
    """Test that consecutive readings never repeat, even within one clock tick."""
    readings = [utcnow() for _ in range(1000)]

    assert all(earlier < later for earlier, later in zip(readings, readings[1:]))
