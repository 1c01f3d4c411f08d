"""Market session status for Indian equities (NSE/BSE)."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import pytz

# Regular session as HHMM
REGULAR_OPEN = 915     # 9:15 AM
REGULAR_CLOSE = 1530   # 3:30 PM

OPEN = "OPEN"
PRE_OPEN = "PRE_OPEN"
CLOSED = "CLOSED"


def now() -> datetime:
    """Current time on the local clock, or in ``MARKET_TIMEZONE`` if set."""
    tz_name = os.getenv("MARKET_TIMEZONE")
    if tz_name:
        return datetime.now(pytz.timezone(tz_name))
    return datetime.now()


def _iso_utc(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def get_market_status(dt: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Derive the market session from the wall clock.

    Exchange holidays are not taken into account; a holiday on a weekday
    reports the normal weekday session.

    Args:
        dt: Optional datetime to check. Defaults to now.

    Returns:
        Dictionary with status, message and an ISO-8601 timestamp.
    """
    if dt is None:
        dt = now()

    hhmm = dt.hour * 100 + dt.minute

    if dt.weekday() >= 5:
        status, message = CLOSED, "Markets closed (weekend)"
    elif hhmm < REGULAR_OPEN:
        status, message = PRE_OPEN, "Pre-market session"
    elif hhmm < REGULAR_CLOSE:
        status, message = OPEN, "Indian markets are open"
    else:
        status, message = CLOSED, "Markets closed for the day"

    return {"status": status, "message": message, "timestamp": _iso_utc(dt)}


if __name__ == "__main__":
    status = get_market_status()
    print(f"Time:    {status['timestamp']}")
    print(f"Status:  {status['status']}")
    print(f"Message: {status['message']}")
