"""Time source implementations"""
from datetime import date, datetime
from zoneinfo import ZoneInfo

from domain.clock import Clock


class SystemClock(Clock):
    """Wall-clock date in a fixed reference time zone"""

    def __init__(self, timezone: str = "UTC"):
        self.zone = ZoneInfo(timezone)

    def today(self) -> date:
        return datetime.now(self.zone).date()


class FixedClock(Clock):
    """Always reports the same date"""

    def __init__(self, fixed_date: date):
        self.fixed_date = fixed_date

    def today(self) -> date:
        return self.fixed_date
