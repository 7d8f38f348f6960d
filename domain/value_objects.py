"""Domain Value Objects"""
import calendar
from pydantic import BaseModel
from datetime import date, timedelta
from typing import List


def add_months(day: date, months: int) -> date:
    """Shift a date by whole months, clamping to the end of the target month"""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


class DateRange(BaseModel):
    """Value Object for a half-open stay window [check_in, check_out)

    The range is not validated on construction: ordering problems are
    reported by the booking rules with their own messages.
    """
    check_in: date
    check_out: date

    def nights(self) -> int:
        """Calculate number of nights"""
        return (self.check_out - self.check_in).days

    def dates(self) -> List[date]:
        """Every occupied day, checkout day excluded"""
        return [self.check_in + timedelta(days=offset) for offset in range(max(self.nights(), 0))]

    def overlaps(self, start: date, end: date) -> bool:
        """Check if any occupied day falls in [start, end)"""
        return self.check_in < end and self.check_out > start

    class Config:
        frozen = True
