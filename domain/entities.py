"""Domain Entities - Aggregates"""
from pydantic import BaseModel, EmailStr, constr
from uuid import UUID
from datetime import date
from typing import Optional, List

from domain.value_objects import DateRange

FullName = constr(strip_whitespace=True, min_length=1)


class Booking(BaseModel):
    """Booking Aggregate Root Entity

    A stay at the single unit. The ID stays empty until the repository
    assigns one on first save.
    """

    # Identity
    booking_id: Optional[UUID] = None

    # Stay
    checkin_date: date
    checkout_date: date

    # Guest contact
    email: EmailStr
    full_name: FullName

    class Config:
        from_attributes = True
        validate_assignment = True

    # ==================== FACTORY METHOD ====================
    @staticmethod
    def create(
        checkin_date: date,
        checkout_date: date,
        email: str,
        full_name: str
    ) -> "Booking":
        """Build an unsaved booking candidate"""
        return Booking(
            checkin_date=checkin_date,
            checkout_date=checkout_date,
            email=email,
            full_name=full_name
        )

    # ==================== QUERY METHODS ====================
    @property
    def stay(self) -> DateRange:
        return DateRange(check_in=self.checkin_date, check_out=self.checkout_date)

    def occupied_dates(self) -> List[date]:
        """Days this booking holds, checkout day excluded"""
        return self.stay.dates()

    def is_saved(self) -> bool:
        return self.booking_id is not None
