"""API Schemas - Request and Response DTOs"""
from pydantic import BaseModel, EmailStr
from pydantic.alias_generators import to_camel
from datetime import date
from uuid import UUID
from typing import Optional

from domain.entities import FullName


class CamelModel(BaseModel):
    """DTO exchanged as camelCase JSON"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# ============================================================================
# BOOKING SCHEMAS
# ============================================================================

class CreateBookingRequest(CamelModel):
    """Create booking request DTO"""
    checkin_date: date
    checkout_date: date
    email: EmailStr
    full_name: FullName


class UpdateBookingRequest(CamelModel):
    """Modify booking request DTO - absent fields keep their value"""
    checkin_date: Optional[date] = None
    checkout_date: Optional[date] = None
    email: Optional[EmailStr] = None
    full_name: Optional[FullName] = None


class BookingResponse(CamelModel):
    """Booking response DTO"""
    booking_id: UUID
    checkin_date: date
    checkout_date: date
    email: str
    full_name: str
