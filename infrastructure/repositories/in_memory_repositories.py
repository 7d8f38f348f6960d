"""In-Memory Repository Implementations"""
from typing import Optional, List, Dict
from uuid import UUID, uuid4
from datetime import date

from domain.repositories import BookingRepository
from domain.entities import Booking


class InMemoryBookingRepository(BookingRepository):
    """In-memory implementation of BookingRepository

    Bookings are copied on the way in and out so callers never share
    state with the store.
    """

    def __init__(self):
        self._storage: Dict[UUID, Booking] = {}

    async def save(self, booking: Booking) -> Booking:
        """Save booking to memory"""
        stored = booking.model_copy()
        if stored.booking_id is None:
            stored.booking_id = uuid4()
        self._storage[stored.booking_id] = stored
        return stored.model_copy()

    async def find_by_id(self, booking_id: UUID) -> Optional[Booking]:
        """Find booking by ID"""
        booking = self._storage.get(booking_id)
        return booking.model_copy() if booking else None

    async def update(
        self,
        booking_id: UUID,
        checkin_date: Optional[date] = None,
        checkout_date: Optional[date] = None,
        email: Optional[str] = None,
        full_name: Optional[str] = None
    ) -> Optional[Booking]:
        """Patch the given fields onto the stored booking"""
        stored = self._storage.get(booking_id)
        if stored is None:
            return None
        changes = {
            "checkin_date": checkin_date,
            "checkout_date": checkout_date,
            "email": email,
            "full_name": full_name,
        }
        updated = stored.model_copy()
        for field, value in changes.items():
            if value is not None:
                setattr(updated, field, value)
        self._storage[booking_id] = updated
        return updated.model_copy()

    async def delete(self, booking_id: UUID) -> bool:
        """Delete booking"""
        if booking_id in self._storage:
            del self._storage[booking_id]
            return True
        return False

    async def find_by_checkin_between(self, start_date: date, end_date: date) -> List[Booking]:
        """Find bookings checking in within the date range"""
        return [
            b.model_copy() for b in self._storage.values()
            if start_date <= b.checkin_date < end_date
        ]

    async def find_overlapping(self, start_date: date, end_date: date) -> List[Booking]:
        """Find bookings occupying any day of the date range"""
        return [
            b.model_copy() for b in self._storage.values()
            if b.stay.overlaps(start_date, end_date)
        ]

    async def find_all(self) -> List[Booking]:
        """Find all bookings"""
        return [b.model_copy() for b in self._storage.values()]
