"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import Optional, List
from uuid import UUID
from datetime import date

from domain.entities import Booking


class BookingRepository(ABC):
    """Repository interface for Booking Aggregate"""

    @abstractmethod
    async def save(self, booking: Booking) -> Booking:
        """Insert or update a booking, assigning an ID on first save"""
        pass

    @abstractmethod
    async def find_by_id(self, booking_id: UUID) -> Optional[Booking]:
        """Find booking by ID"""
        pass

    @abstractmethod
    async def update(
        self,
        booking_id: UUID,
        checkin_date: Optional[date] = None,
        checkout_date: Optional[date] = None,
        email: Optional[str] = None,
        full_name: Optional[str] = None
    ) -> Optional[Booking]:
        """Change only the fields given, keeping the rest as stored

        Returns None if the booking does not exist.
        """
        pass

    @abstractmethod
    async def delete(self, booking_id: UUID) -> bool:
        """Delete booking, returning False if it does not exist"""
        pass

    @abstractmethod
    async def find_by_checkin_between(self, start_date: date, end_date: date) -> List[Booking]:
        """Find bookings checking in within [start_date, end_date)"""
        pass

    @abstractmethod
    async def find_overlapping(self, start_date: date, end_date: date) -> List[Booking]:
        """Find bookings occupying any day within [start_date, end_date)

        Includes stays that checked in before ``start_date`` and run into
        the window.
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Booking]:
        """Find all bookings"""
        pass
