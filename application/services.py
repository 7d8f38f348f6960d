"""Application Services - Business use cases"""
import asyncio
import logging
from uuid import UUID
from datetime import date
from typing import Iterable, List, Optional

from domain.availability import compute_availability
from domain.clock import Clock
from domain.entities import Booking
from domain.enums import BookingMessage
from domain.exceptions import BookingNotFoundError, BookingValidationError
from domain.repositories import BookingRepository
from domain.rules import BookingRules

logger = logging.getLogger(__name__)


class BookingService:
    """Service for Booking business use cases

    Every write that claims dates holds ``lock`` while it reads the current
    booking and availability and saves. The lock must grant waiters in
    arrival order; ``asyncio.Lock`` does.
    """

    def __init__(self,
                 repository: BookingRepository,
                 clock: Clock,
                 rules: Optional[BookingRules] = None,
                 lock: Optional[asyncio.Lock] = None):
        self.repository = repository
        self.clock = clock
        self.rules = rules or BookingRules()
        self.lock = lock or asyncio.Lock()

    async def find_availability(self, start: date, end: Optional[date] = None) -> List[date]:
        """Free days in [start, end); ``end`` defaults to a month after ``start``"""
        start, end = self.rules.resolve_availability_window(start, end, self.clock.today())
        bookings = await self.repository.find_overlapping(start, end)
        return compute_availability(start, end, bookings)

    async def create_booking(
        self,
        checkin_date: date,
        checkout_date: date,
        email: str,
        full_name: str
    ) -> UUID:
        """Create new booking if the latest availability allows it"""
        self.rules.validate_stay(checkin_date, checkout_date, self.clock.today())

        candidate = Booking.create(
            checkin_date=checkin_date,
            checkout_date=checkout_date,
            email=email,
            full_name=full_name
        )

        async with self.lock:
            await self._check_available(candidate)
            booking = await self.repository.save(candidate)
        logger.info("Booking %s created for %s to %s",
                    booking.booking_id, booking.checkin_date, booking.checkout_date)
        return booking.booking_id

    async def get_booking(self, booking_id: UUID) -> Booking:
        """Get booking by ID"""
        booking = await self.repository.find_by_id(booking_id)
        if not booking:
            raise BookingNotFoundError()
        return booking

    async def cancel_booking(self, booking_id: UUID) -> None:
        """Cancel booking, freeing its dates"""
        if not await self.repository.delete(booking_id):
            raise BookingNotFoundError()
        logger.info("Booking %s cancelled", booking_id)

    async def update_booking(
        self,
        booking_id: UUID,
        checkin_date: Optional[date] = None,
        checkout_date: Optional[date] = None,
        email: Optional[str] = None,
        full_name: Optional[str] = None
    ) -> Booking:
        """Apply the given fields onto an existing booking

        Only the fields given are written, so concurrent edits of other
        fields survive.
        """
        if checkin_date is None and checkout_date is None:
            # contact details only, no dates claimed
            booking = await self.repository.update(booking_id, email=email, full_name=full_name)
            if booking is None:
                raise BookingNotFoundError()
            logger.info("Booking %s contact details updated", booking_id)
            return booking

        async with self.lock:
            # read under the lock so a queued edit sees the writes ahead of it
            current = await self.get_booking(booking_id)
            today = self.clock.today()

            moved = current.model_copy()
            if checkin_date is not None:
                if today >= current.checkin_date:
                    raise BookingValidationError(BookingMessage.STAY_IN_PROGRESS)
                moved.checkin_date = checkin_date
            if checkout_date is not None:
                moved.checkout_date = checkout_date

            self.rules.validate_stay(moved.checkin_date, moved.checkout_date, today)
            await self._check_available(moved, exempt_dates=current.occupied_dates())

            booking = await self.repository.update(
                booking_id,
                checkin_date=moved.checkin_date,
                checkout_date=moved.checkout_date,
                email=email,
                full_name=full_name
            )
            if booking is None:
                # cancelled while availability was being read
                raise BookingNotFoundError()
        logger.info("Booking %s moved to %s to %s",
                    booking_id, booking.checkin_date, booking.checkout_date)
        return booking

    async def _check_available(self, candidate: Booking, exempt_dates: Iterable[date] = ()) -> None:
        """Raise unless every day of ``candidate`` is free.

        Callers hold ``lock`` until they have written the booking.
        ``exempt_dates`` are counted as free; an edited booking passes its
        own current days so they do not block it.
        """
        start, end = candidate.checkin_date, candidate.checkout_date
        bookings = await self.repository.find_overlapping(start, end)

        available = set(compute_availability(start, end, bookings))
        available.update(exempt_dates)

        if not all(day in available for day in candidate.occupied_dates()):
            logger.warning("Dates %s to %s no longer available", start, end)
            raise BookingValidationError(BookingMessage.DATES_UNAVAILABLE)
