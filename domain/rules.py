"""Booking rules - pure checks against a reference date"""
from datetime import date, timedelta
from typing import Optional, Tuple

from domain.enums import BookingMessage
from domain.exceptions import BookingValidationError
from domain.value_objects import add_months

# The number of nights a booking may be made for
BOOKING_MAX_NIGHTS = 3
# The minimum number of days between booking and check-in
BOOKING_MIN_DAYS_IN_ADVANCE = 1
BOOKING_MAX_MONTHS_IN_ADVANCE = 1
AVAILABILITY_DEFAULT_MONTHS = 1


class BookingRules:
    """Date rules for stays and availability queries"""

    def __init__(self,
                 max_nights: int = BOOKING_MAX_NIGHTS,
                 min_days_in_advance: int = BOOKING_MIN_DAYS_IN_ADVANCE,
                 max_months_in_advance: int = BOOKING_MAX_MONTHS_IN_ADVANCE,
                 availability_default_months: int = AVAILABILITY_DEFAULT_MONTHS):
        self.max_nights = max_nights
        self.min_days_in_advance = min_days_in_advance
        self.max_months_in_advance = max_months_in_advance
        self.availability_default_months = availability_default_months

    def validate_stay(self, checkin: date, checkout: date, today: date) -> None:
        """Validate a check-in/check-out pair.

        Rules run in a fixed order and the first one broken is raised:
        ordering, same-day stay, advance notice, length of stay, booking horizon.

        Raises:
            BookingValidationError: with the message of the broken rule
        """
        if checkin > checkout:
            raise BookingValidationError(BookingMessage.INVALID_DATE_COMBINATION)

        nights = (checkout - checkin).days
        if nights < 1:
            raise BookingValidationError(BookingMessage.SAME_DAY_STAY)

        if checkin < today + timedelta(days=self.min_days_in_advance):
            raise BookingValidationError(BookingMessage.TOO_SOON)

        if nights > self.max_nights:
            raise BookingValidationError(BookingMessage.TOO_MANY_NIGHTS)

        if checkin > add_months(today, self.max_months_in_advance):
            raise BookingValidationError(BookingMessage.TOO_FAR_AHEAD)

    def resolve_availability_window(
        self,
        start: date,
        end: Optional[date],
        today: date
    ) -> Tuple[date, date]:
        """Fill in a missing end date and validate an availability query window"""
        if end is None:
            end = add_months(start, self.availability_default_months)

        if start >= end:
            raise BookingValidationError(BookingMessage.FROM_NOT_BEFORE_TO)

        # past bookings are not exposed
        if start < today:
            raise BookingValidationError(BookingMessage.FROM_IN_PAST)

        return start, end
