"""Domain Enums"""
from enum import Enum


class BookingMessage(str, Enum):
    # Stay validation, in evaluation order
    INVALID_DATE_COMBINATION = "Check-in and check-out date combination is invalid."
    SAME_DAY_STAY = "Cannot check-in and check-out on same day."
    TOO_SOON = "Bookings must be made at least one day in advance."
    TOO_MANY_NIGHTS = "Booking cannot exceed maximum number of nights allowed."
    TOO_FAR_AHEAD = "Bookings cannot be made more than a month in advance."

    # Availability queries
    FROM_NOT_BEFORE_TO = "The `from` date must be before the `to` date."
    FROM_IN_PAST = "The `from` date must not be in the past."

    # Reservation and lifecycle
    DATES_UNAVAILABLE = "The date(s) requested are no longer available."
    STAY_IN_PROGRESS = "Stay is already in progress."
    BOOKING_NOT_FOUND = "Cannot find booking with specified ID."
