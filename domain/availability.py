"""Availability calculation over a snapshot of bookings"""
from datetime import date, timedelta
from typing import Iterable, List, Set

from domain.entities import Booking


def occupied_days(bookings: Iterable[Booking]) -> Set[date]:
    """Union of the occupied days of every booking"""
    days: Set[date] = set()
    for booking in bookings:
        days.update(booking.occupied_dates())
    return days


def compute_availability(start: date, end: date, bookings: Iterable[Booking]) -> List[date]:
    """Free days in [start, end), ascending.

    ``bookings`` must include every booking that overlaps the window;
    extra bookings outside it are harmless.
    """
    taken = occupied_days(bookings)
    free = []
    day = start
    while day < end:
        if day not in taken:
            free.append(day)
        day += timedelta(days=1)
    return free
