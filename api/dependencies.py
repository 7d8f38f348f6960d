"""API Dependencies - Service wiring"""
from application.services import BookingService
from config import settings
from domain.rules import BookingRules
from infrastructure.clock import SystemClock
from infrastructure.repositories.in_memory_repositories import InMemoryBookingRepository

# Initialize repositories
booking_repo = InMemoryBookingRepository()

booking_rules = BookingRules(
    max_nights=settings.booking_max_nights,
    min_days_in_advance=settings.booking_min_days_in_advance,
    max_months_in_advance=settings.booking_max_months_in_advance,
    availability_default_months=settings.availability_default_months
)

# A single service instance owns the lock that guards the whole inventory
booking_service = BookingService(booking_repo, SystemClock(settings.timezone), rules=booking_rules)


# Dependency injection
def get_booking_service() -> BookingService:
    return booking_service
