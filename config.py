from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Service settings
    service_name: str = "stay-booking-api"
    service_version: str = "0.1.0"
    log_level: str = "INFO"

    # Reference time zone for "today"
    timezone: str = "UTC"

    # Booking rules
    booking_max_nights: int = 3
    booking_min_days_in_advance: int = 1
    booking_max_months_in_advance: int = 1
    availability_default_months: int = 1

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
