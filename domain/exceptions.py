"""Domain Exceptions"""
from domain.enums import BookingMessage


class BookingValidationError(ValueError):
    """Input or timing breaks a booking rule, or the dates are taken"""

    def __init__(self, message: BookingMessage):
        super().__init__(message.value)
        self.message = message


class BookingNotFoundError(LookupError):
    """No booking exists with the requested ID"""

    def __init__(self, message: BookingMessage = BookingMessage.BOOKING_NOT_FOUND):
        super().__init__(message.value)
        self.message = message
