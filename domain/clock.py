"""Domain Time Source Interface"""
from abc import ABC, abstractmethod
from datetime import date


class Clock(ABC):
    """Supplies the reference date that booking rules are checked against"""

    @abstractmethod
    def today(self) -> date:
        """Current calendar date in the reference time zone"""
        pass
