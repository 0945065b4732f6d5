from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ..model import WorkedTime


class DurationCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def calculate(self, clock_in: datetime, clock_out: datetime, break_minutes: int = 0) -> WorkedTime:
        raise NotImplementedError
