from __future__ import annotations

import logging
import random
from typing import Optional, Protocol

from ..core.constants import PIN_MAX, PIN_MIN
from ..core.exceptions import AllocationExhaustedError

logger = logging.getLogger(__name__)


class PinLookup(Protocol):
    def pin_exists(self, pin: str, *, exclude_id: Optional[int] = None) -> bool:
        ...


class PinAllocator:
    """Draws uniformly random 6-digit PINs until one is unused.

    Each attempt is one storage lookup; nothing is locked between attempts.
    ``max_attempts=None`` keeps drawing until a free PIN turns up.
    """

    def __init__(self, pins: PinLookup, *, max_attempts: Optional[int] = None, rng: Optional[random.Random] = None):
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be positive")
        self._pins = pins
        self._max_attempts = max_attempts
        self._rng = rng or random.SystemRandom()

    def allocate(self) -> str:
        attempts = 0
        while self._max_attempts is None or attempts < self._max_attempts:
            attempts += 1
            pin = str(self._rng.randint(PIN_MIN, PIN_MAX))
            if not self._pins.pin_exists(pin):
                if attempts > 1:
                    logger.debug("PIN allocated after %d attempts", attempts)
                return pin

        logger.error("PIN allocation gave up after %d attempts", attempts)
        raise AllocationExhaustedError("Could not allocate a unique PIN. Please try again.")
