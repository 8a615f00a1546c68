"""Wall-clock deadlines for sequences of engine calls."""

import time
from typing import Callable

from ..services.exceptions import ContainerTimeoutError


class Deadline:
    """A deadline fixed at construction time."""

    def __init__(self, seconds: float, clock: Callable[[], float] = time.monotonic):
        self.seconds = seconds
        self._clock = clock
        self._expires_at = clock() + seconds

    def remaining(self) -> float:
        """Seconds left, never negative."""
        return max(0.0, self._expires_at - self._clock())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0

    def check(self, operation: str) -> float:
        """Return the remaining time, raising if the deadline has passed.

        Raises:
            ContainerTimeoutError: If the deadline has passed
        """
        if self.expired:
            raise ContainerTimeoutError(
                f"Deadline of {self.seconds}s exceeded before {operation}"
            )
        return self.remaining()
