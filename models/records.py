"""Domain value types shared by the client and the state store."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict, Optional

MS_PER_HOUR = 3_600_000


class InvalidQueryWindow(ValueError):
    """Raised when a query window cannot describe a valid time range."""


def now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True, slots=True)
class QueryWindow:
    """Inclusive ``[start_time, end_time]`` range in Unix milliseconds."""

    start_time: int
    end_time: int

    def __post_init__(self) -> None:
        if self.start_time < 0 or self.end_time < 0:
            raise InvalidQueryWindow("Window bounds must be non-negative Unix milliseconds.")
        if self.end_time < self.start_time:
            raise InvalidQueryWindow(
                f"Window end {self.end_time} precedes start {self.start_time}."
            )

    @classmethod
    def last_hours(cls, hours: int, now: Optional[int] = None) -> "QueryWindow":
        """Convert a relative "hours back from now" input to the canonical pair."""
        if isinstance(hours, bool) or not isinstance(hours, int) or hours <= 0:
            raise InvalidQueryWindow(f"Hours must be a positive integer, got {hours!r}.")
        end = now_ms() if now is None else now
        return cls(start_time=end - hours * MS_PER_HOUR, end_time=end)

    @property
    def duration_ms(self) -> int:
        return self.end_time - self.start_time

    def to_params(self) -> Dict[str, int]:
        return {"startTime": self.start_time, "endTime": self.end_time}
