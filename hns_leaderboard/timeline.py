"""Competition period arithmetic."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from .constants import DEFAULT_TIMEZONE
from .exceptions import InvalidDateError, InvalidDateRangeError

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)

_RFC3339_PATTERN = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})[Tt ](?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?(?P<offset>[Zz]|[+-]\d{2}:\d{2})?"
)


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC3339 timestamp such as ``2024-03-01T00:00:00+01:00``.

    Raises:
        InvalidDateError: If the value is malformed or has no UTC offset
    """
    match = _RFC3339_PATTERN.fullmatch(value.strip())
    if match is None:
        raise InvalidDateError(f"Invalid RFC3339 timestamp: {value!r}")

    # fromisoformat only takes 3 or 6 fractional digits before Python 3.11
    fraction = (match["fraction"] or "")[:6].ljust(6, "0")
    offset = match["offset"] or ""
    if offset in ("Z", "z"):
        offset = "+00:00"
    text = f"{match['date']}T{match['time']}.{fraction}{offset}"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidDateError(f"Invalid RFC3339 timestamp: {value!r}") from exc

    if parsed.tzinfo is None:
        raise InvalidDateError(f"Timestamp has no UTC offset: {value!r}")
    return parsed


def whole_days(delta: timedelta) -> int:
    """Count whole days in ``delta``, truncating toward zero."""
    return int(delta / _ONE_DAY)


@dataclass(frozen=True, slots=True)
class CompetitionPeriod:
    """Start and end of the competition as seen at ``now``."""

    start: datetime
    end: datetime
    now: datetime

    def __post_init__(self) -> None:
        if self.last_day <= 0:
            raise InvalidDateRangeError(
                f"Competition must span at least one day (start {self.start.isoformat()}, "
                f"end {self.end.isoformat()})"
            )

    @classmethod
    def from_strings(
        cls,
        start: str,
        end: str,
        now: Optional[str] = None,
        timezone: str = DEFAULT_TIMEZONE,
    ) -> "CompetitionPeriod":
        """Build a period from RFC3339 strings.

        Args:
            start: Competition start
            end: Competition end
            now: Override for the current time (defaults to the clock)
            timezone: IANA zone the current time is displayed in
        """
        zone = ZoneInfo(timezone)
        current = parse_timestamp(now) if now else datetime.now(zone)
        period = cls(start=parse_timestamp(start), end=parse_timestamp(end), now=current.astimezone(zone))
        logger.debug(
            f"Competition day {period.current_day} of {period.last_day} ({period.percentage}%)"
        )
        return period

    @property
    def current_day(self) -> int:
        """Whole days elapsed since the start."""
        return whole_days(self.now - self.start)

    @property
    def last_day(self) -> int:
        """Whole days between start and end."""
        return whole_days(self.end - self.start)

    @property
    def percentage(self) -> int:
        """Elapsed share of the competition, floored to a whole percent."""
        return math.floor(self.current_day / self.last_day * 100)


__all__ = ["CompetitionPeriod", "parse_timestamp", "whole_days"]
