"""Resolution of METAR day/time groups into calendar datetimes."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

UTC_DATE_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
UTC_TIME_FORMAT = "%H:%M:%SZ"


def format_time(t: time) -> str:
    return t.strftime(UTC_TIME_FORMAT)


@dataclass(frozen=True)
class MetarTime:
    """
    Observation time of a report.

    Either a full UTC datetime (when resolved against an anchor) or just
    the day of month and time of day as transmitted.
    """

    day: int
    time: time
    date_time: Optional[datetime] = None

    @property
    def is_resolved(self) -> bool:
        return self.date_time is not None

    def to_dict(self) -> dict:
        if self.date_time is not None:
            return {
                'value_type': 'date_time',
                'value': self.date_time.strftime(UTC_DATE_TIME_FORMAT),
            }
        return {
            'value_type': 'day_time',
            'value': [self.day, format_time(self.time)],
        }


class DateTimeResolver:
    """
    Turn the DDHHMM part of a report header into a MetarTime.

    A report only carries its day of month, so the month and year come from
    an anchor: a date known to be close to the one the report was issued on.
    The resolved date is the one, among the anchor's month and the months
    just before and after it, closest to the anchor.

    Example:
        DateTimeResolver.resolve(1, 6, 0, anchor=date(2023, 5, 31))
        # -> 2023-06-01T06:00:00Z
    """

    @classmethod
    def resolve(
        cls,
        day: int,
        hour: int,
        minute: int,
        anchor: Optional[Union[date, datetime]] = None,
    ) -> Optional[MetarTime]:
        """
        Resolve day and time of day, optionally against an anchor.

        Args:
            day: Day of month
            hour: Hour (0-23)
            minute: Minute (0-59)
            anchor: Date or datetime close to the issue time; a date is
                taken as midnight

        Returns:
            MetarTime, or None when the values are not a valid day/time
        """
        if not 1 <= day <= 31:
            logger.warning("Invalid observation day %d", day)
            return None

        try:
            time_of_day = time(hour, minute)
        except ValueError:
            logger.warning("Invalid observation time %02d:%02d", hour, minute)
            return None

        if anchor is None:
            return MetarTime(day=day, time=time_of_day)

        anchor_time = cls._as_datetime(anchor)
        date_time = cls._closest_date_time(day, time_of_day, anchor_time)
        if date_time is None:
            logger.warning("No month around %s has day %d", anchor_time.date(), day)
            return None

        return MetarTime(day=day, time=time_of_day, date_time=date_time)

    @classmethod
    def resolve_time(cls, hour: int, minute: int) -> Optional[time]:
        """
        Resolve an hhmm group from a TREND (FM, TL, AT).

        24:00 is accepted as the end of the day and mapped to midnight.
        """
        if hour == 24 and minute == 0:
            return time(0, 0)
        try:
            return time(hour, minute)
        except ValueError:
            logger.warning("Invalid trend time %02d:%02d", hour, minute)
            return None

    @staticmethod
    def _as_datetime(anchor: Union[date, datetime]) -> datetime:
        if isinstance(anchor, datetime):
            return anchor.replace(tzinfo=None)
        return datetime(anchor.year, anchor.month, anchor.day)

    @staticmethod
    def _closest_date_time(day: int, time_of_day: time, anchor: datetime) -> Optional[datetime]:
        candidates = []
        for months in (-1, 0, 1):
            month_start = anchor.replace(day=1) + relativedelta(months=months)
            try:
                candidates.append(datetime.combine(month_start.replace(day=day).date(), time_of_day))
            except ValueError:
                # month too short for this day
                continue

        if not candidates:
            return None

        # candidates are chronological, min() keeps the earliest on ties
        return min(candidates, key=lambda c: abs((c - anchor).total_seconds()))
