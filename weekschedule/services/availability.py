"""
Application service for working with configured schedules.

The service turns configuration into domain schedules and delegates merging
and calendar expansion to the domain layer. This keeps the CLI thin and
lets tests drive the whole flow from an in-memory ``AppConfig``.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import List, Optional, Sequence, Tuple

from ..config import AppConfig
from ..domain.dates import CalendarDate
from ..domain.schedule import Calendar, CalendarMap, Schedule
from ..domain.timeslots import WeekdaySlot, unique_weekday_slots


logger = logging.getLogger(__name__)


class AvailabilityService:
    """
    Builds, merges and expands the schedules of an ``AppConfig``.

    The first configured schedule acts as the parent availability window;
    the ones after it are overrides that can only narrow it.
    """

    def __init__(self, config: AppConfig) -> None:
        self._config = config

    def schedules(self) -> List[Schedule]:
        return [schedule.to_schedule() for schedule in self._config.schedules]

    def find_schedule(self, name: str) -> Schedule:
        """
        Look up a configured schedule by name.

        Raises:
            ValueError: If no schedule has that name
        """
        schedule_config = self._config.find_schedule(name)
        if schedule_config is None:
            raise ValueError(
                f"Unknown schedule: '{name}'. "
                f"Use one of the names from the configuration."
            )
        return schedule_config.to_schedule()

    def merged(self, names: Optional[Sequence[str]] = None) -> Schedule:
        """
        Merge the selected schedules in order, the first being the parent.

        Args:
            names: Schedule names to merge; all schedules when omitted

        Raises:
            ValueError: If there is nothing to merge or a name is unknown
        """
        selected = self._select(names)
        if not selected:
            raise ValueError("No schedules configured.")

        parent, *overrides = selected
        merged = parent.merge(*overrides)
        logger.info(
            "Merged %d schedule(s) into %s with %d time slot(s)",
            len(selected),
            merged.date_range,
            len(merged.time_slots),
        )
        if merged.is_empty():
            logger.warning("Merged schedule is empty: %s", merged)
        return merged

    def default_limit(self, today: Optional[CalendarDate] = None) -> CalendarDate:
        """Last day covered by ``horizon_days`` starting from today."""
        start = today or CalendarDate.today()
        return start.add(days=self._config.horizon_days - 1)

    def calendar(
        self,
        *,
        limit: Optional[CalendarDate] = None,
        merge: bool = False,
        names: Optional[Sequence[str]] = None,
    ) -> CalendarMap:
        """
        Expand schedules into time slots per date.

        Args:
            limit: Last date to expand; defaults to the configured horizon
            merge: Expand the merged schedule instead of each schedule
            names: Restrict to these schedules
        """
        limit = limit or self.default_limit()
        if merge:
            calendar = Calendar((self.merged(names),))
        else:
            calendar = Calendar(tuple(self._select(names)))

        by_date = calendar.by_date(limit)
        logger.debug("Expanded %d schedule(s) up to %s into %d date(s)",
                     len(calendar.schedules), limit, len(by_date))
        return by_date

    def overlapping_slots(self, name: str) -> List[Tuple[WeekdaySlot, WeekdaySlot]]:
        """Pairs of distinct slots in a schedule that overlap each other."""
        schedule = self.find_schedule(name)
        slots = unique_weekday_slots(*schedule.time_slots)
        return [
            (first, second)
            for first, second in combinations(slots, 2)
            if first.overlaps_with(second)
        ]

    def _select(self, names: Optional[Sequence[str]]) -> List[Schedule]:
        if not names:
            return self.schedules()
        return [self.find_schedule(name) for name in names]
