"""Marathon planning: the most shows one person can see back to back in a day."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal

from cineplan.models.show import Show

logger = logging.getLogger(__name__)


def plan_marathon(day: date, all_shows: Iterable[Show]) -> list[Show]:
    """
    Pick the largest set of non-overlapping shows starting on ``day``.

    Earliest-finish-time greedy interval scheduling: shows are sorted by end
    time (ties by start time) and accepted whenever they start at or after
    the end of the last accepted show. A show starting exactly when the
    previous one ends is compatible.

    Only the count of shows is maximised; among equally large plans the one
    produced by this ordering is returned.

    Args:
        day: Calendar day, compared against each show's naive start date
        all_shows: Every show known to the caller, on any day

    Returns:
        Accepted shows in ascending end (and therefore start) order

    Raises:
        TypeError: If all_shows is None
    """
    if all_shows is None:
        raise TypeError("all_shows must not be None")

    day_shows = sorted(
        (show for show in all_shows if show.start.date() == day),
        key=lambda show: (show.end, show.start),
    )

    plan: list[Show] = []
    current_end = datetime.min

    for show in day_shows:
        if show.start >= current_end:
            plan.append(show)
            current_end = show.end

    logger.info(f"Marathon for {day}: {len(plan)} of {len(day_shows)} show(s) selected")
    return plan


@dataclass
class MarathonStop:
    """One show in a marathon plus the break before the next one."""

    show: Show
    break_after: timedelta | None = None  # None for the last show


@dataclass
class MarathonSummary:
    """Totals for a marathon plan."""

    day: date
    stops: list[MarathonStop] = field(default_factory=list)
    total_time: timedelta = timedelta(0)
    total_cost: Decimal = Decimal("0")

    @property
    def movie_count(self) -> int:
        return len(self.stops)

    @property
    def average_price(self) -> Decimal | None:
        if not self.stops:
            return None
        return self.total_cost / len(self.stops)


class MarathonPlanner:
    """Plans a day's marathon and summarises the result."""

    def plan(self, day: date, shows: Iterable[Show]) -> list[Show]:
        return plan_marathon(day, shows)

    def summarize(self, day: date, plan: list[Show]) -> MarathonSummary:
        """
        Build the report for a plan.

        Total time is the sum of movie durations (breaks excluded).

        Args:
            day: Day the plan was made for
            plan: Output of ``plan``

        Returns:
            MarathonSummary with one stop per show
        """
        summary = MarathonSummary(day=day)
        for i, show in enumerate(plan):
            break_after = plan[i + 1].start - show.end if i < len(plan) - 1 else None
            summary.stops.append(MarathonStop(show=show, break_after=break_after))
            summary.total_time += show.movie.duration
            summary.total_cost += show.price
        return summary
