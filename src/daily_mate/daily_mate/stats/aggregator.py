"""Monthly earnings aggregation.

Pure function over already fetched, already month-filtered work days; it
never filters by date itself and never raises on empty input.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from ..common.datetime_utils import day_number, month_name
from ..core.constants import DAY_NAMES
from ..workdays.model import WorkDayView, WorkplaceRef
from .model import (
    Period,
    StatsReport,
    Summary,
    WeekdayTotal,
    WorkplaceBreakdown,
    WorkplaceInsight,
)


@dataclass
class _WorkplaceTotals:
    workplace: WorkplaceRef
    days: int = 0
    earnings: float = 0

    def insight(self) -> WorkplaceInsight:
        return WorkplaceInsight(
            workplace_id=self.workplace.workplace_id,
            name=self.workplace.name,
            color=self.workplace.color,
            days=self.days,
            earnings=self.earnings,
        )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _first_max(buckets: Iterable[_WorkplaceTotals], key) -> Optional[_WorkplaceTotals]:
    # Strict '>' keeps the first encountered bucket on ties.
    best = None
    for b in buckets:
        if best is None or key(b) > key(best):
            best = b
    return best


def compute_monthly_stats(workdays: Iterable[WorkDayView], month: int, year: int) -> StatsReport:
    totals: dict[int, _WorkplaceTotals] = {}
    weekdays: dict[int, list] = {}
    total_earnings: float = 0
    total_days = 0

    for wd in workdays:
        wage = wd.wage_on_that_day
        total_earnings += wage
        total_days += 1

        bucket = totals.get(wd.workplace.workplace_id)
        if bucket is None:
            bucket = _WorkplaceTotals(workplace=wd.workplace)
            totals[wd.workplace.workplace_id] = bucket
        bucket.days += 1
        bucket.earnings += wage

        slot = weekdays.setdefault(day_number(wd.work_date), [0, 0])
        slot[0] += 1
        slot[1] += wage

    buckets = list(totals.values())
    most_worked = _first_max(buckets, key=lambda b: b.days)
    highest_earning = _first_max(buckets, key=lambda b: b.earnings)

    breakdown = [
        WorkplaceBreakdown(
            workplace_id=b.workplace.workplace_id,
            name=b.workplace.name,
            color=b.workplace.color,
            default_wage=b.workplace.daily_wage,
            total_days=b.days,
            total_earnings=b.earnings,
            average_wage=b.earnings / b.days,
            percentage=_round_half_up(b.earnings / total_earnings * 100) if total_earnings > 0 else 0,
        )
        # sorted() is stable, equal earnings keep encounter order
        for b in sorted(buckets, key=lambda b: b.earnings, reverse=True)
    ]

    weekly = [
        WeekdayTotal(day_number=n, day_name=DAY_NAMES[n], count=count, total_earnings=earnings)
        for n, (count, earnings) in sorted(weekdays.items())
    ]

    return StatsReport(
        period=Period(month=month, year=year, month_name=month_name(month)),
        summary=Summary(
            total_earnings=total_earnings,
            total_work_days=total_days,
            average_daily_earning=total_earnings / total_days if total_days else 0,
            workplace_count=len(buckets),
        ),
        most_worked_workplace=most_worked.insight() if most_worked else None,
        highest_earning_workplace=highest_earning.insight() if highest_earning else None,
        workplace_breakdown=breakdown,
        weekly_distribution=weekly,
    )
