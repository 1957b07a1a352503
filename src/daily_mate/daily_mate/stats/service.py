from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import month_range, today_local
from ..common.validators import require_month
from ..workdays.repository import WorkDayRepository
from .aggregator import compute_monthly_stats
from .model import StatsReport


class StatsService:
    def __init__(self, workdays: WorkDayRepository):
        self._workdays = workdays

    def monthly_report(
        self,
        *,
        user_id: int,
        month: Any = None,
        year: Any = None,
        today: Optional[date] = None,
    ) -> StatsReport:
        """Stats for one month; missing month/year default to the current one."""
        today = today or today_local()
        month, year = require_month(
            month if month not in (None, "") else today.month,
            year if year not in (None, "") else today.year,
        )

        start, end = month_range(year, month)
        rows = self._workdays.list_views(user_id=int(user_id), start=start, end=end)
        return compute_monthly_stats(rows, month, year)
