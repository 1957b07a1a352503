from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import month_name, month_range, today_local
from ..common.validators import require_month
from ..core.exceptions import ValidationError
from ..workdays.repository import WorkDayRepository
from .projector import build_month_grid, grid_fits, index_by_date


class CalendarService:
    def __init__(self, workdays: WorkDayRepository):
        self._workdays = workdays

    def month_view(
        self,
        *,
        user_id: int,
        year: Any = None,
        month: Any = None,
        today: Optional[date] = None,
    ) -> dict:
        today = today or today_local()
        month, year = require_month(
            month if month not in (None, "") else today.month,
            year if year not in (None, "") else today.year,
        )

        if not grid_fits(year, month):
            raise ValidationError("Bu ay için takvim gösterilemiyor")

        start, end = month_range(year, month)
        rows = self._workdays.list_views(user_id=int(user_id), start=start, end=end)
        cells = build_month_grid(year, month, index_by_date(rows), today)
        return {
            "year": year,
            "month": month,
            "monthName": month_name(month),
            "today": today.isoformat(),
            "cells": [c.to_dict() for c in cells],
        }
