"""Month grid projection.

Weekday convention: 0=Sunday ... 6=Saturday. The grid always starts on a
Sunday and holds exactly 42 cells (6 rows of 7 days); leading and trailing
cells come from the neighbouring months and are never clickable.

Input is assumed valid (1 <= month <= 12 and `grid_fits`); the request
layer validates it. Only January of year 1 and December of year 9999 fail
`grid_fits`, their padding would fall outside `datetime.date`.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import days_in_month, normalize_day
from ..core.constants import CALENDAR_GRID_CELLS
from ..workdays.model import WorkDayView
from .policy import is_open_for_entry


@dataclass(frozen=True)
class CalendarCell:
    day: date
    is_current_month: bool
    is_today: bool
    has_work: bool
    work_day: Optional[WorkDayView] = None
    is_open: bool = False

    @property
    def can_add(self) -> bool:
        return self.is_current_month and self.is_open and not self.has_work

    @property
    def can_edit(self) -> bool:
        return self.is_current_month and self.is_open and self.has_work

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "isCurrentMonth": self.is_current_month,
            "isToday": self.is_today,
            "hasWork": self.has_work,
            "workDay": self.work_day.to_dict() if self.work_day else None,
            "canAdd": self.can_add,
            "canEdit": self.can_edit,
        }


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st of the month, 0=Sunday."""
    return (date(year, month, 1).weekday() + 1) % 7


def grid_fits(year: int, month: int) -> bool:
    """True when every padding cell of the month's grid is a representable date."""
    first = date(year, month, 1)
    leading = first_weekday(year, month)
    trailing = CALENDAR_GRID_CELLS - leading - 1
    return (first - date.min).days >= leading and (date.max - first).days >= trailing


def index_by_date(workdays: Iterable[WorkDayView]) -> dict[date, WorkDayView]:
    return {wd.work_date: wd for wd in workdays}


def _padding_cell(day: date) -> CalendarCell:
    return CalendarCell(day=day, is_current_month=False, is_today=False, has_work=False, work_day=None)


def build_month_grid(
    year: int,
    month: int,
    workdays_by_date: Mapping[date, WorkDayView],
    today: date | datetime,
) -> list[CalendarCell]:
    today = normalize_day(today)
    first = date(year, month, 1)
    leading = first_weekday(year, month)

    cells = [_padding_cell(first - timedelta(days=leading - i)) for i in range(leading)]

    for n in range(days_in_month(year, month)):
        day = first + timedelta(days=n)
        work_day = workdays_by_date.get(day)
        cells.append(
            CalendarCell(
                day=day,
                is_current_month=True,
                is_today=day == today,
                has_work=work_day is not None,
                work_day=work_day,
                is_open=is_open_for_entry(day, today),
            )
        )

    next_day = cells[-1].day + timedelta(days=1)
    while len(cells) < CALENDAR_GRID_CELLS:
        cells.append(_padding_cell(next_day))
        next_day += timedelta(days=1)

    return cells
