from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class WorkDay:
    """Domain entity: the user worked at one workplace on one calendar day.

    ``wage_on_that_day`` is a snapshot taken when the day was logged, not a
    live reference to the workplace's current wage.
    """

    work_day_id: int
    user_id: int
    workplace_id: int
    work_date: date
    wage_on_that_day: float


@dataclass(frozen=True)
class WorkplaceRef:
    """The slice of a workplace the read models need."""

    workplace_id: int
    name: str
    color: str
    daily_wage: float

    def to_dict(self) -> dict:
        return {"id": self.workplace_id, "name": self.name, "color": self.color, "dailyWage": self.daily_wage}


@dataclass(frozen=True)
class WorkDayView:
    """Read-model: a work day joined with its workplace."""

    work_day_id: int
    work_date: date
    wage_on_that_day: float
    workplace: WorkplaceRef

    def to_dict(self) -> dict:
        return {
            "id": self.work_day_id,
            "date": self.work_date.isoformat(),
            "wageOnThatDay": self.wage_on_that_day,
            "workplace": self.workplace.to_dict(),
        }
