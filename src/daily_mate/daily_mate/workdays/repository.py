from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import WorkDay, WorkDayView


class WorkDayRepository(Protocol):
    def get_for_user(self, *, user_id: int, work_day_id: int) -> Optional[WorkDay]:
        raise NotImplementedError

    def get_for_user_and_date(self, *, user_id: int, work_date: date) -> Optional[WorkDay]:
        raise NotImplementedError

    def list_views(
        self,
        *,
        user_id: int,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[WorkDayView]:
        """Work days joined with their workplace, newest date first.

        ``start``/``end`` are inclusive; either may be omitted.
        """

        raise NotImplementedError

    def get_view(self, *, user_id: int, work_day_id: int) -> Optional[WorkDayView]:
        raise NotImplementedError

    def create(self, *, user_id: int, workplace_id: int, work_date: date, wage_on_that_day: float) -> int:
        """Insert a work day.

        Must raise ConflictError when (user_id, work_date) already exists.
        """

        raise NotImplementedError

    def update_workplace(self, *, work_day_id: int, workplace_id: int, wage_on_that_day: float) -> None:
        raise NotImplementedError

    def delete(self, *, work_day_id: int) -> bool:
        raise NotImplementedError
