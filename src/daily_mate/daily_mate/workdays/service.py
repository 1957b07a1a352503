from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..calendar_grid.policy import is_open_for_entry
from ..common.datetime_utils import month_range, normalize_day, parse_iso_date, today_local
from ..common.validators import require_wage
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..workplaces.model import Workplace
from ..workplaces.service import WorkplaceService
from .model import WorkDayView
from .repository import WorkDayRepository


class WorkDayService:
    """Use cases: log, change and remove the days a user worked."""

    def __init__(self, workdays: WorkDayRepository, workplaces: WorkplaceService):
        self._workdays = workdays
        self._workplaces = workplaces

    def list_range(self, *, user_id: int, start: Optional[date] = None, end: Optional[date] = None) -> Sequence[WorkDayView]:
        if start and end and start > end:
            raise ValidationError("Başlangıç tarihi bitiş tarihinden sonra olamaz")
        return self._workdays.list_views(user_id=int(user_id), start=start, end=end)

    def list_month(self, *, user_id: int, year: int, month: int) -> Sequence[WorkDayView]:
        start, end = month_range(year, month)
        return self._workdays.list_views(user_id=int(user_id), start=start, end=end)

    def current_month(self, *, user_id: int, today: Optional[date] = None) -> dict:
        today = today or today_local()
        views = self.list_month(user_id=user_id, year=today.year, month=today.month)
        return {"workdays": views, "month": today.month, "year": today.year}

    def create(
        self,
        *,
        user_id: int,
        workplace_id: Any,
        work_date: Any,
        wage: Any = None,
        today: Optional[date] = None,
    ) -> WorkDayView:
        if not workplace_id or not work_date:
            raise ValidationError("İş yeri ve tarih zorunludur")

        today = today or today_local()
        workplace = self._workplaces.get_owned(user_id=user_id, workplace_id=workplace_id)
        if not workplace.is_active:
            raise ValidationError("Pasif iş yerine yeni kayıt eklenemez")

        day = self._coerce_day(work_date)
        if not is_open_for_entry(day, today):
            raise ValidationError("Gelecek tarihler için kayıt oluşturamazsınız")

        final_wage = self._resolve_wage(wage, workplace)

        if self._workdays.get_for_user_and_date(user_id=int(user_id), work_date=day):
            raise ConflictError("Bu tarih için zaten bir kayıt bulunuyor")

        work_day_id = self._workdays.create(
            user_id=int(user_id),
            workplace_id=workplace.workplace_id,
            work_date=day,
            wage_on_that_day=final_wage,
        )
        return self._get_view(user_id=user_id, work_day_id=work_day_id)

    def update(
        self,
        *,
        user_id: int,
        work_day_id: int,
        workplace_id: Any,
        wage: Any = None,
        today: Optional[date] = None,
    ) -> WorkDayView:
        if not workplace_id:
            raise ValidationError("İş yeri zorunludur")

        today = today or today_local()
        current = self._workdays.get_for_user(user_id=int(user_id), work_day_id=int(work_day_id))
        if not current:
            raise NotFoundError("Çalışma günü bulunamadı")
        if not is_open_for_entry(current.work_date, today):
            raise ValidationError("Gelecek tarihli kayıtlar düzenlenemez")

        workplace = self._workplaces.get_owned(user_id=user_id, workplace_id=workplace_id)
        if not workplace.is_active and workplace.workplace_id != current.workplace_id:
            raise ValidationError("Pasif iş yerine kayıt taşınamaz")

        final_wage = self._resolve_wage(wage, workplace)
        self._workdays.update_workplace(
            work_day_id=current.work_day_id,
            workplace_id=workplace.workplace_id,
            wage_on_that_day=final_wage,
        )
        return self._get_view(user_id=user_id, work_day_id=current.work_day_id)

    def delete(self, *, user_id: int, work_day_id: int) -> None:
        current = self._workdays.get_for_user(user_id=int(user_id), work_day_id=int(work_day_id))
        if not current:
            raise NotFoundError("Çalışma günü bulunamadı")
        self._workdays.delete(work_day_id=current.work_day_id)

    def _get_view(self, *, user_id: int, work_day_id: int) -> WorkDayView:
        view = self._workdays.get_view(user_id=int(user_id), work_day_id=int(work_day_id))
        if not view:
            raise NotFoundError("Çalışma günü bulunamadı")
        return view

    @staticmethod
    def _coerce_day(value: Any) -> date:
        if isinstance(value, (date, datetime)):
            return normalize_day(value)
        return parse_iso_date(str(value))

    @staticmethod
    def _resolve_wage(wage: Any, workplace: Workplace) -> float:
        # No override: snapshot the workplace's wage as of now.
        if wage is None or wage == "":
            return require_wage(workplace.daily_wage)
        return require_wage(wage)
