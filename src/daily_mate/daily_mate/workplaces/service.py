from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.validators import require_non_empty, require_wage
from ..core.constants import DEFAULT_WORKPLACE_COLOR
from ..core.exceptions import NotFoundError, ValidationError
from .model import Workplace
from .repository import WorkplaceRepository


class WorkplaceService:
    """Use cases: manage a user's workplaces."""

    def __init__(self, workplaces: WorkplaceRepository):
        self._workplaces = workplaces

    def get_owned(self, *, user_id: int, workplace_id: Any) -> Workplace:
        try:
            wid = int(workplace_id)
        except (TypeError, ValueError):
            raise NotFoundError("İş yeri bulunamadı")
        workplace = self._workplaces.get_for_user(user_id=int(user_id), workplace_id=wid)
        if not workplace:
            raise NotFoundError("İş yeri bulunamadı")
        return workplace

    def list_active(self, *, user_id: int) -> Sequence[Workplace]:
        return self._workplaces.list_for_user(user_id=int(user_id), active_only=True)

    def list_all(self, *, user_id: int) -> Sequence[Workplace]:
        return self._workplaces.list_for_user(user_id=int(user_id), active_only=False)

    def create(self, *, user_id: int, name: Optional[str], daily_wage: Any, color: Optional[str] = None) -> Workplace:
        name, wage = self._validate(name, daily_wage)
        color = (color or "").strip() or DEFAULT_WORKPLACE_COLOR

        workplace_id = self._workplaces.create(user_id=int(user_id), name=name, daily_wage=wage, color=color)
        return self.get_owned(user_id=user_id, workplace_id=workplace_id)

    def update(
        self,
        *,
        user_id: int,
        workplace_id: Any,
        name: Optional[str],
        daily_wage: Any,
        color: Optional[str] = None,
    ) -> Workplace:
        name, wage = self._validate(name, daily_wage)
        current = self.get_owned(user_id=user_id, workplace_id=workplace_id)
        color = (color or "").strip() or current.color

        self._workplaces.update(workplace_id=current.workplace_id, name=name, daily_wage=wage, color=color)
        return self.get_owned(user_id=user_id, workplace_id=current.workplace_id)

    def toggle_active(self, *, user_id: int, workplace_id: Any) -> Workplace:
        current = self.get_owned(user_id=user_id, workplace_id=workplace_id)
        self._workplaces.set_active(workplace_id=current.workplace_id, is_active=not current.is_active)
        return self.get_owned(user_id=user_id, workplace_id=current.workplace_id)

    def delete(self, *, user_id: int, workplace_id: Any) -> int:
        """Delete a workplace together with all of its work days."""
        current = self.get_owned(user_id=user_id, workplace_id=workplace_id)
        return self._workplaces.delete_with_workdays(workplace_id=current.workplace_id)

    def backfill_active_flags(self, *, user_id: int) -> int:
        return self._workplaces.backfill_active_flags(user_id=int(user_id))

    @staticmethod
    def _validate(name: Optional[str], daily_wage: Any) -> tuple[str, float]:
        if not name or not str(name).strip() or daily_wage is None or daily_wage == "":
            raise ValidationError("İş yeri adı ve günlük yevmiye zorunludur")
        return require_non_empty(name, "İş yeri adı"), require_wage(daily_wage, "Günlük yevmiye")
