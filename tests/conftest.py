from __future__ import annotations

import os
from datetime import date, datetime
from typing import Optional

import pytest

os.environ.setdefault("APP_ENV", "testing")

from src.daily_mate.daily_mate.container import assemble
from src.daily_mate.daily_mate.core.enums import AuthProvider
from src.daily_mate.daily_mate.core.exceptions import ConflictError
from src.daily_mate.daily_mate.database.mysql_base import to_active_flag
from src.daily_mate.daily_mate.main import create_app
from src.daily_mate.daily_mate.users.model import User
from src.daily_mate.daily_mate.workdays.model import WorkDay, WorkDayView, WorkplaceRef
from src.daily_mate.daily_mate.workplaces.model import Workplace


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._id = 0

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        email = email.strip().lower()
        return next((u for u in self._by_id.values() if u.email == email), None)

    def create_user(self, *, email, password_hash, name, surname, provider=AuthProvider.CREDENTIALS) -> int:
        if self.get_by_email(email):
            raise ConflictError("Bu e-posta adresi zaten kullanılıyor")
        self._id += 1
        self._by_id[self._id] = User(
            user_id=self._id,
            email=email.strip().lower(),
            password_hash=password_hash,
            name=name,
            surname=surname,
            provider=provider,
        )
        return self._id


class InMemoryWorkplaces:
    def __init__(self):
        self.rows: dict[int, Workplace] = {}
        self.workdays: Optional["InMemoryWorkDays"] = None
        # ids whose stored is_active is NULL (legacy rows)
        self.null_flags: set[int] = set()
        self._id = 0

    def add(self, *, user_id: int, name: str, daily_wage: float, color: str = "#3B82F6", is_active: Optional[bool] = True) -> Workplace:
        self._id += 1
        if is_active is None:
            self.null_flags.add(self._id)
        wp = Workplace(
            workplace_id=self._id,
            user_id=user_id,
            name=name,
            daily_wage=daily_wage,
            color=color,
            is_active=to_active_flag(is_active),
            created_at=datetime(2024, 1, 1, 0, 0, self._id),
        )
        self.rows[self._id] = wp
        return wp

    def get_for_user(self, *, user_id: int, workplace_id: int) -> Optional[Workplace]:
        wp = self.rows.get(int(workplace_id))
        return wp if wp and wp.user_id == int(user_id) else None

    def list_for_user(self, *, user_id: int, active_only: bool = False):
        items = [w for w in self.rows.values() if w.user_id == int(user_id)]
        if active_only:
            items = [w for w in items if w.is_active]
        items.sort(key=lambda w: w.created_at, reverse=True)
        if not active_only:
            items.sort(key=lambda w: w.is_active, reverse=True)
        return items

    def create(self, *, user_id: int, name: str, daily_wage: float, color: str) -> int:
        return self.add(user_id=user_id, name=name, daily_wage=daily_wage, color=color).workplace_id

    def update(self, *, workplace_id: int, name: str, daily_wage: float, color: str) -> None:
        wp = self.rows[int(workplace_id)]
        self.rows[wp.workplace_id] = Workplace(
            workplace_id=wp.workplace_id,
            user_id=wp.user_id,
            name=name,
            daily_wage=daily_wage,
            color=color,
            is_active=wp.is_active,
            created_at=wp.created_at,
        )

    def set_active(self, *, workplace_id: int, is_active: bool) -> bool:
        wp = self.rows[int(workplace_id)]
        self.null_flags.discard(wp.workplace_id)
        self.rows[wp.workplace_id] = Workplace(
            workplace_id=wp.workplace_id,
            user_id=wp.user_id,
            name=wp.name,
            daily_wage=wp.daily_wage,
            color=wp.color,
            is_active=is_active,
            created_at=wp.created_at,
        )
        return True

    def delete_with_workdays(self, *, workplace_id: int) -> int:
        removed = 0
        if self.workdays is not None:
            removed = self.workdays.delete_for_workplace(int(workplace_id))
        del self.rows[int(workplace_id)]
        self.null_flags.discard(int(workplace_id))
        return removed

    def backfill_active_flags(self, *, user_id: int) -> int:
        owned = {i for i in self.null_flags if self.rows[i].user_id == int(user_id)}
        self.null_flags -= owned
        return len(owned)


class InMemoryWorkDays:
    def __init__(self, workplaces: InMemoryWorkplaces):
        self.rows: dict[int, WorkDay] = {}
        self._workplaces = workplaces
        workplaces.workdays = self
        self._id = 0

    def get_for_user(self, *, user_id: int, work_day_id: int) -> Optional[WorkDay]:
        wd = self.rows.get(int(work_day_id))
        return wd if wd and wd.user_id == int(user_id) else None

    def get_for_user_and_date(self, *, user_id: int, work_date: date) -> Optional[WorkDay]:
        return next((w for w in self.rows.values() if w.user_id == int(user_id) and w.work_date == work_date), None)

    def _view(self, wd: WorkDay) -> WorkDayView:
        wp = self._workplaces.rows[wd.workplace_id]
        return WorkDayView(
            work_day_id=wd.work_day_id,
            work_date=wd.work_date,
            wage_on_that_day=wd.wage_on_that_day,
            workplace=WorkplaceRef(workplace_id=wp.workplace_id, name=wp.name, color=wp.color, daily_wage=wp.daily_wage),
        )

    def list_views(self, *, user_id: int, start=None, end=None):
        items = [
            w
            for w in self.rows.values()
            if w.user_id == int(user_id)
            and (start is None or w.work_date >= start)
            and (end is None or w.work_date <= end)
        ]
        items.sort(key=lambda w: w.work_date, reverse=True)
        return [self._view(w) for w in items]

    def get_view(self, *, user_id: int, work_day_id: int) -> Optional[WorkDayView]:
        wd = self.get_for_user(user_id=user_id, work_day_id=work_day_id)
        return self._view(wd) if wd else None

    def create(self, *, user_id: int, workplace_id: int, work_date: date, wage_on_that_day: float) -> int:
        # Mirrors the (user_id, work_date) unique index.
        if any(w.user_id == int(user_id) and w.work_date == work_date for w in self.rows.values()):
            raise ConflictError("Bu tarih için zaten bir kayıt bulunuyor")
        self._id += 1
        self.rows[self._id] = WorkDay(
            work_day_id=self._id,
            user_id=int(user_id),
            workplace_id=int(workplace_id),
            work_date=work_date,
            wage_on_that_day=wage_on_that_day,
        )
        return self._id

    def update_workplace(self, *, work_day_id: int, workplace_id: int, wage_on_that_day: float) -> None:
        wd = self.rows[int(work_day_id)]
        self.rows[wd.work_day_id] = WorkDay(
            work_day_id=wd.work_day_id,
            user_id=wd.user_id,
            workplace_id=int(workplace_id),
            work_date=wd.work_date,
            wage_on_that_day=wage_on_that_day,
        )

    def delete(self, *, work_day_id: int) -> bool:
        return self.rows.pop(int(work_day_id), None) is not None

    def delete_for_workplace(self, workplace_id: int) -> int:
        doomed = [k for k, w in self.rows.items() if w.workplace_id == workplace_id]
        for k in doomed:
            del self.rows[k]
        return len(doomed)


@pytest.fixture
def users_repo():
    return InMemoryUsers()


@pytest.fixture
def workplaces_repo():
    return InMemoryWorkplaces()


@pytest.fixture
def workdays_repo(workplaces_repo):
    return InMemoryWorkDays(workplaces_repo)


@pytest.fixture
def container(users_repo, workplaces_repo, workdays_repo):
    return assemble(users_repo=users_repo, workplaces_repo=workplaces_repo, workdays_repo=workdays_repo)


@pytest.fixture
def client(container):
    app = create_app(container)
    return app.test_client()
