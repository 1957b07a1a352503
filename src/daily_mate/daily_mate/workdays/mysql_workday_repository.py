from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key, to_number
from .model import WorkDay, WorkDayView, WorkplaceRef
from .repository import WorkDayRepository

_VIEW_SELECT = """
    SELECT
        wd.work_day_id,
        wd.work_date,
        wd.wage_on_that_day,
        w.workplace_id,
        w.name AS workplace_name,
        w.color AS workplace_color,
        w.daily_wage AS workplace_daily_wage
    FROM work_days wd
    JOIN workplaces w ON w.workplace_id = wd.workplace_id
"""


def _to_work_day(row: dict) -> WorkDay:
    return WorkDay(
        work_day_id=int(row["work_day_id"]),
        user_id=int(row["user_id"]),
        workplace_id=int(row["workplace_id"]),
        work_date=row["work_date"],
        wage_on_that_day=to_number(row["wage_on_that_day"]),
    )


def _to_view(row: dict) -> WorkDayView:
    return WorkDayView(
        work_day_id=int(row["work_day_id"]),
        work_date=row["work_date"],
        wage_on_that_day=to_number(row["wage_on_that_day"]),
        workplace=WorkplaceRef(
            workplace_id=int(row["workplace_id"]),
            name=row["workplace_name"],
            color=row["workplace_color"],
            daily_wage=to_number(row["workplace_daily_wage"]),
        ),
    )


class MySQLWorkDayRepository(WorkDayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user(self, *, user_id: int, work_day_id: int) -> Optional[WorkDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT work_day_id, user_id, workplace_id, work_date, wage_on_that_day
                FROM work_days
                WHERE work_day_id=%s AND user_id=%s
                """,
                (int(work_day_id), int(user_id)),
            )
            row = fetchone(cur)
            return _to_work_day(row) if row else None

    def get_for_user_and_date(self, *, user_id: int, work_date: date) -> Optional[WorkDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT work_day_id, user_id, workplace_id, work_date, wage_on_that_day
                FROM work_days
                WHERE user_id=%s AND work_date=%s
                """,
                (int(user_id), work_date),
            )
            row = fetchone(cur)
            return _to_work_day(row) if row else None

    def list_views(
        self,
        *,
        user_id: int,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[WorkDayView]:
        clauses = ["wd.user_id=%s"]
        params: list[object] = [int(user_id)]
        if start is not None:
            clauses.append("wd.work_date >= %s")
            params.append(start)
        if end is not None:
            clauses.append("wd.work_date <= %s")
            params.append(end)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_VIEW_SELECT} WHERE {where} ORDER BY wd.work_date DESC",
                tuple(params),
            )
            return [_to_view(r) for r in fetchall(cur)]

    def get_view(self, *, user_id: int, work_day_id: int) -> Optional[WorkDayView]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_VIEW_SELECT} WHERE wd.work_day_id=%s AND wd.user_id=%s",
                (int(work_day_id), int(user_id)),
            )
            row = fetchone(cur)
            return _to_view(row) if row else None

    def create(self, *, user_id: int, workplace_id: int, work_date: date, wage_on_that_day: float) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO work_days(user_id, workplace_id, work_date, wage_on_that_day)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (int(user_id), int(workplace_id), work_date, wage_on_that_day),
                )
                return int(cur.lastrowid)
        except Exception as e:
            # uq_work_days_user_date decides concurrent creates for the same day.
            if is_duplicate_key(e):
                raise ConflictError("Bu tarih için zaten bir kayıt bulunuyor") from e
            raise

    def update_workplace(self, *, work_day_id: int, workplace_id: int, wage_on_that_day: float) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE work_days SET workplace_id=%s, wage_on_that_day=%s WHERE work_day_id=%s",
                (int(workplace_id), wage_on_that_day, int(work_day_id)),
            )

    def delete(self, *, work_day_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_days WHERE work_day_id=%s", (int(work_day_id),))
            return cur.rowcount > 0
