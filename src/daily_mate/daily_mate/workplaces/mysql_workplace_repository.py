from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_active_flag, to_number
from .model import Workplace
from .repository import WorkplaceRepository

_COLUMNS = "workplace_id, user_id, name, daily_wage, color, is_active, created_at"


def _to_workplace(row: dict) -> Workplace:
    return Workplace(
        workplace_id=int(row["workplace_id"]),
        user_id=int(row["user_id"]),
        name=row["name"],
        daily_wage=to_number(row["daily_wage"]),
        color=row["color"],
        is_active=to_active_flag(row.get("is_active")),
        created_at=row.get("created_at"),
    )


class MySQLWorkplaceRepository(WorkplaceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user(self, *, user_id: int, workplace_id: int) -> Optional[Workplace]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM workplaces WHERE workplace_id=%s AND user_id=%s",
                (int(workplace_id), int(user_id)),
            )
            row = fetchone(cur)
            return _to_workplace(row) if row else None

    def list_for_user(self, *, user_id: int, active_only: bool = False) -> Sequence[Workplace]:
        if active_only:
            sql = f"""
                SELECT {_COLUMNS} FROM workplaces
                WHERE user_id=%s AND COALESCE(is_active, 1)=1
                ORDER BY created_at DESC, workplace_id DESC
            """
        else:
            sql = f"""
                SELECT {_COLUMNS} FROM workplaces
                WHERE user_id=%s
                ORDER BY COALESCE(is_active, 1) DESC, created_at DESC, workplace_id DESC
            """
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, (int(user_id),))
            return [_to_workplace(r) for r in fetchall(cur)]

    def create(self, *, user_id: int, name: str, daily_wage: float, color: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO workplaces(user_id, name, daily_wage, color, is_active)
                VALUES(%s,%s,%s,%s,1)
                """,
                (int(user_id), name, daily_wage, color),
            )
            return int(cur.lastrowid)

    def update(self, *, workplace_id: int, name: str, daily_wage: float, color: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE workplaces SET name=%s, daily_wage=%s, color=%s WHERE workplace_id=%s",
                (name, daily_wage, color, int(workplace_id)),
            )

    def set_active(self, *, workplace_id: int, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE workplaces SET is_active=%s WHERE workplace_id=%s",
                (1 if is_active else 0, int(workplace_id)),
            )
            return cur.rowcount > 0

    def delete_with_workdays(self, *, workplace_id: int) -> int:
        # Both statements share one connection, so they commit or roll back together.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_days WHERE workplace_id=%s", (int(workplace_id),))
            removed = int(cur.rowcount)
            cur.execute("DELETE FROM workplaces WHERE workplace_id=%s", (int(workplace_id),))
            return removed

    def backfill_active_flags(self, *, user_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE workplaces SET is_active=1 WHERE user_id=%s AND is_active IS NULL",
                (int(user_id),),
            )
            return int(cur.rowcount)
