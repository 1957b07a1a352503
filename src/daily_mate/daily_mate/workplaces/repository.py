from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Workplace


class WorkplaceRepository(Protocol):
    def get_for_user(self, *, user_id: int, workplace_id: int) -> Optional[Workplace]:
        """Return the workplace only when it belongs to ``user_id``."""

        raise NotImplementedError

    def list_for_user(self, *, user_id: int, active_only: bool = False) -> Sequence[Workplace]:
        """Active first (when listing all), then newest first."""

        raise NotImplementedError

    def create(self, *, user_id: int, name: str, daily_wage: float, color: str) -> int:
        raise NotImplementedError

    def update(self, *, workplace_id: int, name: str, daily_wage: float, color: str) -> None:
        raise NotImplementedError

    def set_active(self, *, workplace_id: int, is_active: bool) -> bool:
        raise NotImplementedError

    def delete_with_workdays(self, *, workplace_id: int) -> int:
        """Delete the workplace and its work days in one transaction.

        Returns the number of work days removed.
        """

        raise NotImplementedError

    def backfill_active_flags(self, *, user_id: int) -> int:
        """Set is_active on legacy rows that have none; returns modified count."""

        raise NotImplementedError
