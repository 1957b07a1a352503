from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Workplace:
    """Domain entity: a named employer/location with a default daily wage.

    ``is_active`` is always a plain bool here; legacy rows without the flag
    are resolved to active by the repository.
    """

    workplace_id: int
    user_id: int
    name: str
    daily_wage: float
    color: str
    is_active: bool = True
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.workplace_id,
            "name": self.name,
            "dailyWage": self.daily_wage,
            "color": self.color,
            "isActive": self.is_active,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
