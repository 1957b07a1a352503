from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AuthProvider


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object, no DB access. Owner of every Workplace and WorkDay.
    """

    user_id: int
    email: str
    password_hash: Optional[str]
    name: str
    surname: str
    provider: AuthProvider = AuthProvider.CREDENTIALS
