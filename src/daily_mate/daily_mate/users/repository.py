from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import AuthProvider
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        """Lookup is case-insensitive; emails are stored lowercased."""

        raise NotImplementedError

    def create_user(
        self,
        *,
        email: str,
        password_hash: Optional[str],
        name: str,
        surname: str,
        provider: AuthProvider,
    ) -> int:
        raise NotImplementedError
