from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import AuthProvider
from ..core.exceptions import AuthenticationError, ConflictError
from .repository import UserRepository


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    email: str
    name: str
    surname: str

    def to_dict(self) -> dict:
        return {"id": self.user_id, "email": self.email, "name": self.name, "surname": self.surname}


class AuthService:
    """Use cases: register a credentials account, authenticate (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, *, email: str, password: str, name: str = "", surname: str = "") -> SessionUser:
        email = require_email(email)
        require_non_empty(password, "Şifre")
        require_min_length(password, "Şifre", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            raise ConflictError("Bu e-posta adresi zaten kullanılıyor")

        name = (name or "").strip()
        surname = (surname or "").strip()
        user_id = self._users.create_user(
            email=email,
            password_hash=generate_password_hash(password),
            name=name,
            surname=surname,
            provider=AuthProvider.CREDENTIALS,
        )
        return SessionUser(user_id=user_id, email=email, name=name, surname=surname)

    def authenticate(self, email: str, password: str) -> SessionUser:
        if not email or not password:
            raise AuthenticationError("E-posta ve şifre zorunludur")

        user = self._users.get_by_email(email.strip().lower())
        if not user or not user.password_hash:
            # Externally authenticated identities have no password to check.
            raise AuthenticationError("E-posta veya şifre hatalı")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("E-posta veya şifre hatalı")

        return SessionUser(user_id=user.user_id, email=user.email, name=user.name, surname=user.surname)

    def get_session_user(self, user_id: int) -> SessionUser:
        user = self._users.get_by_id(user_id)
        if not user:
            raise AuthenticationError("Oturum açmanız gerekiyor")
        return SessionUser(user_id=user.user_id, email=user.email, name=user.name, surname=user.surname)
