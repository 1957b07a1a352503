from __future__ import annotations

import pytest

from src.daily_mate.daily_mate.core.enums import AuthProvider
from src.daily_mate.daily_mate.core.exceptions import AuthenticationError, ConflictError, ValidationError


@pytest.fixture
def svc(container):
    return container.auth_service


def test_register_normalizes_email_and_hashes_password(svc, users_repo):
    s_user = svc.register(email="  Ayse@Example.COM ", password="secret1", name="Ayşe", surname="Yılmaz")

    stored = users_repo.get_by_id(s_user.user_id)
    assert stored.email == "ayse@example.com"
    assert stored.password_hash != "secret1"
    assert stored.provider == AuthProvider.CREDENTIALS


def test_duplicate_email_is_case_insensitive(svc):
    svc.register(email="ali@example.com", password="secret1")

    with pytest.raises(ConflictError):
        svc.register(email="ALI@example.com", password="another1")


@pytest.mark.parametrize(
    "email,password",
    [("", "secret1"), ("not-an-email", "secret1"), ("a@b", "secret1"), ("ali@example.com", "12345"), ("ali@example.com", "")],
)
def test_register_validation(svc, email, password):
    with pytest.raises(ValidationError):
        svc.register(email=email, password=password)


def test_authenticate(svc):
    svc.register(email="ali@example.com", password="secret1", name="Ali")

    assert svc.authenticate("ALI@example.com", "secret1").name == "Ali"
    with pytest.raises(AuthenticationError):
        svc.authenticate("ali@example.com", "wrong-pass")
    with pytest.raises(AuthenticationError):
        svc.authenticate("nobody@example.com", "secret1")


def test_identity_without_password_cannot_use_credentials(svc, users_repo):
    users_repo.create_user(
        email="g@example.com", password_hash=None, name="G", surname="", provider=AuthProvider.GOOGLE
    )

    with pytest.raises(AuthenticationError):
        svc.authenticate("g@example.com", "anything")
