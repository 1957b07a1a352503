from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} zorunludur")
    return str(value).strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} en az {min_len} karakter olmalıdır")
    return value


def require_email(value: Optional[str]) -> str:
    email = require_non_empty(value, "E-posta").lower()
    if not _EMAIL_RE.match(email):
        raise ValidationError("Geçerli bir e-posta adresi giriniz")
    return email


def require_wage(value: Any, field_name: str = "Yevmiye") -> float:
    """Coerce a wage to float and reject negatives."""
    if value is None or value == "":
        raise ValidationError(f"{field_name} zorunludur")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} sayı olmalıdır")
    try:
        wage = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} sayı olmalıdır")
    if wage != wage or wage in (float("inf"), float("-inf")):
        raise ValidationError(f"{field_name} sayı olmalıdır")
    if wage < 0:
        raise ValidationError("Yevmiye 0'dan küçük olamaz")
    return wage


def require_month(month: Any, year: Any) -> tuple[int, int]:
    try:
        m = int(month)
        y = int(year)
    except (TypeError, ValueError):
        raise ValidationError("Geçerli bir ay ve yıl giriniz")
    if not 1 <= m <= 12 or not 1 <= y <= 9999:
        raise ValidationError("Geçerli bir ay ve yıl giriniz")
    return m, y
