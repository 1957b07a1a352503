from __future__ import annotations

from enum import Enum


class AuthProvider(str, Enum):
    """Where a user's identity is verified."""

    CREDENTIALS = "credentials"
    GOOGLE = "google"
