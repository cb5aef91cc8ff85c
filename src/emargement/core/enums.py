from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for route authorization.

    Values are what the ``users.role`` column stores.
    """

    TRAINER = "formateur"
    STUDENT = "etudiant"

    @classmethod
    def parse(cls, value: str) -> "Role":
        """Accept either the stored value or the English name (``trainer``)."""
        normalized = (value or "").strip().lower()
        for role in cls:
            if normalized in (role.value, role.name.lower()):
                return role
        raise ValueError(f"Unknown role: {value!r}")
