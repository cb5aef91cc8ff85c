from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash


class PasswordHasher:
    """Salted one-way hashing.

    ``method`` is a werkzeug method string and carries the cost factor,
    e.g. ``scrypt:32768:8:1`` or ``pbkdf2:sha256:600000``.
    """

    def __init__(self, method: str = "scrypt"):
        self._method = method

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method)

    def verify(self, password_hash: str, password: str) -> bool:
        try:
            return check_password_hash(password_hash, password)
        except (ValueError, TypeError):
            # Placeholder or corrupted hashes never match.
            return False
