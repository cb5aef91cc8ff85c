from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for users.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, name: str, email: str, password_hash: str, role: Role) -> int:
        """Insert a user and return its id.

        Raises ``ConflictError`` when the email is already registered.
        """

        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        """Delete a user; the schema cascades to their sessions and attendance rows."""

        raise NotImplementedError
