from __future__ import annotations

import logging

from ..auth.passwords import PasswordHasher
from ..auth.tokens import TokenIssuer
from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import PASSWORD_MIN_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError, ValidationError
from .repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """Use cases: signup and login."""

    def __init__(self, users: UserRepository, hasher: PasswordHasher, tokens: TokenIssuer):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    def signup(self, *, name: str, email: str, password: str, role: str) -> int:
        name = require_non_empty(name, "name")
        email = require_email(email, "email")
        require_min_length(password, "password", PASSWORD_MIN_LENGTH)
        try:
            parsed_role = Role.parse(role)
        except ValueError as exc:
            raise ValidationError("role must be one of: formateur, etudiant") from exc

        if self._users.get_by_email(email):
            raise ConflictError("Email already registered")

        user_id = self._users.create_user(
            name=name,
            email=email,
            password_hash=self._hasher.hash(password),
            role=parsed_role,
        )
        logger.info("Registered user %d (%s)", user_id, parsed_role.value)
        return user_id

    def login(self, *, email: str, password: str) -> str:
        # Unknown email and wrong password must look the same to the caller.
        user = self._users.get_by_email(email) if isinstance(email, str) and email else None
        if not user or not isinstance(password, str) or not self._hasher.verify(user.password_hash, password):
            logger.info("Rejected login")
            raise AuthenticationError(INVALID_CREDENTIALS)

        return self._tokens.issue(user_id=user.user_id, role=user.role)
