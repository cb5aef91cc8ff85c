from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from ..core.constants import ACCESS_DENIED, DEFAULT_TOKEN_EXPIRES_MINUTES
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, TokenError


@dataclass(frozen=True)
class Identity:
    """Decoded bearer token attached to the request."""

    user_id: int
    role: Role

    def require(self, role: Role) -> None:
        """Raise ``AuthorizationError`` unless this identity holds ``role``."""
        if self.role != role:
            raise AuthorizationError(ACCESS_DENIED)


class TokenIssuer:
    """Signs and verifies ``{id, role, exp}`` claim sets."""

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        expires_minutes: int = DEFAULT_TOKEN_EXPIRES_MINUTES,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._expires = timedelta(minutes=int(expires_minutes))

    def issue(self, *, user_id: int, role: Role, now: datetime | None = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {"id": int(user_id), "role": Role(role).value, "exp": now + self._expires}
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Identity:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.InvalidTokenError as exc:
            raise TokenError("Invalid Token") from exc

        try:
            return Identity(user_id=int(payload["id"]), role=Role(payload["role"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise TokenError("Invalid Token") from exc
