from __future__ import annotations

import logging
from functools import wraps
from typing import Callable

from flask import g, request

from ..core.constants import ACCESS_DENIED, BEARER_PREFIX
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, TokenError
from .tokens import Identity, TokenIssuer

logger = logging.getLogger(__name__)


def extract_bearer_token(header: str | None) -> str | None:
    if not header:
        return None
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_PREFIX.lower():
        return None
    return parts[1]


class AccessGuard:
    """Route decorators that check the bearer token and the caller's role.

    The decoded identity lands on ``flask.g.identity``.
    """

    def __init__(self, tokens: TokenIssuer):
        self._tokens = tokens

    def authenticate(self, header: str | None) -> Identity:
        token = extract_bearer_token(header)
        if token is None:
            raise TokenError(ACCESS_DENIED)
        return self._tokens.verify(token)

    def token_required(self, view: Callable) -> Callable:
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                g.identity = self.authenticate(request.headers.get("Authorization"))
            except TokenError as e:
                logger.info("Rejected token on %s %s: %s", request.method, request.path, e)
                return str(e), 403
            return view(*args, **kwargs)

        return wrapper

    def role_required(self, role: Role) -> Callable[[Callable], Callable]:
        def decorator(view: Callable) -> Callable:
            @wraps(view)
            def checked(*args, **kwargs):
                try:
                    g.identity.require(role)
                except AuthorizationError as e:
                    logger.info("Rejected role %s on %s %s", g.identity.role.value, request.method, request.path)
                    return str(e), 403
                return view(*args, **kwargs)

            return self.token_required(checked)

        return decorator
