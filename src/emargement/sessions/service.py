from __future__ import annotations

import logging
from typing import Sequence

from ..auth.tokens import Identity
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import NotFoundError
from .model import TrainingSession
from .repository import SessionRepository

logger = logging.getLogger(__name__)

SESSION_NOT_FOUND = "Session not found"


class SessionService:
    """Use cases: manage training sessions.

    Any trainer may update or delete any session; there is no ownership check.
    """

    def __init__(self, sessions: SessionRepository):
        self._sessions = sessions

    def create(self, identity: Identity, *, title: str, date: str) -> int:
        identity.require(Role.TRAINER)
        title = require_non_empty(title, "title")
        date = require_non_empty(date, "date")
        return self._sessions.create(title=title, date=date, trainer_id=identity.user_id)

    def list_all(self) -> Sequence[TrainingSession]:
        sessions = self._sessions.list_all()
        # An empty table is reported as 404, unlike the attendance listing.
        if not sessions:
            raise NotFoundError(SESSION_NOT_FOUND)
        return sessions

    def get(self, session_id: int) -> TrainingSession:
        session = self._sessions.get_by_id(session_id)
        if session is None:
            raise NotFoundError(SESSION_NOT_FOUND)
        return session

    def update(self, identity: Identity, session_id: int, *, title: str, date: str) -> None:
        identity.require(Role.TRAINER)
        title = require_non_empty(title, "title")
        date = require_non_empty(date, "date")
        if not self._sessions.update(session_id=session_id, title=title, date=date):
            logger.debug("Update of session %d matched no row", session_id)

    def delete(self, identity: Identity, session_id: int) -> None:
        identity.require(Role.TRAINER)
        if not self._sessions.delete(session_id=session_id):
            logger.debug("Delete of session %d matched no row", session_id)
