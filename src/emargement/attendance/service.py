from __future__ import annotations

from typing import Sequence

from ..auth.tokens import Identity
from ..core.enums import Role
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def mark_attendance(self, identity: Identity, session_id: int, *, present: bool = False) -> int:
        """Record the calling student's attendance.

        Each call inserts a new row; calling twice for the same session leaves two.
        """
        identity.require(Role.STUDENT)
        return self._attendance.create(session_id=session_id, student_id=identity.user_id, present=present)

    def list_for_session(self, identity: Identity, session_id: int) -> Sequence[AttendanceRecord]:
        identity.require(Role.TRAINER)
        return self._attendance.list_for_session(session_id)
