from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def create(self, *, session_id: int, student_id: int, present: bool) -> int:
        """Insert a record. Nothing stops a second row for the same pair."""

        raise NotImplementedError

    def list_for_session(self, session_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
