from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance submission (émargement)."""

    record_id: int
    session_id: int
    student_id: int
    present: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "session_id": self.session_id,
            "etudiant_id": self.student_id,
            "status": self.present,
        }
