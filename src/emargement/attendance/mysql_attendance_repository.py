from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, session_id: int, student_id: int, present: bool) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO emargement (session_id, etudiant_id, status) VALUES (%s, %s, %s)",
                (int(session_id), int(student_id), bool(present)),
            )
            return int(cur.lastrowid)

    def list_for_session(self, session_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, session_id, etudiant_id, status
                FROM emargement
                WHERE session_id=%s
                ORDER BY id
                """,
                (int(session_id),),
            )
            return [
                AttendanceRecord(
                    record_id=int(r["id"]),
                    session_id=int(r["session_id"]),
                    student_id=int(r["etudiant_id"]),
                    present=bool(r["status"]),
                )
                for r in fetchall(cur)
            ]
