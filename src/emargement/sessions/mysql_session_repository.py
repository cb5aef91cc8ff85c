from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import TrainingSession
from .repository import SessionRepository


def _to_session(row: dict) -> TrainingSession:
    value = row["date"]
    # sessions.date is a DATE column; older databases may still hold DATETIME.
    if isinstance(value, datetime):
        value = value.date()
    return TrainingSession(
        session_id=int(row["id"]),
        title=row["title"],
        date=value,
        trainer_id=int(row["formateur_id"]),
    )


class MySQLSessionRepository(SessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[TrainingSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, title, date, formateur_id FROM sessions ORDER BY id")
            return [_to_session(r) for r in fetchall(cur)]

    def get_by_id(self, session_id: int) -> Optional[TrainingSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, title, date, formateur_id FROM sessions WHERE id=%s", (int(session_id),))
            row = fetchone(cur)
            return _to_session(row) if row else None

    def create(self, *, title: str, date: str, trainer_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO sessions (title, date, formateur_id) VALUES (%s, %s, %s)",
                (title, date, int(trainer_id)),
            )
            return int(cur.lastrowid)

    def update(self, *, session_id: int, title: str, date: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE sessions SET title=%s, date=%s WHERE id=%s",
                (title, date, int(session_id)),
            )
            return cur.rowcount > 0

    def delete(self, *, session_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM sessions WHERE id=%s", (int(session_id),))
            return cur.rowcount > 0
