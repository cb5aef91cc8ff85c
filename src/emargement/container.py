from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.guard import AccessGuard
from .auth.passwords import PasswordHasher
from .auth.tokens import TokenIssuer
from .database.connection import DBConfig, DatabaseConnection
from .sessions.mysql_session_repository import MySQLSessionRepository
from .sessions.repository import SessionRepository
from .sessions.service import SessionService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    """Everything the controllers need, built once at startup."""

    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    sessions_repo: SessionRepository
    attendance_repo: AttendanceRepository

    tokens: TokenIssuer
    guard: AccessGuard

    auth_service: AuthService
    session_service: SessionService
    attendance_service: AttendanceService


def wire(
    *,
    users_repo: UserRepository,
    sessions_repo: SessionRepository,
    attendance_repo: AttendanceRepository,
    tokens: TokenIssuer,
    hasher: PasswordHasher,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        conn=conn,
        users_repo=users_repo,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        tokens=tokens,
        guard=AccessGuard(tokens),
        auth_service=AuthService(users_repo, hasher, tokens),
        session_service=SessionService(sessions_repo),
        attendance_service=AttendanceService(attendance_repo),
    )


def build_container(settings: ModuleType) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(settings.DB_CONFIG))

    return wire(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        sessions_repo=MySQLSessionRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        tokens=TokenIssuer(
            settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            expires_minutes=settings.JWT_EXPIRES_MINUTES,
        ),
        hasher=PasswordHasher(settings.PASSWORD_HASH_METHOD),
    )
