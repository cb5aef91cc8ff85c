from __future__ import annotations

from datetime import date as calendar_date
from typing import Optional

import pytest

from emargement.attendance.model import AttendanceRecord
from emargement.auth.passwords import PasswordHasher
from emargement.auth.tokens import TokenIssuer
from emargement.container import wire
from emargement.core.enums import Role
from emargement.core.exceptions import ConflictError, StoreError
from emargement.main import create_app
from emargement.sessions.model import TrainingSession
from emargement.users.model import User

JWT_SECRET = "test-jwt-secret"


class InMemoryUsers:
    def __init__(self):
        self.by_id: dict[int, User] = {}
        self._id = 0

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.by_id.get(int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.by_id.values() if u.email == email), None)

    def create_user(self, *, name: str, email: str, password_hash: str, role: Role) -> int:
        if self.get_by_email(email):
            raise ConflictError(f"Duplicate entry '{email}' for key 'users.email'")
        self._id += 1
        self.by_id[self._id] = User(user_id=self._id, name=name, email=email, password_hash=password_hash, role=role)
        return self._id

    def delete_by_id(self, user_id: int) -> bool:
        return self.by_id.pop(int(user_id), None) is not None


def _as_date_column(value: str) -> calendar_date:
    # Same contract as the MySQL DATE column: time part dropped, garbage rejected.
    try:
        return calendar_date.fromisoformat(str(value)[:10])
    except ValueError:
        raise StoreError(f"Incorrect date value: '{value}' for column 'date'") from None


class InMemorySessions:
    def __init__(self):
        self.by_id: dict[int, TrainingSession] = {}
        self._id = 0

    def list_all(self):
        return [self.by_id[k] for k in sorted(self.by_id)]

    def get_by_id(self, session_id: int) -> Optional[TrainingSession]:
        return self.by_id.get(int(session_id))

    def create(self, *, title: str, date: str, trainer_id: int) -> int:
        stored = _as_date_column(date)
        self._id += 1
        self.by_id[self._id] = TrainingSession(session_id=self._id, title=title, date=stored, trainer_id=trainer_id)
        return self._id

    def update(self, *, session_id: int, title: str, date: str) -> bool:
        stored = _as_date_column(date)
        current = self.by_id.get(int(session_id))
        if not current:
            return False
        self.by_id[current.session_id] = TrainingSession(
            session_id=current.session_id, title=title, date=stored, trainer_id=current.trainer_id
        )
        return True

    def delete(self, *, session_id: int) -> bool:
        return self.by_id.pop(int(session_id), None) is not None


class InMemoryAttendance:
    def __init__(self):
        self.rows: list[AttendanceRecord] = []

    def create(self, *, session_id: int, student_id: int, present: bool) -> int:
        record = AttendanceRecord(
            record_id=len(self.rows) + 1,
            session_id=int(session_id),
            student_id=int(student_id),
            present=bool(present),
        )
        self.rows.append(record)
        return record.record_id

    def list_for_session(self, session_id: int):
        return [r for r in self.rows if r.session_id == int(session_id)]


class BrokenStore:
    """Stands in for any repository whose database is unreachable."""

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise StoreError("Can't connect to MySQL server on 'localhost:3306'")

        return fail


@pytest.fixture
def users_repo():
    return InMemoryUsers()


@pytest.fixture
def sessions_repo():
    return InMemorySessions()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def hasher():
    return PasswordHasher("pbkdf2:sha256:1000")


@pytest.fixture
def tokens():
    return TokenIssuer(JWT_SECRET, expires_minutes=60)


@pytest.fixture
def container(users_repo, sessions_repo, attendance_repo, tokens, hasher):
    return wire(
        users_repo=users_repo,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        tokens=tokens,
        hasher=hasher,
    )


@pytest.fixture
def app(container):
    return create_app("emargement.config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(users_repo, hasher):
    def _make(email: str, role: Role, password: str = "secret123", name: str = "Someone") -> User:
        user_id = users_repo.create_user(name=name, email=email, password_hash=hasher.hash(password), role=role)
        return users_repo.get_by_id(user_id)

    return _make


@pytest.fixture
def auth_header(tokens):
    def _header(user: User) -> dict:
        return {"Authorization": f"Bearer {tokens.issue(user_id=user.user_id, role=user.role)}"}

    return _header


@pytest.fixture
def trainer(make_user):
    return make_user("formateur@example.com", Role.TRAINER, name="Alice Formateur")


@pytest.fixture
def student(make_user):
    return make_user("etudiant@example.com", Role.STUDENT, name="Bob Etudiant")


@pytest.fixture
def broken_store():
    return BrokenStore()


@pytest.fixture
def build_client(users_repo, sessions_repo, attendance_repo, tokens, hasher):
    """Test client whose container swaps in the given repositories."""

    def _build(**overrides):
        repos = {
            "users_repo": users_repo,
            "sessions_repo": sessions_repo,
            "attendance_repo": attendance_repo,
        }
        repos.update(overrides)
        container = wire(tokens=tokens, hasher=hasher, **repos)
        return create_app("emargement.config.testing", container=container).test_client()

    return _build
