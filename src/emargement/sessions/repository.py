from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TrainingSession


class SessionRepository(Protocol):
    def list_all(self) -> Sequence[TrainingSession]:
        raise NotImplementedError

    def get_by_id(self, session_id: int) -> Optional[TrainingSession]:
        raise NotImplementedError

    def create(self, *, title: str, date: str, trainer_id: int) -> int:
        raise NotImplementedError

    def update(self, *, session_id: int, title: str, date: str) -> bool:
        """Overwrite title and date. Returns False when no row matched."""

        raise NotImplementedError

    def delete(self, *, session_id: int) -> bool:
        raise NotImplementedError
