from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Union


@dataclass(frozen=True)
class TrainingSession:
    """Domain entity: a training session run by a trainer."""

    session_id: int
    title: str
    date: Union[date, str]
    trainer_id: int

    def to_dict(self) -> dict:
        value = self.date
        if isinstance(value, datetime):
            value = value.date()
        return {
            "id": self.session_id,
            "title": self.title,
            "date": value.isoformat() if isinstance(value, date) else value,
            "formateur_id": self.trainer_id,
        }
