from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Review


class ReviewRepository(Protocol):
    def list_all(self) -> Sequence[Review]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[Review]:
        raise NotImplementedError

    def create(self, *, employee_id: int, review_date: date, score: int, comment: str) -> int:
        raise NotImplementedError
