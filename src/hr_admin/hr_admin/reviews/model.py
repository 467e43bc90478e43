from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Review:
    """Domain entity: a performance review written by a manager.

    Score is meant to be 1-5 but the range is only a hint for the UI.
    """

    review_id: int
    employee_id: int
    review_date: date
    score: int
    comment: str

    def to_dict(self) -> dict:
        return {
            "review_id": self.review_id,
            "employee_id": self.employee_id,
            "review_date": self.review_date.strftime("%Y-%m-%d"),
            "score": self.score,
            "comment": self.comment,
        }
