from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_int
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .model import Review
from .repository import ReviewRepository

logger = logging.getLogger(__name__)


class ReviewService:
    def __init__(self, reviews: ReviewRepository, employees: EmployeeRepository):
        self._reviews = reviews
        self._employees = employees

    def add_review(self, *, employee_id: int, score: Any, comment: Optional[str], today: Optional[date] = None) -> int:
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError(f"Employee {employee_id} not found")

        # 1-5 is what the form offers; out-of-range scores are stored as given
        parsed_score = require_int(score, "score")
        review_id = self._reviews.create(
            employee_id=int(employee_id),
            review_date=today or today_local(),
            score=parsed_score,
            comment=(comment or "").strip(),
        )
        logger.info("Added review %s for employee %s (score=%s)", review_id, employee_id, parsed_score)
        return review_id

    def list_for_employee(self, employee_id: int) -> Sequence[Review]:
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError(f"Employee {employee_id} not found")
        return self._reviews.list_for_employee(int(employee_id))
