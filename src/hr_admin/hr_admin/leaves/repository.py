from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_all(self) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def list_requests(
        self,
        *,
        status: Optional[LeaveStatus] = None,
        employee_id: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Sequence[LeaveRequest]:
        """Requests in insertion order; `limit=None` returns every match."""

        raise NotImplementedError

    def create(self, *, employee_id: int, start_date: date, end_date: date, reason: str) -> int:
        """Always stores the request as PENDING."""

        raise NotImplementedError

    def decide(self, *, request_id: int, status: LeaveStatus) -> bool:
        """Move a PENDING request to `status`. Returns False if it was not pending."""

        raise NotImplementedError
