from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import require_date, require_non_empty
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import LeaveStatus
from ..core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, leaves: LeaveRepository, employees: EmployeeRepository):
        self._leaves = leaves
        self._employees = employees

    def submit(self, *, employee_id: int, start_date: Any, end_date: Any, reason: str) -> int:
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError(f"Employee {employee_id} not found")

        start = require_date(start_date, "start_date")
        end = require_date(end_date, "end_date")
        if end < start:
            raise ValidationError("end_date must be on or after start_date")

        reason = require_non_empty(reason, "reason")
        request_id = self._leaves.create(employee_id=int(employee_id), start_date=start, end_date=end, reason=reason)
        logger.info("Leave request %s submitted for employee %s (%s..%s)", request_id, employee_id, start, end)
        return request_id

    def approve(self, *, request_id: int) -> LeaveRequest:
        return self._decide(int(request_id), LeaveStatus.APPROVED)

    def reject(self, *, request_id: int) -> LeaveRequest:
        return self._decide(int(request_id), LeaveStatus.REJECTED)

    def _decide(self, request_id: int, status: LeaveStatus) -> LeaveRequest:
        req = self._leaves.get_by_id(request_id)
        if not req:
            raise NotFoundError(f"Leave request {request_id} not found")

        try:
            decided = req.transition_to(status)
        except InvalidTransitionError:
            logger.warning("Refused to mark leave request %s %s: already %s", request_id, status.value, req.status.value)
            raise

        if not self._leaves.decide(request_id=request_id, status=status):
            # someone else decided it between our read and our write
            raise InvalidTransitionError(f"Leave request {request_id} has already been decided")

        logger.info("Leave request %s %s", request_id, status.value)
        return decided

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveRequest]:
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError(f"Employee {employee_id} not found")
        return self._leaves.list_requests(employee_id=int(employee_id))

    def list_pending(self) -> Sequence[LeaveRequest]:
        return self._leaves.list_requests(status=LeaveStatus.PENDING, limit=DEFAULT_LIST_LIMIT)
