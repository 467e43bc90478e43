from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import optional_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def parse_status(value: Any) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value or "").strip())
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"Unknown attendance status {value!r} (expected one of: {allowed})")


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def _require_employee(self, employee_id: int) -> None:
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError(f"Employee {employee_id} not found")

    def record_attendance(
        self,
        *,
        employee_id: int,
        work_date: Optional[Any] = None,
        status: Any = AttendanceStatus.PRESENT,
    ) -> int:
        """Add an attendance entry. Date defaults to today, status to present."""

        self._require_employee(employee_id)
        day: date = optional_date(work_date, "work_date") or today_local()
        parsed = parse_status(status)

        attendance_id = self._attendance.create(employee_id=int(employee_id), work_date=day, status=parsed)
        logger.info("Recorded %s for employee %s on %s", parsed.value, employee_id, day)
        return attendance_id

    def update_status(self, *, attendance_id: int, status: Any) -> AttendanceRecord:
        parsed = parse_status(status)
        if not self._attendance.update_status(attendance_id=int(attendance_id), status=parsed):
            raise NotFoundError(f"Attendance record {attendance_id} not found")
        logger.info("Attendance record %s set to %s", attendance_id, parsed.value)

        record = self._attendance.get_by_id(int(attendance_id))
        if not record:
            raise NotFoundError(f"Attendance record {attendance_id} not found")
        return record

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        self._require_employee(employee_id)
        return self._attendance.list_for_employee(int(employee_id))
