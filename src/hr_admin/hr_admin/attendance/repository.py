from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        """All records in insertion order."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(self, *, employee_id: int, work_date: date, status: AttendanceStatus) -> int:
        raise NotImplementedError

    def update_status(self, *, attendance_id: int, status: AttendanceStatus) -> bool:
        raise NotImplementedError
