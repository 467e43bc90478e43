from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance entry for an employee on a date.

    Nothing enforces one record per employee per date; duplicates are kept.
    """

    attendance_id: int
    employee_id: int
    work_date: date
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "employee_id": self.employee_id,
            "work_date": self.work_date.strftime("%Y-%m-%d"),
            "status": self.status.value,
        }
