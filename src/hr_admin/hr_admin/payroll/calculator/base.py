from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...attendance.model import AttendanceRecord
from ...employees.model import Employee
from ..model import PayrollResult


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(self, employee: Employee, attendance_records: Iterable[AttendanceRecord]) -> PayrollResult:
        raise NotImplementedError
