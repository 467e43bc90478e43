from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from ..attendance.repository import AttendanceRepository
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator
from ..reviews.repository import ReviewRepository
from .builder import build_daily_report
from .model import EmployeeReportEntry

logger = logging.getLogger(__name__)


class DailyReportService:
    def __init__(
        self,
        employees: EmployeeRepository,
        reviews: ReviewRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._reviews = reviews
        self._attendance = attendance
        self._leaves = leaves
        self._calculator = calculator or StandardPayrollCalculator()

    def build(self, *, today: Optional[date] = None) -> List[EmployeeReportEntry]:
        employees = self._employees.list_all()
        entries = build_daily_report(
            employees,
            self._reviews.list_all(),
            self._attendance.list_all(),
            self._leaves.list_all(),
            calculator=self._calculator,
            today=today,
        )
        logger.debug("Daily report built for %d employees", len(entries))
        return entries
