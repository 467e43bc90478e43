from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import today_local
from ..core.constants import UNREGISTERED
from ..employees.model import Employee
from ..employees.seniority import years_of_service
from ..leaves.model import LeaveRequest
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator
from ..reviews.model import Review
from .model import EmployeeReportEntry


def current_status(records: Sequence[AttendanceRecord]) -> str:
    """Status of the last record in collection order, not the latest by date."""

    if not records:
        return UNREGISTERED
    return records[-1].status.value


def build_daily_report(
    employees: Iterable[Employee],
    reviews: Iterable[Review],
    attendance: Iterable[AttendanceRecord],
    leave_requests: Iterable[LeaveRequest],
    *,
    calculator: Optional[PayrollCalculator] = None,
    today: Optional[date] = None,
) -> List[EmployeeReportEntry]:
    """One entry per employee, in the order the employees were given."""

    calculator = calculator or StandardPayrollCalculator()
    today = today or today_local()

    reviews = list(reviews)
    attendance = list(attendance)
    leave_requests = list(leave_requests)

    entries: List[EmployeeReportEntry] = []
    for employee in employees:
        emp_id = employee.employee_id
        emp_attendance = [a for a in attendance if a.employee_id == emp_id]

        entries.append(
            EmployeeReportEntry(
                employee=employee,
                current_status=current_status(emp_attendance),
                years_of_service=years_of_service(employee.hire_date, today),
                leave_requests=tuple(r for r in leave_requests if r.employee_id == emp_id),
                reviews=tuple(r for r in reviews if r.employee_id == emp_id),
                payroll=calculator.compute(employee, emp_attendance),
            )
        )
    return entries
