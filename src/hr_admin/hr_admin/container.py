from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEDUCTION_RATE
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .reports.service import DailyReportService
from .reviews.mysql_review_repository import MySQLReviewRepository
from .reviews.repository import ReviewRepository
from .reviews.service import ReviewService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    reviews_repo: ReviewRepository
    leaves_repo: LeaveRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    review_service: ReviewService
    leave_service: LeaveService
    report_service: DailyReportService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    reviews_repo: ReviewRepository,
    leaves_repo: LeaveRepository,
    deduction_rate: Decimal = DEDUCTION_RATE,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over any set of repositories (MySQL in the app, fakes in tests)."""

    calculator = StandardPayrollCalculator(deduction_rate=deduction_rate)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        reviews_repo=reviews_repo,
        leaves_repo=leaves_repo,
        employee_service=EmployeeService(employees_repo, attendance_repo, calculator=calculator),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
        review_service=ReviewService(reviews_repo, employees_repo),
        leave_service=LeaveService(leaves_repo, employees_repo),
        report_service=DailyReportService(
            employees_repo,
            reviews_repo,
            attendance_repo,
            leaves_repo,
            calculator=calculator,
        ),
    )


def build_container(*, db_config: dict, deduction_rate: Decimal = DEDUCTION_RATE) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        reviews_repo=MySQLReviewRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
        deduction_rate=deduction_rate,
        conn=conn,
    )
