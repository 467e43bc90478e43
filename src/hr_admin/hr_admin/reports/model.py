from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from ..employees.model import Employee
from ..leaves.model import LeaveRequest
from ..payroll.model import PayrollResult
from ..reviews.model import Review


@dataclass(frozen=True)
class EmployeeReportEntry:
    """One employee's block of the daily report."""

    employee: Employee
    current_status: str
    years_of_service: Union[int, str]
    leave_requests: Tuple[LeaveRequest, ...]
    reviews: Tuple[Review, ...]
    payroll: PayrollResult

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee.employee_id,
            "name": self.employee.name,
            "position": self.employee.position,
            "department": self.employee.department,
            "current_status": self.current_status,
            "years_of_service": self.years_of_service,
            "leave_requests": [
                {
                    "request_id": r.request_id,
                    "start_date": r.start_date.strftime("%Y-%m-%d"),
                    "end_date": r.end_date.strftime("%Y-%m-%d"),
                    "status": r.status.value,
                }
                for r in self.leave_requests
            ],
            "reviews": [
                {
                    "review_date": r.review_date.strftime("%Y-%m-%d"),
                    "score": r.score,
                    "comment": r.comment,
                }
                for r in self.reviews
            ],
            "payroll": self.payroll.to_dict(),
        }
