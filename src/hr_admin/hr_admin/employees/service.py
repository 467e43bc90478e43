from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence, Union

from ..attendance.repository import AttendanceRepository
from ..common.validators import optional_date, optional_salary, require_non_empty
from ..core.exceptions import NotFoundError
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator
from ..payroll.model import PayrollResult
from .model import Employee
from .repository import EmployeeRepository
from .seniority import years_of_service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeForm:
    """Validated employee fields, as typed in by an administrator."""

    name: str
    position: str
    department: str
    hire_date: Optional[date]
    salary: Optional[Decimal]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EmployeeForm":
        return cls(
            name=require_non_empty(data.get("name"), "name"),
            position=str(data.get("position") or "").strip(),
            department=str(data.get("department") or "").strip(),
            hire_date=optional_date(data.get("hire_date"), "hire_date"),
            salary=optional_salary(data.get("salary")),
        )


@dataclass(frozen=True)
class EmployeeOverview:
    employee: Employee
    years_of_service: Union[int, str]
    payroll: PayrollResult

    def to_dict(self) -> dict:
        return {
            "employee": self.employee.to_dict(),
            "years_of_service": self.years_of_service,
            "payroll": self.payroll.to_dict(),
        }


class EmployeeService:
    """Use cases: maintain the employee directory."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator()

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def create_employee(self, data: Mapping[str, Any]) -> int:
        form = EmployeeForm.from_mapping(data)
        employee_id = self._employees.create(
            name=form.name,
            position=form.position,
            department=form.department,
            hire_date=form.hire_date,
            salary=form.salary,
        )
        logger.info("Created employee %s (%s)", employee_id, form.name)
        return employee_id

    def update_employee(self, employee_id: int, data: Mapping[str, Any]) -> Employee:
        form = EmployeeForm.from_mapping(data)
        ok = self._employees.update(
            employee_id=int(employee_id),
            name=form.name,
            position=form.position,
            department=form.department,
            hire_date=form.hire_date,
            salary=form.salary,
        )
        if not ok:
            raise NotFoundError(f"Employee {employee_id} not found")
        logger.info("Updated employee %s", employee_id)
        return self.get_employee(employee_id)

    def delete_employee(self, employee_id: int) -> None:
        if not self._employees.delete_by_id(int(employee_id)):
            raise NotFoundError(f"Employee {employee_id} not found")
        logger.info("Deleted employee %s", employee_id)

    def employee_overview(self, employee_id: int, *, today: Optional[date] = None) -> EmployeeOverview:
        employee = self.get_employee(employee_id)
        records = self._attendance.list_for_employee(employee.employee_id)
        return EmployeeOverview(
            employee=employee,
            years_of_service=years_of_service(employee.hire_date, today),
            payroll=self._calculator.compute(employee, records),
        )
