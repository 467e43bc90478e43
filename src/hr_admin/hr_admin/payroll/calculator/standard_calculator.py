from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Optional

from ...attendance.model import AttendanceRecord
from ...core.constants import DEDUCTION_RATE
from ...core.enums import AttendanceStatus
from ...employees.model import Employee
from ..model import PayrollResult, to_money
from .base import PayrollCalculator

logger = logging.getLogger(__name__)


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: each unjustified absence costs `deduction_rate` of the base salary.

    The deduction is not capped, so enough absences drive the net salary below zero.
    """

    def __init__(self, deduction_rate: Decimal = DEDUCTION_RATE):
        self._deduction_rate = Decimal(str(deduction_rate))

    @property
    def deduction_rate(self) -> Decimal:
        return self._deduction_rate

    def compute(self, employee: Employee, attendance_records: Iterable[AttendanceRecord]) -> PayrollResult:
        if not employee.salary:
            return PayrollResult.zero()

        base_salary = Decimal(str(employee.salary))
        absences = sum(
            1
            for r in attendance_records
            if r.employee_id == employee.employee_id and r.status == AttendanceStatus.UNJUSTIFIED_ABSENCE
        )
        deduction = to_money(absences * self._deduction_rate * base_salary)
        net_salary = to_money(base_salary) - deduction

        if net_salary < 0:
            logger.warning(
                "Net salary of employee %s is negative (%s) after %d unjustified absences",
                employee.employee_id,
                net_salary,
                absences,
            )

        return PayrollResult(
            base_salary=to_money(base_salary),
            unjustified_absence_days=absences,
            deduction=deduction,
            net_salary=net_salary,
        )


_default_calculator = StandardPayrollCalculator()


def compute_payroll(
    employee: Employee,
    attendance_records: Iterable[AttendanceRecord],
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> PayrollResult:
    return (calculator or _default_calculator).compute(employee, attendance_records)
