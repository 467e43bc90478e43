from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import format_date


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee record.

    Plain data object, no database access here.
    """

    employee_id: int
    name: str
    position: str
    department: str
    hire_date: Optional[date] = None
    salary: Optional[Decimal] = None

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "position": self.position,
            "department": self.department,
            "hire_date": format_date(self.hire_date),
            "salary": f"{self.salary:.2f}" if self.salary is not None else None,
        }
