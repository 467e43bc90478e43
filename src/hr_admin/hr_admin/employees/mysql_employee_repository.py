from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_decimal
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, name, position, department, hire_date, salary"


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        name=row["name"],
        position=row.get("position") or "",
        department=row.get("department") or "",
        hire_date=row.get("hire_date"),
        salary=normalize_mysql_decimal(row.get("salary")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY employee_id")
            return [_to_employee(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        name: str,
        position: str,
        department: str,
        hire_date: Optional[date],
        salary: Optional[Decimal],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, position, department, hire_date, salary)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, position, department, hire_date, salary),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        employee_id: int,
        name: str,
        position: str,
        department: str,
        hire_date: Optional[date],
        salary: Optional[Decimal],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, position=%s, department=%s, hire_date=%s, salary=%s
                WHERE employee_id=%s
                """,
                (name, position, department, hire_date, salary, int(employee_id)),
            )
            return self._exists(cur, employee_id)

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0

    @staticmethod
    def _exists(cur, employee_id: int) -> bool:
        # MySQL reports 0 affected rows when an UPDATE changes nothing.
        cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (int(employee_id),))
        return fetchone(cur) is not None
