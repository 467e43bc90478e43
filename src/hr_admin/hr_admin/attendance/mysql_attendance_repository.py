from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(row["attendance_id"]),
        employee_id=int(row["employee_id"]),
        work_date=row["work_date"],
        status=AttendanceStatus(row["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT attendance_id, employee_id, work_date, status FROM attendance WHERE attendance_id=%s",
                (int(attendance_id),),
            )
            row = fetchone(cur)
            return _to_record(row) if row else None

    def list_all(self) -> Sequence[AttendanceRecord]:
        # attendance_id is AUTO_INCREMENT, so this is insertion order
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT attendance_id, employee_id, work_date, status FROM attendance ORDER BY attendance_id")
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, employee_id, work_date, status
                FROM attendance
                WHERE employee_id=%s
                ORDER BY attendance_id
                """,
                (int(employee_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def create(self, *, employee_id: int, work_date: date, status: AttendanceStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO attendance(employee_id, work_date, status) VALUES(%s,%s,%s)",
                (int(employee_id), work_date, status.value),
            )
            return int(cur.lastrowid)

    def update_status(self, *, attendance_id: int, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance SET status=%s WHERE attendance_id=%s",
                (status.value, int(attendance_id)),
            )
            cur.execute("SELECT 1 AS found FROM attendance WHERE attendance_id=%s", (int(attendance_id),))
            return fetchone(cur) is not None
