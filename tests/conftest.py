from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from hr_admin.attendance.model import AttendanceRecord
from hr_admin.container import build_services
from hr_admin.core.enums import AttendanceStatus, LeaveStatus
from hr_admin.employees.model import Employee
from hr_admin.leaves.model import LeaveRequest
from hr_admin.reviews.model import Review


class InMemoryEmployees:
    def __init__(self):
        self._rows: dict[int, Employee] = {}
        self._next_id = 1

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._rows.get(int(employee_id))

    def list_all(self):
        return list(self._rows.values())

    def create(self, *, name, position, department, hire_date, salary) -> int:
        eid = self._next_id
        self._next_id += 1
        self._rows[eid] = Employee(
            employee_id=eid,
            name=name,
            position=position,
            department=department,
            hire_date=hire_date,
            salary=salary,
        )
        return eid

    def update(self, *, employee_id, name, position, department, hire_date, salary) -> bool:
        current = self._rows.get(int(employee_id))
        if not current:
            return False
        self._rows[int(employee_id)] = replace(
            current, name=name, position=position, department=department, hire_date=hire_date, salary=salary
        )
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self._rows.pop(int(employee_id), None) is not None


class InMemoryAttendance:
    def __init__(self):
        self._rows: list[AttendanceRecord] = []

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return next((r for r in self._rows if r.attendance_id == int(attendance_id)), None)

    def list_all(self):
        return list(self._rows)

    def list_for_employee(self, employee_id: int):
        return [r for r in self._rows if r.employee_id == int(employee_id)]

    def create(self, *, employee_id: int, work_date: date, status: AttendanceStatus) -> int:
        aid = len(self._rows) + 1
        self._rows.append(AttendanceRecord(attendance_id=aid, employee_id=employee_id, work_date=work_date, status=status))
        return aid

    def update_status(self, *, attendance_id: int, status: AttendanceStatus) -> bool:
        for i, r in enumerate(self._rows):
            if r.attendance_id == int(attendance_id):
                self._rows[i] = replace(r, status=status)
                return True
        return False


class InMemoryReviews:
    def __init__(self):
        self._rows: list[Review] = []

    def list_all(self):
        return list(self._rows)

    def list_for_employee(self, employee_id: int):
        return [r for r in self._rows if r.employee_id == int(employee_id)]

    def create(self, *, employee_id: int, review_date: date, score: int, comment: str) -> int:
        rid = len(self._rows) + 1
        self._rows.append(
            Review(review_id=rid, employee_id=employee_id, review_date=review_date, score=score, comment=comment)
        )
        return rid


class InMemoryLeaves:
    def __init__(self):
        self._rows: dict[int, LeaveRequest] = {}

    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        return self._rows.get(int(request_id))

    def list_all(self):
        return list(self._rows.values())

    def list_requests(self, *, status=None, employee_id=None, limit=None):
        rows = [
            r
            for r in self._rows.values()
            if (status is None or r.status == status) and (employee_id is None or r.employee_id == employee_id)
        ]
        return rows[:limit]

    def create(self, *, employee_id: int, start_date: date, end_date: date, reason: str) -> int:
        rid = len(self._rows) + 1
        self._rows[rid] = LeaveRequest(
            request_id=rid,
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            status=LeaveStatus.PENDING,
        )
        return rid

    def decide(self, *, request_id: int, status: LeaveStatus) -> bool:
        req = self._rows.get(int(request_id))
        if not req or req.status != LeaveStatus.PENDING:
            return False
        self._rows[int(request_id)] = replace(req, status=status)
        return True


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def reviews_repo():
    return InMemoryReviews()


@pytest.fixture
def leaves_repo():
    return InMemoryLeaves()


@pytest.fixture
def container(employees_repo, attendance_repo, reviews_repo, leaves_repo):
    return build_services(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        reviews_repo=reviews_repo,
        leaves_repo=leaves_repo,
    )


@pytest.fixture
def alice(employees_repo) -> Employee:
    eid = employees_repo.create(
        name="Alice",
        position="Accountant",
        department="Finance",
        hire_date=date(2020, 8, 15),
        salary=Decimal("3000"),
    )
    return employees_repo.get_by_id(eid)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from hr_admin.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
