from __future__ import annotations

from datetime import date
from decimal import Decimal

from hr_admin.attendance.model import AttendanceRecord
from hr_admin.core.constants import UNREGISTERED
from hr_admin.core.enums import AttendanceStatus, LeaveStatus
from hr_admin.employees.model import Employee
from hr_admin.leaves.model import LeaveRequest
from hr_admin.reports.builder import build_daily_report
from hr_admin.reviews.model import Review

TODAY = date(2024, 8, 15)


def _emp(eid, salary=None, hire_date=None):
    return Employee(employee_id=eid, name=f"E{eid}", position="P", department="D", hire_date=hire_date, salary=salary)


def _att(aid, eid, day, status):
    return AttendanceRecord(attendance_id=aid, employee_id=eid, work_date=day, status=status)


def test_one_entry_per_employee_in_input_order():
    employees = [_emp(3), _emp(1), _emp(2)]

    report = build_daily_report(employees, [], [], [], today=TODAY)

    assert [e.employee.employee_id for e in report] == [3, 1, 2]
    for entry in report:
        assert entry.current_status == UNREGISTERED
        assert entry.leave_requests == ()
        assert entry.reviews == ()
        assert entry.payroll.net_salary == 0


def test_current_status_is_last_in_collection_order_not_latest_date():
    attendance = [
        _att(1, 1, date(2024, 8, 14), AttendanceStatus.PRESENT),
        _att(2, 1, date(2024, 8, 1), AttendanceStatus.JUSTIFIED_ABSENCE),
    ]

    [entry] = build_daily_report([_emp(1)], [], attendance, [], today=TODAY)

    assert entry.current_status == AttendanceStatus.JUSTIFIED_ABSENCE.value


def test_entry_groups_related_records_and_payroll():
    employees = [_emp(1, Decimal("3000"), date(2020, 8, 15)), _emp(2, Decimal("2000"))]
    attendance = [
        _att(1, 1, date(2024, 8, 1), AttendanceStatus.PRESENT),
        _att(2, 2, date(2024, 8, 1), AttendanceStatus.UNJUSTIFIED_ABSENCE),
        _att(3, 1, date(2024, 8, 2), AttendanceStatus.UNJUSTIFIED_ABSENCE),
        _att(4, 1, date(2024, 8, 3), AttendanceStatus.UNJUSTIFIED_ABSENCE),
    ]
    leaves = [
        LeaveRequest(1, 1, date(2024, 9, 1), date(2024, 9, 3), "Trip", LeaveStatus.APPROVED),
        LeaveRequest(2, 2, date(2024, 9, 1), date(2024, 9, 1), "Doctor", LeaveStatus.PENDING),
        LeaveRequest(3, 1, date(2024, 10, 1), date(2024, 10, 2), "Move", LeaveStatus.REJECTED),
    ]
    reviews = [Review(1, 1, date(2024, 6, 30), 4, "Good")]

    first, second = build_daily_report(employees, reviews, attendance, leaves, today=TODAY)

    assert first.current_status == "absent"
    assert first.years_of_service == 4
    assert [r.request_id for r in first.leave_requests] == [1, 3]
    assert [r.status for r in first.leave_requests] == [LeaveStatus.APPROVED, LeaveStatus.REJECTED]
    assert first.reviews == (reviews[0],)
    assert first.payroll.unjustified_absence_days == 2
    assert first.payroll.net_salary == Decimal("2700.00")

    assert second.years_of_service == "N/A"
    assert second.payroll.deduction == Decimal("100.00")
    assert [r.request_id for r in second.leave_requests] == [2]


def test_report_dict_shape():
    [entry] = build_daily_report(
        [_emp(1, Decimal("1000"))],
        [Review(1, 1, date(2024, 6, 30), 5, "Top")],
        [],
        [LeaveRequest(1, 1, date(2024, 9, 1), date(2024, 9, 2), "r")],
        today=TODAY,
    )

    data = entry.to_dict()

    assert data["current_status"] == "unregistered"
    assert data["leave_requests"] == [
        {"request_id": 1, "start_date": "2024-09-01", "end_date": "2024-09-02", "status": "pending"}
    ]
    assert data["reviews"] == [{"review_date": "2024-06-30", "score": 5, "comment": "Top"}]
    assert data["payroll"]["net_salary"] == "1000.00"


def test_inputs_are_not_mutated():
    attendance = [_att(1, 1, date(2024, 8, 1), AttendanceStatus.PRESENT)]
    snapshot = list(attendance)

    build_daily_report([_emp(1)], [], attendance, [], today=TODAY)

    assert attendance == snapshot


def test_service_reads_a_snapshot_of_every_repository(container, alice, attendance_repo, leaves_repo):
    attendance_repo.create(employee_id=alice.employee_id, work_date=date(2024, 8, 1), status=AttendanceStatus.PRESENT)
    leaves_repo.create(employee_id=alice.employee_id, start_date=date(2024, 9, 1), end_date=date(2024, 9, 2), reason="r")

    [entry] = container.report_service.build(today=TODAY)

    assert entry.employee == alice
    assert entry.current_status == "present"
    assert len(entry.leave_requests) == 1
    assert entry.payroll.net_salary == Decimal("3000.00")
