from datetime import date

import pytest

from hr_admin.core.enums import LeaveStatus
from hr_admin.core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from hr_admin.leaves.model import LeaveRequest


def _submit(container, employee_id):
    return container.leave_service.submit(
        employee_id=employee_id, start_date="2024-09-02", end_date="2024-09-06", reason="Holiday"
    )


def test_new_request_is_pending(container, alice, leaves_repo):
    rid = _submit(container, alice.employee_id)

    assert leaves_repo.get_by_id(rid).status == LeaveStatus.PENDING
    assert [r.request_id for r in container.leave_service.list_pending()] == [rid]


def test_approve_then_no_further_transition(container, alice):
    rid = _submit(container, alice.employee_id)

    assert container.leave_service.approve(request_id=rid).status == LeaveStatus.APPROVED
    with pytest.raises(InvalidTransitionError):
        container.leave_service.reject(request_id=rid)
    with pytest.raises(InvalidTransitionError):
        container.leave_service.approve(request_id=rid)


def test_reject_is_terminal(container, alice, leaves_repo):
    rid = _submit(container, alice.employee_id)

    container.leave_service.reject(request_id=rid)

    with pytest.raises(InvalidTransitionError):
        container.leave_service.approve(request_id=rid)
    assert leaves_repo.get_by_id(rid).status == LeaveStatus.REJECTED


def test_repository_refusing_the_write_is_reported(container, alice, leaves_repo, monkeypatch):
    rid = _submit(container, alice.employee_id)
    monkeypatch.setattr(leaves_repo, "decide", lambda **kwargs: False)

    with pytest.raises(InvalidTransitionError):
        container.leave_service.approve(request_id=rid)


def test_end_before_start_is_rejected(container, alice):
    with pytest.raises(ValidationError):
        container.leave_service.submit(
            employee_id=alice.employee_id, start_date="2024-09-06", end_date="2024-09-02", reason="x"
        )


def test_reason_is_required(container, alice):
    with pytest.raises(ValidationError):
        container.leave_service.submit(
            employee_id=alice.employee_id, start_date="2024-09-02", end_date="2024-09-02", reason="  "
        )


def test_unknown_request(container):
    with pytest.raises(NotFoundError):
        container.leave_service.approve(request_id=42)


def test_model_transitions():
    req = LeaveRequest(request_id=1, employee_id=1, start_date=date(2024, 1, 1), end_date=date(2024, 1, 2), reason="r")

    approved = req.transition_to(LeaveStatus.APPROVED)

    assert req.status == LeaveStatus.PENDING
    assert approved.is_decided
    assert not approved.can_transition_to(LeaveStatus.REJECTED)
    with pytest.raises(InvalidTransitionError):
        approved.transition_to(LeaveStatus.PENDING)


def test_employee_leave_history_is_not_truncated(container, alice, leaves_repo):
    for _ in range(205):
        leaves_repo.create(employee_id=alice.employee_id, start_date=date(2024, 1, 1), end_date=date(2024, 1, 1), reason="r")

    assert len(container.leave_service.list_for_employee(alice.employee_id)) == 205
