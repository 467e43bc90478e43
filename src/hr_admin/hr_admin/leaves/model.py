from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date

from ..core.enums import LeaveStatus
from ..core.exceptions import InvalidTransitionError

# pending -> approved | rejected; both targets are terminal
_ALLOWED_TRANSITIONS = {
    LeaveStatus.PENDING: {LeaveStatus.APPROVED, LeaveStatus.REJECTED},
    LeaveStatus.APPROVED: set(),
    LeaveStatus.REJECTED: set(),
}


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: int
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus = LeaveStatus.PENDING

    @property
    def is_decided(self) -> bool:
        return self.status != LeaveStatus.PENDING

    def can_transition_to(self, status: LeaveStatus) -> bool:
        return status in _ALLOWED_TRANSITIONS[self.status]

    def transition_to(self, status: LeaveStatus) -> "LeaveRequest":
        if not self.can_transition_to(status):
            raise InvalidTransitionError(
                f"Leave request {self.request_id} cannot go from {self.status.value} to {status.value}"
            )
        return replace(self, status=status)

    def to_dict(self) -> dict:
        return {
            "request_id": self.request_id,
            "employee_id": self.employee_id,
            "start_date": self.start_date.strftime("%Y-%m-%d"),
            "end_date": self.end_date.strftime("%Y-%m-%d"),
            "reason": self.reason,
            "status": self.status.value,
        }
