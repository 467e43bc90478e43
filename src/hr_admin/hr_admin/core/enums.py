from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the database."""

    PRESENT = "present"
    UNJUSTIFIED_ABSENCE = "absent"
    JUSTIFIED_ABSENCE = "justified_absence"


class LeaveStatus(str, Enum):
    """Leave request approval flow. APPROVED and REJECTED are terminal."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
