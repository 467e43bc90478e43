from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import handle_domain_errors, json_body
from ..container import Container
from ..core.enums import AttendanceStatus


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/employees/<int:employee_id>/attendance", methods=["GET"], endpoint="list_attendance")
    @handle_domain_errors
    def list_attendance(employee_id: int):
        return jsonify([r.to_dict() for r in service.list_for_employee(employee_id)])

    @app.route("/api/employees/<int:employee_id>/attendance", methods=["POST"], endpoint="record_attendance")
    @handle_domain_errors
    def record_attendance(employee_id: int):
        data = json_body()
        attendance_id = service.record_attendance(
            employee_id=employee_id,
            work_date=data.get("work_date"),
            status=data.get("status") or AttendanceStatus.PRESENT,
        )
        return jsonify({"attendance_id": attendance_id}), 201

    @app.route("/api/attendance/<int:attendance_id>", methods=["PATCH"], endpoint="update_attendance")
    @handle_domain_errors
    def update_attendance(attendance_id: int):
        record = service.update_status(attendance_id=attendance_id, status=json_body().get("status"))
        return jsonify(record.to_dict())
