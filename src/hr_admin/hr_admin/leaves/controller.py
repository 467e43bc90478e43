from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import handle_domain_errors, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    @app.route("/api/employees/<int:employee_id>/leaves", methods=["GET"], endpoint="list_leaves")
    @handle_domain_errors
    def list_leaves(employee_id: int):
        return jsonify([r.to_dict() for r in service.list_for_employee(employee_id)])

    @app.route("/api/employees/<int:employee_id>/leaves", methods=["POST"], endpoint="submit_leave")
    @handle_domain_errors
    def submit_leave(employee_id: int):
        data = json_body()
        request_id = service.submit(
            employee_id=employee_id,
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
            reason=data.get("reason") or "",
        )
        return jsonify({"request_id": request_id, "status": "pending"}), 201

    @app.route("/api/leaves/pending", methods=["GET"], endpoint="pending_leaves")
    @handle_domain_errors
    def pending_leaves():
        return jsonify([r.to_dict() for r in service.list_pending()])

    @app.route("/api/leaves/<int:request_id>/approve", methods=["POST"], endpoint="approve_leave")
    @handle_domain_errors
    def approve_leave(request_id: int):
        return jsonify(service.approve(request_id=request_id).to_dict())

    @app.route("/api/leaves/<int:request_id>/reject", methods=["POST"], endpoint="reject_leave")
    @handle_domain_errors
    def reject_leave(request_id: int):
        return jsonify(service.reject(request_id=request_id).to_dict())
