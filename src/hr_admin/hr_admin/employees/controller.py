from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import handle_domain_errors, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @handle_domain_errors
    def list_employees():
        return jsonify([e.to_dict() for e in service.list_employees()])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @handle_domain_errors
    def create_employee():
        employee_id = service.create_employee(json_body())
        return jsonify(service.get_employee(employee_id).to_dict()), 201

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    @handle_domain_errors
    def get_employee(employee_id: int):
        return jsonify(service.get_employee(employee_id).to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    @handle_domain_errors
    def update_employee(employee_id: int):
        return jsonify(service.update_employee(employee_id, json_body()).to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @handle_domain_errors
    def delete_employee(employee_id: int):
        service.delete_employee(employee_id)
        return "", 204

    @app.route("/api/employees/<int:employee_id>/overview", methods=["GET"], endpoint="employee_overview")
    @handle_domain_errors
    def employee_overview(employee_id: int):
        return jsonify(service.employee_overview(employee_id).to_dict())
