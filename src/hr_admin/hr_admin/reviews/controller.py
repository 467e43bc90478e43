from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import handle_domain_errors, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.review_service

    @app.route("/api/employees/<int:employee_id>/reviews", methods=["GET"], endpoint="list_reviews")
    @handle_domain_errors
    def list_reviews(employee_id: int):
        return jsonify([r.to_dict() for r in service.list_for_employee(employee_id)])

    @app.route("/api/employees/<int:employee_id>/reviews", methods=["POST"], endpoint="add_review")
    @handle_domain_errors
    def add_review(employee_id: int):
        data = json_body()
        review_id = service.add_review(employee_id=employee_id, score=data.get("score"), comment=data.get("comment"))
        return jsonify({"review_id": review_id}), 201
