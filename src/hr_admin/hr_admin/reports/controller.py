from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import handle_domain_errors
from ..common.validators import optional_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/daily", methods=["GET"], endpoint="daily_report")
    @handle_domain_errors
    def daily_report():
        # ?today=YYYY-MM-DD pins the seniority reference date
        today = optional_date(request.args.get("today"), "today")
        entries = container.report_service.build(today=today)
        return jsonify([e.to_dict() for e in entries])
